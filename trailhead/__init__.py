"""
trailhead - URL pattern matching with typed parameters.

Compile compact expressions such as::

    /newsfeed/:postId{int}/?:unsub{bool?}

into reusable patterns, then resolve URLs against an ordered set of them
to extract typed values (first match wins).
"""

__version__ = "0.1.0"

from ._datastructures import URL, QueryItems
from .config import ConfigError, ConfigLoader, RouterConfig
from .patterns import (
    ArrayType,
    CastorType,
    CompiledPattern,
    DuplicateNamedParameterError,
    DuplicateTypeNameError,
    ExpressionCompiler,
    InvalidFormatError,
    InvalidTypeError,
    InvalidTypeNameError,
    LiteralParam,
    OptionalParam,
    PatternDiagnostic,
    PatternMatcher,
    RequiredParam,
    TypeDescriptor,
    TypeRegistry,
    match_url,
)
from .routing import (
    NO_GLOBAL_PARAMS,
    DecodeError,
    GlobalParamsMapping,
    RouteMatch,
    Router,
    decode,
    decoder_for,
)

__all__ = [
    # URL input
    "URL",
    "QueryItems",
    # Config
    "ConfigError",
    "ConfigLoader",
    "RouterConfig",
    # Types
    "TypeDescriptor",
    "CastorType",
    "ArrayType",
    "TypeRegistry",
    # Compiler
    "ExpressionCompiler",
    "CompiledPattern",
    "RequiredParam",
    "OptionalParam",
    "LiteralParam",
    # Matcher
    "PatternMatcher",
    "match_url",
    # Diagnostics
    "PatternDiagnostic",
    "InvalidFormatError",
    "InvalidTypeError",
    "DuplicateNamedParameterError",
    "InvalidTypeNameError",
    "DuplicateTypeNameError",
    # Routing
    "Router",
    "RouteMatch",
    "GlobalParamsMapping",
    "NO_GLOBAL_PARAMS",
    "DecodeError",
    "decode",
    "decoder_for",
]
