"""
trailhead.patterns - expression compiler and URL matcher.

This package provides:
- A compact expression language for path shapes and query parameters
- A registry of named scalar types (built-in and custom)
- Compilation of expressions into immutable, reusable patterns
- Matching of URLs against compiled patterns into typed values
- Diagnostics for malformed expressions and type registries
"""

from .compiler.params import (
    ParamKind,
    RequiredParam,
    OptionalParam,
    LiteralParam,
    PathParam,
    QueryParam,
)
from .compiler.compiler import ExpressionCompiler, CompiledPattern
from .types.registry import (
    Value,
    TypeDescriptor,
    CastorType,
    ArrayType,
    TypeRegistry,
)
from .diagnostics.errors import (
    PatternDiagnostic,
    PatternSemanticError,
    InvalidFormatError,
    InvalidTypeError,
    DuplicateNamedParameterError,
    TypeRegistryError,
    InvalidTypeNameError,
    DuplicateTypeNameError,
)
from .matcher import PatternMatcher, match_url

__all__ = [
    # Parameters
    "ParamKind",
    "RequiredParam",
    "OptionalParam",
    "LiteralParam",
    "PathParam",
    "QueryParam",
    # Compiler
    "ExpressionCompiler",
    "CompiledPattern",
    # Types
    "Value",
    "TypeDescriptor",
    "CastorType",
    "ArrayType",
    "TypeRegistry",
    # Diagnostics
    "PatternDiagnostic",
    "PatternSemanticError",
    "InvalidFormatError",
    "InvalidTypeError",
    "DuplicateNamedParameterError",
    "TypeRegistryError",
    "InvalidTypeNameError",
    "DuplicateTypeNameError",
    # Matcher
    "PatternMatcher",
    "match_url",
]
