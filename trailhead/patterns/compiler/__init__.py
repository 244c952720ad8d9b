"""Compiler package for trailhead expressions."""

from .params import (
    ParamKind,
    RequiredParam,
    OptionalParam,
    LiteralParam,
    PathParam,
    QueryParam,
)
from .compiler import ExpressionCompiler, CompiledPattern

__all__ = [
    "ParamKind",
    "RequiredParam",
    "OptionalParam",
    "LiteralParam",
    "PathParam",
    "QueryParam",
    "ExpressionCompiler",
    "CompiledPattern",
]
