"""Type registry package."""

from .registry import (
    Value,
    TypeDescriptor,
    IntType,
    StringType,
    BoolType,
    CastorType,
    ArrayType,
    BUILTIN_TYPES,
    TypeRegistry,
)

__all__ = [
    "Value",
    "TypeDescriptor",
    "IntType",
    "StringType",
    "BoolType",
    "CastorType",
    "ArrayType",
    "BUILTIN_TYPES",
    "TypeRegistry",
]
