"""Diagnostics package."""

from .errors import (
    PatternDiagnostic,
    PatternSemanticError,
    InvalidFormatError,
    InvalidTypeError,
    DuplicateNamedParameterError,
    TypeRegistryError,
    InvalidTypeNameError,
    DuplicateTypeNameError,
)

__all__ = [
    "PatternDiagnostic",
    "PatternSemanticError",
    "InvalidFormatError",
    "InvalidTypeError",
    "DuplicateNamedParameterError",
    "TypeRegistryError",
    "InvalidTypeNameError",
    "DuplicateTypeNameError",
]
