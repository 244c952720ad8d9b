"""
Diagnostic errors for trailhead expressions and type registries.

Every error here is a construction-time failure: it is raised while types
are registered or expressions are compiled, never while a URL is matched.
"""

from dataclasses import dataclass, field
from difflib import get_close_matches
from typing import Iterable, List, Optional


@dataclass(eq=False)
class PatternDiagnostic(Exception):
    """Base class for all trailhead diagnostics."""
    message: str
    expression: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return self.message

    def format(self) -> str:
        """Format diagnostic for display."""
        parts = [f"{self.__class__.__name__}: {self.message}"]
        if self.expression is not None:
            parts.append(f"  --> {self.expression}")

        if self.suggestions:
            parts.append("\nSuggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                parts.append(f"  {i}) {suggestion}")

        return "\n".join(parts)


class PatternSemanticError(PatternDiagnostic):
    """An expression cannot be compiled."""


class InvalidFormatError(PatternSemanticError):
    """Expression is structurally malformed."""


class InvalidTypeError(PatternSemanticError):
    """Expression references a type the registry does not know."""

    def __init__(
        self,
        type_name: str,
        *,
        expression: Optional[str] = None,
        known_types: Iterable[str] = (),
    ):
        suggestions = [
            f"Did you mean '{match}'?"
            for match in get_close_matches(type_name, list(known_types), n=3, cutoff=0.6)
        ]
        super().__init__(
            f'Unrecognized type: "{type_name}"',
            expression=expression,
            suggestions=suggestions,
        )
        self.type_name = type_name


class DuplicateNamedParameterError(PatternSemanticError):
    """A parameter name occurs more than once in one compiled pattern."""

    def __init__(self, name: str, *, expression: Optional[str] = None):
        super().__init__(
            f'Param name "{name}" can only be referenced once in expression',
            expression=expression,
            suggestions=[f"Rename one of the '{name}' parameters"],
        )
        self.name = name


class TypeRegistryError(PatternDiagnostic):
    """A type registry cannot be built from the given types."""


class InvalidTypeNameError(TypeRegistryError):
    """Type name is not purely alphabetic."""

    def __init__(self, type_name: str):
        super().__init__(f'Type "{type_name}" is not alphabetic')
        self.type_name = type_name


class DuplicateTypeNameError(TypeRegistryError):
    """Type name is already taken by another registered type."""

    def __init__(self, type_name: str):
        super().__init__(f'Cannot re-declare type "{type_name}"')
        self.type_name = type_name
