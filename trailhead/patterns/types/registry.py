"""
Type registry and built-in type descriptors.

A type descriptor turns the raw text of a path component or query value
into a value. Conversion never raises: a failed conversion returns ``None``
and the caller treats the whole pattern as not matching.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from ..diagnostics.errors import DuplicateTypeNameError, InvalidTypeNameError
from ..grammar import TYPE_NAME

# Shapes a conversion may produce
Value = Union[int, str, bool, List[Any]]

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_TYPE_NAME = re.compile(TYPE_NAME)


class TypeDescriptor:
    """
    A named conversion from URL text to a value.

    Subclasses set ``name`` (alphabetic, unique within a registry) and
    implement ``convert``.
    """

    __slots__ = ()

    name: str

    def convert(self, value: str) -> Optional[Value]:
        """Convert ``value``; return ``None`` when it is not valid."""
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self), self.name))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class IntType(TypeDescriptor):
    """Base-10 integer."""

    __slots__ = ()
    name = "int"

    def convert(self, value: str) -> Optional[int]:
        if not _DECIMAL_INT.fullmatch(value):
            return None
        try:
            return int(value)
        except ValueError:
            # Past the interpreter's digit limit for str -> int
            return None


class StringType(TypeDescriptor):
    """The value itself; the inferred type for untyped parameters."""

    __slots__ = ()
    name = "string"

    def convert(self, value: str) -> str:
        return value


class BoolType(TypeDescriptor):
    """Boolean spelled one of a fixed, case-sensitive set of words."""

    __slots__ = ()
    name = "bool"

    TRUE_VALUES = frozenset({"True", "true", "yes", "1"})
    FALSE_VALUES = frozenset({"False", "false", "no", "0"})

    def convert(self, value: str) -> Optional[bool]:
        if value in self.TRUE_VALUES:
            return True
        if value in self.FALSE_VALUES:
            return False
        return None


@dataclass(frozen=True)
class CastorType(TypeDescriptor):
    """
    Custom type backed by a castor function.

    The castor receives the raw string and returns the converted value; a
    ``ValueError`` or ``TypeError`` means the value is not valid.
    """

    name: str
    castor: Callable[[str], Any]

    def convert(self, value: str) -> Optional[Value]:
        try:
            return self.castor(value)
        except (ValueError, TypeError):
            return None


@dataclass(frozen=True)
class ArrayType(TypeDescriptor):
    """Comma-separated list whose elements all convert through ``of``."""

    of: TypeDescriptor

    @property
    def name(self) -> str:
        return f"[{self.of.name}]"

    def convert(self, value: str) -> Optional[List[Value]]:
        items = []
        for piece in value.split(","):
            if not piece:
                return None
            item = self.of.convert(piece)
            if item is None:
                return None
            items.append(item)
        return items


BUILTIN_TYPES: Tuple[TypeDescriptor, ...] = (IntType(), StringType(), BoolType())


class TypeRegistry:
    """
    Registry of named types available to expressions.

    Holds the built-in types followed by any custom types. Names are
    validated once, at construction time, and the registry is read-only
    afterwards.
    """

    __slots__ = ("_all", "_by_name", "_inferred")

    def __init__(self, custom_types: Iterable[TypeDescriptor] = ()):
        inferred = BUILTIN_TYPES[1]
        all_types = BUILTIN_TYPES + tuple(custom_types)
        self._validate(all_types)

        self._all: Tuple[TypeDescriptor, ...] = all_types
        self._by_name: Dict[str, TypeDescriptor] = {t.name: t for t in all_types}
        self._inferred = inferred

    @classmethod
    def default(cls) -> "TypeRegistry":
        """Create registry with built-in types only."""
        return cls()

    @classmethod
    def from_castors(cls, castors: Dict[str, Callable[[str], Any]]) -> "TypeRegistry":
        """Create registry with custom types built from castor functions."""
        return cls(CastorType(name, castor) for name, castor in castors.items())

    @staticmethod
    def _validate(all_types: Tuple[TypeDescriptor, ...]) -> None:
        seen = set()
        for descriptor in all_types:
            name = descriptor.name
            if name in seen:
                raise DuplicateTypeNameError(name)
            if not isinstance(name, str) or not _TYPE_NAME.fullmatch(name):
                raise InvalidTypeNameError(str(name))
            seen.add(name)

    @property
    def inferred(self) -> TypeDescriptor:
        """Type applied when a parameter has no explicit type."""
        return self._inferred

    @property
    def all(self) -> Tuple[TypeDescriptor, ...]:
        """Every registered type, built-ins first."""
        return self._all

    @property
    def names(self) -> List[str]:
        return [t.name for t in self._all]

    def get(self, type_name: str) -> Optional[TypeDescriptor]:
        """Look up a type by name."""
        return self._by_name.get(type_name)

    def has_type(self, type_name: str) -> bool:
        """Check if type is registered."""
        return type_name in self._by_name

    def __contains__(self, type_name: str) -> bool:
        return self.has_type(type_name)

    def __len__(self) -> int:
        return len(self._all)

    def __repr__(self) -> str:
        return f"TypeRegistry({', '.join(self.names)})"
