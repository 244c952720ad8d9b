"""
Parameter definitions produced by the expression compiler.

Path parameters are always required. Query parameters form a closed set of
three variants (required, optional, literal); code that consumes them
dispatches on every variant and rejects anything else.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Union

from ..types.registry import TypeDescriptor


class ParamKind(str, Enum):
    """Kind of parameter."""
    REQUIRED = "required"
    OPTIONAL = "optional"
    LITERAL = "literal"


@dataclass(frozen=True)
class RequiredParam:
    """Parameter that must be present and convertible."""
    name: str
    type: TypeDescriptor
    kind: ParamKind = field(default=ParamKind.REQUIRED, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.kind.value, "type": self.type.name}


@dataclass(frozen=True)
class OptionalParam:
    """Parameter that may be absent, but must convert when present."""
    name: str
    type: TypeDescriptor
    kind: ParamKind = field(default=ParamKind.OPTIONAL, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.kind.value, "type": self.type.name}


@dataclass(frozen=True)
class LiteralParam:
    """Parameter whose raw value must equal ``expected_value`` exactly."""
    name: str
    expected_value: str
    kind: ParamKind = field(default=ParamKind.LITERAL, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.kind.value, "value": self.expected_value}


# A path parameter is a required parameter found in the path
PathParam = RequiredParam

QueryParam = Union[RequiredParam, OptionalParam, LiteralParam]


def unknown_param(param: Any) -> TypeError:
    """Error for a value outside the QueryParam variants."""
    return TypeError(f"Unknown query parameter variant: {type(param).__name__}")
