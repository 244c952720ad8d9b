"""
Decoders that hydrate matched parameter maps into dataclasses.

Matching produces flat maps whose values are ``int``, ``str``, ``bool`` or
lists of those. A decoder turns such a map into an application type and
raises ``DecodeError`` when the map does not fit; the router treats that
as "this registration did not match".

Usage::

    @dataclass
    class ViewPost:
        post_id: int
        ref: Optional[str] = None

    router.register("/newsfeed/:post_id{int}/?:ref{string?}", decoder_for(ViewPost))
"""

import types
from dataclasses import MISSING, fields, is_dataclass
from typing import Any, Callable, Mapping, Type, TypeVar, Union, get_args, get_origin, get_type_hints

T = TypeVar("T")


class DecodeError(ValueError):
    """Raised when a parameter map cannot be decoded into the target type."""
    pass


def decode(params: Mapping[str, Any], cls: Type[T]) -> T:
    """
    Build an instance of dataclass ``cls`` from ``params``.

    Each field is looked up by name and checked against its type hint.
    Fields with defaults may be absent; ``Optional`` fields without a
    default become ``None`` when absent. Keys that are not fields are
    ignored.
    """
    if not is_dataclass(cls) or not isinstance(cls, type):
        raise TypeError(f"{cls!r} is not a dataclass type")

    hints = get_type_hints(cls)
    kwargs = {}

    for field_info in fields(cls):
        if not field_info.init:
            continue
        name = field_info.name
        expected = hints[name]

        if name in params:
            value = params[name]
            if not _check_type(value, expected):
                raise DecodeError(
                    f"Field '{name}' of {cls.__name__} expected {_type_name(expected)}, "
                    f"got {type(value).__name__}"
                )
            kwargs[name] = value
        elif field_info.default is not MISSING or field_info.default_factory is not MISSING:
            continue
        elif _is_optional(expected):
            kwargs[name] = None
        else:
            raise DecodeError(f"Field '{name}' of {cls.__name__} is missing")

    return cls(**kwargs)


def decoder_for(cls: Type[T]) -> Callable[[Mapping[str, Any]], T]:
    """Return a one-argument decoder for dataclass ``cls``."""
    if not is_dataclass(cls) or not isinstance(cls, type):
        raise TypeError(f"{cls!r} is not a dataclass type")

    def decoder(params: Mapping[str, Any]) -> T:
        return decode(params, cls)

    decoder.__name__ = f"decode_{cls.__name__}"
    decoder.__qualname__ = decoder.__name__
    return decoder


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def _is_optional(expected: Any) -> bool:
    return _is_union(get_origin(expected)) and type(None) in get_args(expected)


def _check_type(value: Any, expected: Any) -> bool:
    if expected is Any:
        return True

    origin = get_origin(expected)
    if _is_union(origin):
        return any(_check_type(value, arg) for arg in get_args(expected))

    if origin is list:
        args = get_args(expected)
        if not isinstance(value, list):
            return False
        return not args or all(_check_type(item, args[0]) for item in value)

    if expected is type(None):
        return value is None

    # bool is an int subclass, but a flag is never a number here
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if expected is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    if origin is not None:
        return isinstance(value, origin)

    try:
        return isinstance(value, expected)
    except TypeError:
        return True


def _type_name(expected: Any) -> str:
    return getattr(expected, "__name__", None) or str(expected)
