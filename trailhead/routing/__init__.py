"""
Routing - ordered registrations resolved first-match-wins, plus helpers
that hydrate matched parameters into application types.
"""

from .router import (
    Decoder,
    GlobalParamsMapping,
    NoGlobalParams,
    NO_GLOBAL_PARAMS,
    RegisteredRoute,
    RouteMatch,
    Router,
)
from .decoders import DecodeError, decode, decoder_for

__all__ = [
    "Decoder",
    "GlobalParamsMapping",
    "NoGlobalParams",
    "NO_GLOBAL_PARAMS",
    "RegisteredRoute",
    "RouteMatch",
    "Router",
    "DecodeError",
    "decode",
    "decoder_for",
]
