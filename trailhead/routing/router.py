"""
Router - ordered registrations with first-match-wins resolution.

Expressions are compiled when they are registered, so a malformed
expression fails at startup. At match time each registration is tried in
registration order; the first one whose pattern matches and whose decoder
succeeds wins.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..config import RouterConfig
from ..patterns.compiler.compiler import CompiledPattern, ExpressionCompiler
from ..patterns.matcher import PatternMatcher
from ..patterns.types.registry import TypeRegistry, Value
from .._datastructures import URL

logger = logging.getLogger("trailhead.router")

# Turns a flat parameter map into an application value; raises on mismatch
Decoder = Callable[[Dict[str, Value]], Any]

_FAILED = object()


@dataclass(frozen=True)
class GlobalParamsMapping:
    """
    Query parameters extracted from every URL, whatever route it resolves to.

    ``params`` lists the optional query parameter names; ``decoder`` turns
    the values found into an application value.
    """
    params: Sequence[str]
    decoder: Decoder


@dataclass(frozen=True)
class NoGlobalParams:
    """Global params of a router configured without a GlobalParamsMapping."""


NO_GLOBAL_PARAMS = NoGlobalParams()


@dataclass(frozen=True)
class RegisteredRoute:
    """A compiled pattern and the decoder that builds its route."""
    pattern: CompiledPattern
    decoder: Decoder


@dataclass(frozen=True)
class RouteMatch:
    """Result of a successful match."""
    route: Any
    global_params: Any


class Router:
    """
    Ordered list of registrations resolved first-match-wins.

    Usage::

        router = Router()
        router.register("/newsfeed/:post_id{int}", decoder_for(ViewPost))
        router.register("/newsfeed/.*", lambda params: Newsfeed())
        match = router.attempt_match("https://example.com/newsfeed/42")

    Registration is not thread-safe and should finish before the router is
    shared; matching only reads compiled data.
    """

    def __init__(
        self,
        types: Optional[TypeRegistry] = None,
        global_params: Optional[GlobalParamsMapping] = None,
    ):
        names = global_params.params if global_params else ()
        self.compiler = ExpressionCompiler(types, names)
        self._global_decoder: Optional[Decoder] = global_params.decoder if global_params else None
        self._routes: List[RegisteredRoute] = []

    @classmethod
    def from_config(
        cls,
        config: RouterConfig,
        types: Optional[TypeRegistry] = None,
        global_decoder: Optional[Decoder] = None,
    ) -> "Router":
        """
        Create a router from a RouterConfig.

        Without ``global_decoder`` the global params of a match are the
        extracted map itself.
        """
        mapping = None
        if config.global_query_params:
            mapping = GlobalParamsMapping(
                params=tuple(config.global_query_params),
                decoder=global_decoder or dict,
            )
        return cls(types=types, global_params=mapping)

    @property
    def routes(self) -> Tuple[RegisteredRoute, ...]:
        """Registrations in priority order."""
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def register(self, expression: str, decoder: Decoder) -> CompiledPattern:
        """
        Compile ``expression`` and append it with its decoder.

        Compilation errors propagate; they are programming errors and
        should abort startup.
        """
        pattern = self.compiler.compile(expression)
        self._routes.append(RegisteredRoute(pattern=pattern, decoder=decoder))
        logger.debug("Registered %r at priority %d", expression, len(self._routes) - 1)
        return pattern

    def route(self, expression: str) -> Callable[[Decoder], Decoder]:
        """Decorator form of ``register``."""
        def decorator(decoder: Decoder) -> Decoder:
            self.register(expression, decoder)
            return decoder
        return decorator

    def attempt_match(self, url: Union[URL, str]) -> Optional[RouteMatch]:
        """
        Resolve a URL to the first registration that matches and decodes.

        Returns ``None`` when no registration does.
        """
        matcher = PatternMatcher(url)

        for registered in self._routes:
            pattern = registered.pattern
            params = matcher.match(pattern)
            if params is None:
                continue

            route = self._decode(registered.decoder, params, pattern.raw)
            if route is _FAILED:
                continue

            global_params = self._decode_global_params(
                matcher.global_params(pattern.global_query_params), pattern.raw
            )
            if global_params is _FAILED:
                continue

            return RouteMatch(route=route, global_params=global_params)

        return None

    def _decode_global_params(self, params: Dict[str, Value], raw: str) -> Any:
        if self._global_decoder is None:
            return NO_GLOBAL_PARAMS
        return self._decode(self._global_decoder, params, raw)

    def _decode(self, decoder: Decoder, params: Mapping[str, Value], raw: str) -> Any:
        try:
            return decoder(dict(params))
        except Exception as exc:
            # A decode failure only rules out this registration
            logger.debug("Decoder for %r rejected %r: %s", raw, params, exc)
            return _FAILED
