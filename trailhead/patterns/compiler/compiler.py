"""
Compiler that turns expressions into compiled patterns.

An expression such as ``/newsfeed/:postId{int}/?:ref{string?}`` is split
into its path and query parts, each token is resolved against the type
registry, and the path is rewritten into an anchored regular expression
with one capture group per path parameter.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from . import scanner
from .params import (
    LiteralParam,
    OptionalParam,
    PathParam,
    QueryParam,
    RequiredParam,
)
from .. import grammar
from ..diagnostics.errors import (
    DuplicateNamedParameterError,
    InvalidFormatError,
    InvalidTypeError,
)
from ..types.registry import ArrayType, TypeDescriptor, TypeRegistry

logger = logging.getLogger("trailhead.compiler")


@dataclass(frozen=True)
class CompiledPattern:
    """Fully compiled expression ready for matching."""
    raw: str
    captured_path_regex: str
    path_params: Tuple[PathParam, ...]
    global_query_params: Tuple[OptionalParam, ...]
    query_params: Tuple[QueryParam, ...]
    compiled_re: Optional[re.Pattern] = field(default=None, compare=False, repr=False)

    @property
    def param_names(self) -> List[str]:
        """Names in path -> global -> query order."""
        names = [p.name for p in self.path_params]
        names += [p.name for p in self.global_query_params]
        names += [p.name for p in self.query_params]
        return names

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "raw": self.raw,
            "captured_path_regex": self.captured_path_regex,
            "path_params": [p.to_dict() for p in self.path_params],
            "global_query_params": [p.to_dict() for p in self.global_query_params],
            "query_params": [p.to_dict() for p in self.query_params],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


class ExpressionCompiler:
    """
    Compiles expressions against one type registry.

    ``global_query_params`` names optional query parameters shared by every
    pattern this compiler produces. They use the registry's inferred type,
    are resolved separately at match time, and take part in each pattern's
    name uniqueness check.
    """

    def __init__(
        self,
        type_registry: Optional[TypeRegistry] = None,
        global_query_params: Sequence[str] = (),
    ):
        self.type_registry = type_registry or TypeRegistry.default()
        self.global_query_params = self._global_query_items(global_query_params)

    def compile(self, expression: str) -> CompiledPattern:
        """Compile an expression into a pattern."""
        path, query = self._extract_components(expression)
        path_params = self._path_items(path, expression)
        query_params = self._query_items(query, expression)
        captured_path_regex = self._captured_path(path)

        pattern = CompiledPattern(
            raw=expression,
            captured_path_regex=captured_path_regex,
            path_params=tuple(path_params),
            global_query_params=self.global_query_params,
            query_params=tuple(query_params),
            compiled_re=self._compile_path_regex(captured_path_regex, expression),
        )
        self._validate_names(pattern)

        logger.debug(
            "Compiled %r -> %s (%d path, %d query params)",
            expression, captured_path_regex, len(path_params), len(query_params),
        )
        return pattern

    def _extract_components(self, expression: str) -> Tuple[str, Optional[str]]:
        """Split an expression into its path and (optional) query part."""
        span = scanner.first_match_span(expression, grammar.QUERY_PART)

        if span is not None:
            query: Optional[str] = expression[span[0]:span[1]]
            path = expression[:span[0]]
        else:
            query = None
            path = expression

        if not path.startswith("/"):
            raise InvalidFormatError('Expression must start with "/"', expression=expression)

        return path, query

    def _path_items(self, path: str, expression: str) -> List[PathParam]:
        pattern = f"({grammar.PATH_REQUIRED_TOKEN})"
        return [
            self._required_param(token, expression)
            for token in scanner.substrings(path, pattern)
        ]

    def _query_items(self, query: Optional[str], expression: str) -> List[QueryParam]:
        if query is None:
            return []

        # Scan order fixes both parameter order and which duplicate is reported
        items: List[QueryParam] = []
        for token in scanner.substrings(query, f"({grammar.QUERY_REQUIRED_TOKEN})"):
            items.append(self._required_param(token, expression))
        for token in scanner.substrings(query, f"({grammar.QUERY_OPTIONAL_TOKEN})"):
            items.append(self._optional_param(token, expression))
        for token in scanner.substrings(query, f"({grammar.QUERY_LITERAL_TOKEN})"):
            items.append(self._literal_param(token))
        return items

    def _required_param(self, token: str, expression: str) -> RequiredParam:
        matches = scanner.captured_strings(token, grammar.REQUIRED_ARRAY)
        if matches:
            name, type_name = matches
            return RequiredParam(name, ArrayType(self._resolve_type(type_name, expression)))

        matches = scanner.captured_strings(token, grammar.REQUIRED_TYPED)
        if matches:
            name, type_name = matches
            return RequiredParam(name, self._resolve_type(type_name, expression))

        (name,) = scanner.captured_strings(token, grammar.REQUIRED_INFERRED)
        return RequiredParam(name, self.type_registry.inferred)

    def _optional_param(self, token: str, expression: str) -> OptionalParam:
        matches = scanner.captured_strings(token, grammar.OPTIONAL_ARRAY)
        if matches:
            name, type_name = matches
            return OptionalParam(name, ArrayType(self._resolve_type(type_name, expression)))

        name, type_name = scanner.captured_strings(token, grammar.OPTIONAL_TYPED)
        return OptionalParam(name, self._resolve_type(type_name, expression))

    def _literal_param(self, token: str) -> LiteralParam:
        name, expected_value = scanner.captured_strings(token, grammar.LITERAL_VALUE)
        return LiteralParam(name, expected_value)

    def _resolve_type(self, type_name: str, expression: str) -> TypeDescriptor:
        descriptor = self.type_registry.get(type_name)
        if descriptor is None:
            raise InvalidTypeError(
                type_name,
                expression=expression,
                known_types=self.type_registry.names,
            )
        return descriptor

    def _global_query_items(self, names: Sequence[str]) -> Tuple[OptionalParam, ...]:
        items = []
        seen = set()
        for name in names:
            if not isinstance(name, str) or not re.fullmatch(grammar.PARAM_NAME, name):
                raise InvalidFormatError(f'Global query param name "{name}" has invalid characters')
            if name in seen:
                raise DuplicateNamedParameterError(name)
            seen.add(name)
            items.append(OptionalParam(name, self.type_registry.inferred))
        return tuple(items)

    def _captured_path(self, path: str) -> str:
        """Rewrite the path into an anchored regex with one group per token."""
        url_path = scanner.replace_matches(
            path,
            f"({grammar.PATH_REQUIRED_TOKEN})",
            grammar.PATH_CAPTURE_GROUP,
        )

        if url_path != "/" and url_path.endswith("/"):
            url_path = url_path[:-1]

        return f"^{url_path}$"

    def _compile_path_regex(self, regex: str, expression: str) -> Optional[re.Pattern]:
        # Path text is kept verbatim, so it may not be a valid regex
        try:
            return scanner.compile_regex(regex)
        except re.error as exc:
            logger.warning(
                "Path of %r is not a valid regular expression (%s); it will never match",
                expression, exc,
            )
            return None

    def _validate_names(self, pattern: CompiledPattern) -> None:
        seen = set()
        for name in pattern.param_names:
            if name in seen:
                raise DuplicateNamedParameterError(name, expression=pattern.raw)
            seen.add(name)
