"""
Matcher that evaluates one URL against compiled patterns.

A matcher is built once per incoming URL and can then be tried against
any number of patterns. Matching never raises: a missing parameter, a
failed conversion or an unmatched literal all come back as ``None``.

Path handling mirrors how URL paths are usually reported: one trailing
slash is dropped before matching, and a pattern that yields no captures
is retried once against the path with a slash appended. Both ``/newsfeed``
and ``/newsfeed/`` therefore match the expressions ``/newsfeed`` and
``/newsfeed/.*``.
"""

import re
from typing import Dict, List, Optional, Sequence, Union

from .compiler import scanner
from .compiler.compiler import CompiledPattern
from .compiler.params import (
    LiteralParam,
    OptionalParam,
    QueryParam,
    RequiredParam,
    unknown_param,
)
from .types.registry import Value
from .._datastructures import URL, QueryItems


class PatternMatcher:
    """Matches a single URL against compiled patterns."""

    __slots__ = ("url", "path", "query_items")

    def __init__(self, url: Union[URL, str]):
        if isinstance(url, str):
            url = URL.parse(url)
        self.url = url
        self.path = _strip_trailing_slash(url.path)
        self.query_items: QueryItems = url.query_items

    def match(self, pattern: CompiledPattern) -> Optional[Dict[str, Value]]:
        """
        Match the URL against a pattern.

        Returns the path and query values keyed by parameter name, or
        ``None`` when the pattern does not match.
        """
        path_values = self._match_path(pattern)
        if path_values is None:
            return None

        query_values = self._match_query(pattern.query_params)
        if query_values is None:
            return None

        return {**path_values, **query_values}

    def global_params(self, params: Sequence[OptionalParam]) -> Dict[str, Value]:
        """
        Resolve global query parameters.

        Absent parameters are left out. If any present parameter fails to
        convert, the result is empty as a whole.
        """
        result: Dict[str, Value] = {}
        for param in params:
            if param.name not in self.query_items:
                continue
            value = param.type.convert(self.query_items[param.name])
            if value is None:
                return {}
            result[param.name] = value
        return result

    def _match_path(self, pattern: CompiledPattern) -> Optional[Dict[str, Value]]:
        regex = pattern.compiled_re
        if regex is None:
            return None

        captures = self._captured_path_values(regex)
        if len(captures) != len(pattern.path_params):
            return None

        # Without path params the pattern may still be a wildcard like "/feed/.*"
        if not pattern.path_params:
            return {} if self._path_is_match(regex) else None

        result: Dict[str, Value] = {}
        for param, raw in zip(pattern.path_params, captures):
            value = param.type.convert(raw)
            if value is None:
                return None
            result[param.name] = value
        return result

    def _match_query(self, params: Sequence[QueryParam]) -> Optional[Dict[str, Value]]:
        result: Dict[str, Value] = {}
        for param in params:
            raw = self.query_items.get(param.name)

            if isinstance(param, RequiredParam):
                if raw is None:
                    return None
                value = param.type.convert(raw)
                if value is None:
                    return None
                result[param.name] = value
            elif isinstance(param, OptionalParam):
                if raw is None:
                    continue
                value = param.type.convert(raw)
                if value is None:
                    return None
                result[param.name] = value
            elif isinstance(param, LiteralParam):
                if raw is None or raw != param.expected_value:
                    return None
                result[param.name] = raw
            else:
                raise unknown_param(param)

        return result

    def _captured_path_values(self, regex: re.Pattern) -> List[str]:
        captures = scanner.captured_strings(self.path, regex)
        if not captures and not self.path.endswith("/"):
            captures = scanner.captured_strings(self.path + "/", regex)
        return captures

    def _path_is_match(self, regex: re.Pattern) -> bool:
        if scanner.is_match(self.path, regex):
            return True
        return not self.path.endswith("/") and scanner.is_match(self.path + "/", regex)


def match_url(url: Union[URL, str], pattern: CompiledPattern) -> Optional[Dict[str, Value]]:
    """Match one URL against one pattern."""
    return PatternMatcher(url).match(pattern)


def _strip_trailing_slash(path: str) -> str:
    if path != "/" and path.endswith("/"):
        return path[:-1]
    return path
