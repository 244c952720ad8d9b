"""
Regex helpers for locating tokens in expressions and captures in paths.

Helpers accept a pattern string or a compiled regex. Strings share one
compiled-regex cache, so the expression grammar is compiled once per process.
"""

import re
from functools import lru_cache
from typing import List, Optional, Tuple, Union

Regex = Union[str, re.Pattern]


@lru_cache(maxsize=512)
def compile_regex(pattern: str) -> re.Pattern:
    """Compile (and cache) a regular expression."""
    return re.compile(pattern)


def captured_strings(text: str, pattern: Regex) -> List[str]:
    """
    Return every capture group value of every match, left to right.

    Groups that did not take part in a match are skipped, so the result
    only holds text that was actually captured.
    """
    regex = _regex(pattern)
    values: List[str] = []
    for match in regex.finditer(text):
        values.extend(group for group in match.groups() if group is not None)
    return values


def first_match_span(text: str, pattern: Regex) -> Optional[Tuple[int, int]]:
    """Return the (start, end) span of the first match, if any."""
    match = _regex(pattern).search(text)
    if match is None:
        return None
    return match.span()


def match_spans(text: str, pattern: Regex) -> List[Tuple[int, int]]:
    """Return the spans of all non-overlapping matches."""
    return [match.span() for match in _regex(pattern).finditer(text)]


def substrings(text: str, pattern: Regex) -> List[str]:
    """Return the text of all non-overlapping matches."""
    return [text[start:end] for start, end in match_spans(text, pattern)]


def is_match(text: str, pattern: Regex) -> bool:
    """True when the pattern matches anywhere in the text."""
    return _regex(pattern).search(text) is not None


def replace_matches(text: str, pattern: Regex, replacement: str) -> str:
    """Replace every match with ``replacement`` taken literally."""
    return _regex(pattern).sub(lambda _match: replacement, text)


def _regex(pattern: Regex) -> re.Pattern:
    if isinstance(pattern, str):
        return compile_regex(pattern)
    return pattern
