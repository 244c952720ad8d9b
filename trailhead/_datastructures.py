"""
Core data structures for URL input.

Provides:
- QueryItems: Percent-decoded query parameters, last value wins
- URL: URL parsing into the components matching works on
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Tuple, Union
from urllib.parse import unquote, urlparse


# ============================================================================
# QueryItems
# ============================================================================

class QueryItems(Mapping[str, str]):
    """
    Read-only mapping of query parameters.

    Keys and values are percent-decoded only: ``+`` is kept as-is. A key
    without ``=`` has no value and is left out. When a key repeats, its
    last value wins.
    """

    __slots__ = ("_data",)

    def __init__(self, items: Union[Iterable[Tuple[str, str]], Mapping[str, str]] = ()):
        pairs = items.items() if isinstance(items, Mapping) else items
        self._data: Dict[str, str] = dict(pairs)

    @classmethod
    def parse(cls, query_string: str) -> "QueryItems":
        """Parse a raw (still encoded) query string."""
        pairs = []
        for item in query_string.split("&"):
            key, sep, value = item.partition("=")
            if not sep:
                continue
            pairs.append((unquote(key), unquote(value)))
        return cls(pairs)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"QueryItems({self._data})"


# ============================================================================
# URL
# ============================================================================

@dataclass(frozen=True)
class URL:
    """
    Parsed URL representation.

    ``path`` is percent-decoded; ``query`` is the raw query string.
    """

    path: str = "/"
    query: str = ""
    scheme: str = ""
    host: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, url: str) -> "URL":
        """Parse URL string into components."""
        parsed = urlparse(url)
        return cls(
            path=unquote(parsed.path) or "/",
            query=parsed.query,
            scheme=parsed.scheme,
            host=parsed.hostname or "",
            fragment=parsed.fragment,
        )

    @property
    def query_items(self) -> QueryItems:
        """Decoded query parameters."""
        return QueryItems.parse(self.query)
