"""Case-insensitive lookup of parts and nets by name."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar


class Searchable(Protocol):
    """Anything with a name that can be searched."""

    name: str


T = TypeVar("T", bound=Searchable)


def _same_letter(a: str, b: str) -> bool:
    return a.upper() == b.upper()


def strcasestr(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of ``needle`` in ``haystack``, ignoring case.

    An empty needle matches at index 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    width = len(needle)
    for start in range(len(haystack) - width + 1):
        window = haystack[start : start + width]
        if all(_same_letter(a, b) for a, b in zip(window, needle)):
            return start
    return None


class SearchMode(enum.Enum):
    """How a search string must match a name."""

    SUB = "sub"
    PREFIX = "prefix"
    WHOLE = "whole"


class Searcher:
    """Searches the parts and nets of a board.

    Items need a ``name``; when ``search_details`` is on, an item may also
    offer ``searchable_string_details()`` returning further strings to try.
    """

    def __init__(self, mode: SearchMode = SearchMode.SUB, search_details: bool = False) -> None:
        self.mode = mode
        self.search_details = search_details
        self._nets: list = []
        self._parts: list = []

    def set_nets(self, nets: Iterable) -> None:
        """Set the nets to search."""
        self._nets = list(nets)

    def set_parts(self, parts: Iterable) -> None:
        """Set the parts to search."""
        self._parts = list(parts)

    def _matches(self, haystack: str, needle: str) -> bool:
        found = strcasestr(haystack, needle)
        if found is None:
            return False
        if self.mode is SearchMode.SUB:
            return True
        if self.mode is SearchMode.PREFIX:
            return found == 0
        return found == 0 and len(needle) == len(haystack)

    def _details(self, item) -> Iterable[str]:
        details = getattr(item, "searchable_string_details", None)
        if details is None:
            return ()
        return details()

    def _search(self, search: str, items: Sequence[T], limit: int) -> list[T]:
        results: list[T] = []
        if not search:
            return results
        for item in items:
            match = self._matches(item.name, search)
            if self.search_details and not match:
                match = any(self._matches(detail, search) for detail in self._details(item))
            if match:
                results.append(item)
                limit -= 1
            if limit == 0:
                return results
        return results

    def parts(self, search: str, limit: int = -1) -> list:
        """Parts matching ``search``, at most ``limit`` of them (-1 for all)."""
        return self._search(search, self._parts, limit)

    def nets(self, search: str, limit: int = -1) -> list:
        """Nets matching ``search``, at most ``limit`` of them (-1 for all)."""
        return self._search(search, self._nets, limit)