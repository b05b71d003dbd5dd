"""
strkit Runtime - Search Queries.

A query can be passed wherever a search operation expects a needle string.
Instead of looking for one literal substring, the search operation asks the
query, which decides what a match is:

    index_of("abc123", any_of("0123456789"))     -> 3
    ends_with("main.c", none_of([".h", ".hpp"]))  -> True
    contains("hello", any_of(["foo", "ell"]))     -> True

``any_of`` / ``none_of`` build a character query from a string (a set of
characters) and a string-set query from any other iterable of strings.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import cached_property
from typing import Optional

import numpy as np

from strkit.runtime.bounds import NotFound, SearchResult, normalize_offset
from strkit.runtime.stdlib.string import (
    contains,
    ends_with,
    index_of,
    last_index_of,
    starts_with,
)


def _code_points(s: str) -> np.ndarray:
    """Return the code points of ``s`` as an unsigned 32-bit array."""
    return np.frombuffer(s.encode("utf-32-le", "surrogatepass"), dtype="<u4")


def _first(indexes: np.ndarray, base: int = 0) -> SearchResult:
    return NotFound if indexes.size == 0 else base + int(indexes[0])


def _last(indexes: np.ndarray) -> SearchResult:
    return NotFound if indexes.size == 0 else int(indexes[-1])


def _search_stop(total: int, offset: Optional[int]) -> int:
    """Exclusive end of the window searched by ``last_index_in``."""
    if offset is None:
        return total
    return min(normalize_offset(total, offset) + 1, total)


# =============================================================================
# Query Interface
# =============================================================================


class Query(ABC):
    """A search predicate that can stand in for a literal needle."""

    @abstractmethod
    def first_index_in(self, s: str, offset: int = 0) -> SearchResult:
        """Lowest matching index at or after ``offset``."""

    @abstractmethod
    def last_index_in(self, s: str, offset: Optional[int] = None) -> SearchResult:
        """Highest matching index at or before ``offset`` (default: anywhere)."""

    @abstractmethod
    def is_contained_in(self, s: str) -> bool:
        pass

    @abstractmethod
    def is_start_of(self, s: str) -> bool:
        pass

    @abstractmethod
    def is_end_of(self, s: str) -> bool:
        pass


# =============================================================================
# Character Queries
# =============================================================================


@dataclass(frozen=True)
class _CharMaskQuery(Query):
    mask: str

    @cached_property
    def _mask_points(self) -> np.ndarray:
        return _code_points(self.mask)

    @abstractmethod
    def _selects(self, points: np.ndarray) -> np.ndarray:
        """Boolean table of the positions this query matches."""

    def first_index_in(self, s: str, offset: int = 0) -> SearchResult:
        offset = normalize_offset(len(s), offset)
        selected = self._selects(_code_points(s)[offset:])
        return _first(np.flatnonzero(selected), offset)

    def last_index_in(self, s: str, offset: Optional[int] = None) -> SearchResult:
        stop = _search_stop(len(s), offset)
        selected = self._selects(_code_points(s)[:stop])
        return _last(np.flatnonzero(selected))


class AnyOfChars(_CharMaskQuery):
    """Matches any character that appears in the mask."""

    def _selects(self, points: np.ndarray) -> np.ndarray:
        return np.isin(points, self._mask_points)

    def is_contained_in(self, s: str) -> bool:
        return self.first_index_in(s) is not NotFound

    def is_start_of(self, s: str) -> bool:
        if not s:
            return False
        return s[0] in self.mask

    def is_end_of(self, s: str) -> bool:
        if not s:
            return False
        return s[-1] in self.mask


class NoneOfChars(_CharMaskQuery):
    """
    Matches any character that does not appear in the mask.

    An empty subject has no offending character, so all three predicates
    hold for it.
    """

    def _selects(self, points: np.ndarray) -> np.ndarray:
        return ~np.isin(points, self._mask_points)

    def is_contained_in(self, s: str) -> bool:
        if not s:
            return True
        return self.first_index_in(s) is not NotFound

    def is_start_of(self, s: str) -> bool:
        if not s:
            return True
        return s[0] not in self.mask

    def is_end_of(self, s: str) -> bool:
        if not s:
            return True
        return s[-1] not in self.mask


# =============================================================================
# String-Set Queries
# =============================================================================


@dataclass(frozen=True)
class _StringSetQuery(Query):
    strings: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "strings", tuple(self.strings))

    def _any(self, s: str, predicate: Callable[[str, str], bool]) -> bool:
        return any(predicate(s, candidate) for candidate in self.strings)

    def _first_matches(self, s: str, offset: int) -> list[int]:
        found = []
        for candidate in self.strings:
            index = index_of(s, candidate, offset)
            if index is not NotFound:
                found.append(index)
        return found

    def _last_matches(self, s: str, offset: Optional[int]) -> list[int]:
        found = []
        for candidate in self.strings:
            index = last_index_of(s, candidate, offset)
            if index is not NotFound:
                found.append(index)
        return found


class AnyOfStrings(_StringSetQuery):
    """Matches wherever any of the candidate strings occurs."""

    def first_index_in(self, s: str, offset: int = 0) -> SearchResult:
        found = self._first_matches(s, normalize_offset(len(s), offset))
        return min(found) if found else NotFound

    def last_index_in(self, s: str, offset: Optional[int] = None) -> SearchResult:
        if offset is not None:
            offset = normalize_offset(len(s), offset)
        found = self._last_matches(s, offset)
        return max(found) if found else NotFound

    def is_contained_in(self, s: str) -> bool:
        return self._any(s, contains)

    def is_start_of(self, s: str) -> bool:
        return self._any(s, starts_with)

    def is_end_of(self, s: str) -> bool:
        return self._any(s, ends_with)


class NoneOfStrings(_StringSetQuery):
    """
    Matches positions where none of the candidate strings starts.

    Only the single occurrence each candidate's search reports counts as
    covered; later occurrences of the same candidate do not.
    """

    def _uncovered(self, total: int, starts: list[int]) -> np.ndarray:
        covered = np.zeros(total + 1, dtype=bool)
        covered[np.asarray(starts, dtype=np.intp)] = True
        return ~covered[:total]

    def first_index_in(self, s: str, offset: int = 0) -> SearchResult:
        offset = normalize_offset(len(s), offset)
        uncovered = self._uncovered(len(s), self._first_matches(s, offset))
        return _first(np.flatnonzero(uncovered[offset:]), offset)

    def last_index_in(self, s: str, offset: Optional[int] = None) -> SearchResult:
        if offset is not None:
            offset = normalize_offset(len(s), offset)
        stop = _search_stop(len(s), offset)
        uncovered = self._uncovered(len(s), self._last_matches(s, offset))
        return _last(np.flatnonzero(uncovered[:stop]))

    def is_contained_in(self, s: str) -> bool:
        return not self._any(s, contains)

    def is_start_of(self, s: str) -> bool:
        return not self._any(s, starts_with)

    def is_end_of(self, s: str) -> bool:
        return not self._any(s, ends_with)


# =============================================================================
# Factories
# =============================================================================


def _strings_of(value: object, factory: str) -> tuple[str, ...]:
    if not isinstance(value, Iterable):
        raise TypeError(
            f"{factory}() expects a string or an iterable of strings, got {type(value).__name__}"
        )
    return tuple(value)


def any_of(chars_or_strings: str | Iterable[str]) -> Query:
    """
    Build a query matching any of the given characters or strings.

    Examples:
        any_of("0123456789")   -> AnyOfChars(mask='0123456789')
        any_of(["foo", "bar"]) -> AnyOfStrings(strings=('foo', 'bar'))
    """
    if isinstance(chars_or_strings, str):
        return AnyOfChars(chars_or_strings)
    return AnyOfStrings(_strings_of(chars_or_strings, "any_of"))


def none_of(chars_or_strings: str | Iterable[str]) -> Query:
    """Build a query matching anything except the given characters or strings."""
    if isinstance(chars_or_strings, str):
        return NoneOfChars(chars_or_strings)
    return NoneOfStrings(_strings_of(chars_or_strings, "none_of"))
