"""
strkit Runtime - Case-Insensitive View.

``case_insensitive(s)`` returns a view exposing the search and replace
operations of the core under case-insensitive comparison:

    case_insensitive("Hello World").starts_with("hello")         -> True
    case_insensitive("Foo bar").replace({"foo": "bar", "bar": "foo"}) -> "bar foo"

Matching uses ``re.IGNORECASE`` (simple per-character case folding), so every
index reported by the view refers to the original subject.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import List, Optional

from strkit.runtime.bounds import (
    NotFound,
    SearchResult,
    normalize_bounds,
    normalize_offset,
    verify_not_contains_empty_string,
    verify_not_empty_string,
    verify_positive,
)
from strkit.runtime.multi_replace import replace_with_limit
from strkit.runtime.stdlib.string import bounded_split
from strkit.utils.errors import ArgumentError


def _needle_pattern(needle: str) -> re.Pattern[str]:
    return re.compile(re.escape(needle), re.IGNORECASE)


class CaseInsensitiveView:
    """
    Case-insensitive search and replace over one subject string.

    The view only reads its subject; offsets, lengths and limits follow the
    same rules as the core operations.
    """

    def __init__(self, subject: str) -> None:
        self.subject = subject

    def __repr__(self) -> str:
        return f"CaseInsensitiveView({self.subject!r})"

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def index_of(self, needle: str, offset: int = 0) -> SearchResult:
        offset = normalize_offset(len(self.subject), offset)

        if needle == "":
            return offset

        match = _needle_pattern(needle).search(self.subject, offset)
        return NotFound if match is None else match.start()

    def last_index_of(self, needle: str, offset: Optional[int] = None) -> SearchResult:
        total = len(self.subject)
        offset = total if offset is None else normalize_offset(total, offset)

        if needle == "":
            return offset

        pattern = _needle_pattern(needle)
        for start in range(min(offset, total - len(needle)), -1, -1):
            if pattern.match(self.subject, start):
                return start

        return NotFound

    def contains(self, needle: str) -> bool:
        return self.index_of(needle) is not NotFound

    def starts_with(self, needle: str) -> bool:
        return self.index_of(needle) == 0

    def ends_with(self, needle: str) -> bool:
        return self.last_index_of(needle) == len(self.subject) - len(needle)

    def count(self, needle: str, offset: int = 0, length: Optional[int] = None) -> int:
        offset, length = normalize_bounds(self.subject, offset, length)

        if needle == "":
            return length + 1

        return len(_needle_pattern(needle).findall(self.subject, offset, offset + length))

    # -------------------------------------------------------------------------
    # Replacement
    # -------------------------------------------------------------------------

    def replace(
        self,
        old: str | Mapping[str, str],
        new: Optional[str | int] = None,
        limit: Optional[int] = None,
    ) -> str:
        """Case-insensitive counterpart of ``strkit.replace``."""
        if isinstance(old, Mapping):
            if new is not None and limit is not None:
                raise ArgumentError("Limit given twice for a replacement mapping", "limit")
            return self.replace_many(old, new if new is not None else limit)

        if new is None:
            raise ArgumentError("To string is required when replacing a single string", "to")
        return self.replace_one(old, new, limit)

    def replace_one(self, old: str, new: str, limit: Optional[int] = None) -> str:
        verify_not_empty_string(old, "From string")

        if limit is not None:
            verify_positive(limit, "Limit")

        return replace_with_limit(self.subject, {old: new}, limit, ignore_case=True)

    def replace_many(self, replacements: Mapping[str, str], limit: Optional[int] = None) -> str:
        verify_not_contains_empty_string(replacements.keys(), "Replacement keys")

        if not replacements:
            return self.subject

        if limit is not None:
            verify_positive(limit, "Limit")

        return replace_with_limit(self.subject, replacements, limit, ignore_case=True)

    # -------------------------------------------------------------------------
    # Splitting
    # -------------------------------------------------------------------------

    def split(self, separator: str, limit: Optional[int] = None) -> List[str]:
        """
        Split on every case-insensitive occurrence of ``separator``.

        Pieces keep their original casing; ``limit`` works as in ``strkit.split``.
        """
        verify_not_empty_string(separator, "Separator")
        pattern = _needle_pattern(separator)

        def _split(max_splits: Optional[int]) -> List[str]:
            if max_splits is None:
                return pattern.split(self.subject)
            if max_splits == 0:
                return [self.subject]
            return pattern.split(self.subject, maxsplit=max_splits)

        return bounded_split(_split, limit)


def case_insensitive(s: str) -> CaseInsensitiveView:
    """Return a case-insensitive view of ``s``."""
    return CaseInsensitiveView(s)
