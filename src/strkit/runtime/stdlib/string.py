"""
strkit Standard Library - String Module.

Provides the baseline string operations. Every operation takes the subject
string first, validates its arguments before doing any work and returns a
new value; the subject is never modified.

Offsets may be negative (counted from the end) and lengths may be omitted or
negative; see ``strkit.runtime.bounds``. Search operations return ``NotFound``
instead of an index when there is no match.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import List, Optional

from strkit.runtime.bounds import (
    NotFound,
    SearchResult,
    normalize_bounds,
    normalize_offset,
    verify_not_contains_empty_string,
    verify_not_empty_string,
    verify_not_negative,
    verify_positive,
)
from strkit.runtime.multi_replace import replace_with_limit
from strkit.utils.errors import ArgumentError

DEFAULT_TRIM_CHARS = " \t\n\r\v\0"


def length(s: str) -> int:
    """Return length of string."""
    return len(s)


# =============================================================================
# Slicing
# =============================================================================


def slice(s: str, offset: int, length: Optional[int] = None) -> str:
    """Return ``length`` characters starting at ``offset`` (default: the rest)."""
    offset, length = normalize_bounds(s, offset, length)
    if length == 0:
        return ""
    return s[offset : offset + length]


def replace_slice(s: str, replacement: str, offset: int, length: Optional[int] = None) -> str:
    """Replace the selected range with ``replacement``."""
    offset, length = normalize_bounds(s, offset, length)
    return s[:offset] + replacement + s[offset + length :]


# =============================================================================
# Search
# =============================================================================


def index_of(s: str, needle: str, offset: int = 0) -> SearchResult:
    """Find first index of needle at or after offset."""
    offset = normalize_offset(len(s), offset)

    if needle == "":
        return offset

    index = s.find(needle, offset)
    return NotFound if index < 0 else index


def last_index_of(s: str, needle: str, offset: Optional[int] = None) -> SearchResult:
    """
    Find the highest index of needle that is not greater than offset.

    A match starting at ``offset`` may run past it, so the search window
    ends ``len(needle)`` characters later.
    """
    total = len(s)
    offset = total if offset is None else normalize_offset(total, offset)

    if needle == "":
        return offset

    index = s.rfind(needle, 0, min(offset + len(needle), total))
    return NotFound if index < 0 else index


def contains(s: str, needle: str) -> bool:
    """Check if string contains substring."""
    return index_of(s, needle) is not NotFound


def starts_with(s: str, needle: str) -> bool:
    """Check if string starts with needle."""
    return index_of(s, needle) == 0


def ends_with(s: str, needle: str) -> bool:
    """Check if string ends with needle."""
    return last_index_of(s, needle) == len(s) - len(needle)


def count(s: str, needle: str, offset: int = 0, length: Optional[int] = None) -> int:
    """
    Count non-overlapping occurrences of needle inside the selected window.

    An empty needle matches every gap between characters, both ends included.
    """
    offset, length = normalize_bounds(s, offset, length)

    if needle == "":
        return length + 1

    return s.count(needle, offset, offset + length)


# =============================================================================
# Replacement
# =============================================================================


def replace(
    s: str,
    old: str | Mapping[str, str],
    new: Optional[str | int] = None,
    limit: Optional[int] = None,
) -> str:
    """
    Replace occurrences, accepting either call shape.

    replace(s, {from: to, ...}, limit=None)
    replace(s, from, to, limit=None)

    In the mapping shape the limit may be passed positionally or as ``limit``,
    but not both.
    """
    if isinstance(old, Mapping):
        if new is not None and limit is not None:
            raise ArgumentError("Limit given twice for a replacement mapping", "limit")
        return replace_many(s, old, new if new is not None else limit)

    if new is None:
        raise ArgumentError("To string is required when replacing a single string", "to")
    return replace_one(s, old, new, limit)


def replace_one(s: str, old: str, new: str, limit: Optional[int] = None) -> str:
    """Replace ``old`` with ``new``, at most ``limit`` times when given."""
    verify_not_empty_string(old, "From string")

    if limit is not None:
        verify_positive(limit, "Limit")

    return replace_with_limit(s, {old: new}, limit)


def replace_many(s: str, replacements: Mapping[str, str], limit: Optional[int] = None) -> str:
    """
    Replace every key of ``replacements`` with its value in a single pass.

    The longest key wins where several match at the same position, and
    replaced text is not searched again.
    """
    verify_not_contains_empty_string(replacements.keys(), "Replacement keys")

    if not replacements:
        return s

    if limit is not None:
        verify_positive(limit, "Limit")

    return replace_with_limit(s, replacements, limit)


# =============================================================================
# Splitting
# =============================================================================


def split(s: str, separator: str, limit: Optional[int] = None) -> List[str]:
    """
    Split string by separator.

    A positive ``limit`` caps the number of pieces, the last one holding the
    remainder; ``0`` acts as ``1``. A negative ``limit`` drops that many
    pieces from the end.
    """
    verify_not_empty_string(separator, "Separator")
    return bounded_split(
        lambda max_splits: s.split(separator, -1 if max_splits is None else max_splits),
        limit,
    )


def bounded_split(splitter: Callable[[Optional[int]], List[str]], limit: Optional[int]) -> List[str]:
    """
    Apply the split ``limit`` contract.

    ``splitter(None)`` must return every piece and ``splitter(n)`` at most
    ``n + 1`` pieces.
    """
    if limit is None:
        return splitter(None)

    if limit < 0:
        return splitter(None)[:limit]

    return splitter(max(limit, 1) - 1)


def chunk(s: str, chunk_length: int = 1) -> List[str]:
    """Split string into pieces of ``chunk_length`` characters."""
    verify_positive(chunk_length, "Chunk length")
    return [s[i : i + chunk_length] for i in range(0, len(s), chunk_length)]


# =============================================================================
# Transformation
# =============================================================================


def repeat(s: str, times: int) -> str:
    """Repeat string ``times`` times."""
    verify_not_negative(times, "Number of repetitions")
    return s * times


def reverse(s: str) -> str:
    """Reverse a string."""
    return s[::-1]


def to_lower(s: str) -> str:
    """Convert to lowercase."""
    return s.lower()


def to_upper(s: str) -> str:
    """Convert to uppercase."""
    return s.upper()


def trim(s: str, chars: str = DEFAULT_TRIM_CHARS) -> str:
    """Remove leading and trailing characters found in ``chars``."""
    return s.strip(chars)


def trim_left(s: str, chars: str = DEFAULT_TRIM_CHARS) -> str:
    """Remove leading characters found in ``chars``."""
    return s.lstrip(chars)


def trim_right(s: str, chars: str = DEFAULT_TRIM_CHARS) -> str:
    """Remove trailing characters found in ``chars``."""
    return s.rstrip(chars)


def _fill(pad: str, width: int) -> str:
    return (pad * (width // len(pad) + 1))[:width]


def pad_left(s: str, target_length: int, pad: str = " ") -> str:
    """Pad string on left to ``target_length`` with repeated copies of ``pad``."""
    verify_not_empty_string(pad, "Pad string")
    missing = target_length - len(s)
    if missing <= 0:
        return s
    return _fill(pad, missing) + s


def pad_right(s: str, target_length: int, pad: str = " ") -> str:
    """Pad string on right to ``target_length`` with repeated copies of ``pad``."""
    verify_not_empty_string(pad, "Pad string")
    missing = target_length - len(s)
    if missing <= 0:
        return s
    return s + _fill(pad, missing)
