"""
strkit Runtime - Offset/Length Normalization and Argument Validators.

Every slicing and search operation converts user-facing offsets and lengths
into absolute, in-range values here before touching the subject string.

Offsets may be negative, in which case they count from the end of the
string (``-1`` is the last character). Lengths may be omitted (rest of the
string) or negative (stop that many characters before the end).
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Optional

from strkit.utils.errors import ArgumentError, RangeError


# =============================================================================
# NotFound Sentinel
# =============================================================================


class NotFoundType(Enum):
    """Type of the ``NotFound`` search result."""

    NOT_FOUND = "NotFound"

    def __repr__(self) -> str:
        return "NotFound"

    def __str__(self) -> str:
        return "NotFound"

    def __bool__(self) -> bool:
        return False


NotFound = NotFoundType.NOT_FOUND

SearchResult = int | NotFoundType


# =============================================================================
# Bounds Normalization
# =============================================================================


def normalize_offset(length: int, offset: int) -> int:
    """
    Convert a possibly negative offset into an absolute one.

    Args:
        length: Length of the subject string
        offset: Offset in range [-length, length]

    Returns:
        Absolute offset in range [0, length]

    Raises:
        RangeError: If the offset lies outside [-length, length]

    Examples:
        >>> normalize_offset(11, -5)
        6
        >>> normalize_offset(11, 11)
        11
    """
    if offset < -length or offset > length:
        raise RangeError("Offset must be in range [-len, len]", "offset")

    if offset < 0:
        offset += length

    return offset


def normalize_length(length: int, offset: int, sub_length: Optional[int] = None) -> int:
    """
    Convert an optional, possibly negative length into an absolute one.

    ``offset`` must already be normalized.

    Raises:
        RangeError: If the resulting window would start before ``offset``
            or run past the end of the string
    """
    if sub_length is None:
        return length - offset

    if sub_length < 0:
        sub_length += length - offset
        if sub_length < 0:
            raise RangeError("Length too small", "length")
    elif offset + sub_length > length:
        raise RangeError("Length too large", "length")

    return sub_length


def normalize_bounds(subject: str, offset: int, sub_length: Optional[int] = None) -> tuple[int, int]:
    """Normalize an (offset, length) pair against ``subject``."""
    total = len(subject)
    offset = normalize_offset(total, offset)
    return offset, normalize_length(total, offset, sub_length)


# =============================================================================
# Validators
# =============================================================================


def verify_positive(value: int, name: str) -> None:
    if value <= 0:
        raise ArgumentError(f"{name} has to be positive", name)


def verify_not_negative(value: int, name: str) -> None:
    if value < 0:
        raise ArgumentError(f"{name} can not be negative", name)


def verify_not_empty_string(value: str, name: str) -> None:
    if str(value) == "":
        raise ArgumentError(f"{name} can not be an empty string", name)


def verify_not_contains_empty_string(values: Iterable[str], name: str) -> None:
    for value in values:
        if str(value) == "":
            raise ArgumentError(f"{name} can not contain an empty string", name)
