"""
strkit Runtime - Multi-Pattern Replacement Engine.

Replaces several patterns in one left-to-right pass. At each position the
longest matching key wins, replaced text is never re-scanned, and the total
number of substitutions can be capped.

Example:
    replace_with_limit("abc", {"a": "Y", "ab": "X"}) -> "Xc"
    replace_with_limit("aaaa", {"a": "b"}, limit=2) -> "bbaa"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Optional

logger = logging.getLogger(__name__)


def sort_keys_by_length(replacements: Mapping[str, str]) -> list[str]:
    """
    Order replacement keys longest first.

    Keys of equal length keep their insertion order.
    """
    return sorted(replacements, key=len, reverse=True)


def compile_alternation(keys: Sequence[str], flags: int = 0) -> re.Pattern[str]:
    """
    Build a single alternation over the escaped ``keys``.

    Each key gets its own capturing group, so ``match.lastindex - 1`` is the
    position of the matched key in ``keys`` regardless of how the matched
    text is cased.
    """
    pattern = "|".join(f"({re.escape(key)})" for key in keys)
    logger.debug("compiled alternation over %d keys (%d chars)", len(keys), len(pattern))
    return re.compile(pattern, flags)


def replace_with_limit(
    subject: str,
    replacements: Mapping[str, str],
    limit: Optional[int] = None,
    *,
    ignore_case: bool = False,
) -> str:
    """
    Substitute every key of ``replacements`` with its value.

    Args:
        subject: String to rewrite
        replacements: Non-empty keys mapped to their replacement text
        limit: Maximum number of substitutions in total, ``None`` for all
        ignore_case: Match keys case-insensitively

    Returns:
        The rewritten string
    """
    if not replacements:
        return subject

    keys = sort_keys_by_length(replacements)
    values = [replacements[key] for key in keys]
    pattern = compile_alternation(keys, re.IGNORECASE if ignore_case else 0)

    def _substitute(match: re.Match[str]) -> str:
        return values[match.lastindex - 1]

    return pattern.sub(_substitute, subject, count=0 if limit is None else limit)
