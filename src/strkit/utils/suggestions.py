"""
Name similarity helpers for "did you mean?" hints on unknown operations.
"""

from __future__ import annotations

from collections.abc import Iterable


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Calculate the Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, or substitutions) required to change
    one string into the other.
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))

    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def canonical_name(name: str) -> str:
    """Fold an operation name so ``index_of``, ``indexOf`` and ``INDEXOF`` compare equal."""
    return name.replace("_", "").lower()


def suggest_similar(
    name: str,
    candidates: Iterable[str],
    max_distance: int = 2,
    max_suggestions: int = 3,
) -> list[str]:
    """
    Find registered names close to ``name``.

    Names are compared in canonical form, so a snake_case spelling of a
    camelCase operation is an exact hit.

    Args:
        name: The name to find suggestions for
        candidates: Valid names to compare against
        max_distance: Maximum edit distance to consider (default 2)
        max_suggestions: Maximum number of suggestions to return

    Returns:
        List of similar names, sorted by similarity (closest first)
    """
    wanted = canonical_name(name)

    scored: dict[str, int] = {}
    for candidate in candidates:
        folded = canonical_name(candidate)
        if abs(len(folded) - len(wanted)) > max_distance:
            continue

        distance = levenshtein_distance(wanted, folded)
        if distance <= max_distance:
            scored[candidate] = min(distance, scored.get(candidate, distance))

    ranked = sorted(scored.items(), key=lambda x: (x[1], x[0]))
    return [candidate for candidate, _ in ranked[:max_suggestions]]
