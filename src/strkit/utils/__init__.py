"""
strkit Utilities Package.

Error types and name-suggestion helpers shared by the runtime and the harness.
"""

from strkit.utils.errors import (
    ArgumentError,
    ExpressionError,
    RangeError,
    StrKitError,
    UnknownOperationError,
)
from strkit.utils.suggestions import (
    canonical_name,
    levenshtein_distance,
    suggest_similar,
)

__all__ = [
    # Errors
    "StrKitError",
    "RangeError",
    "ArgumentError",
    "ExpressionError",
    "UnknownOperationError",
    # Name similarity
    "canonical_name",
    "levenshtein_distance",
    "suggest_similar",
]
