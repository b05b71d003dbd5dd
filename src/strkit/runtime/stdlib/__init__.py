"""
strkit Standard Library.

Provides the baseline (literal, case-sensitive) string operations.
"""

from strkit.runtime.stdlib.string import *

__all__ = [
    # Length and slicing
    "length", "slice", "replace_slice",
    # Search
    "index_of", "last_index_of", "contains", "starts_with", "ends_with", "count",
    # Replacement
    "replace", "replace_one", "replace_many",
    # Splitting
    "split", "bounded_split", "chunk",
    # Transformation
    "repeat", "reverse", "to_lower", "to_upper",
    "trim", "trim_left", "trim_right", "pad_left", "pad_right",
    "DEFAULT_TRIM_CHARS",
]
