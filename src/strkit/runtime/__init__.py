"""
strkit Runtime Package.

This package contains the string operation layers:
- bounds: Offset/length normalization, validators and the NotFound result
- stdlib.string: The baseline literal string operations
- multi_replace: Single-pass, longest-match-first, bounded replacement
- queries: any_of / none_of search queries over characters or strings
- ops: Core operation set, query dispatch and the by-name registry
- case_insensitive: Case-insensitive view of the search/replace operations
"""

from strkit.runtime.bounds import (
    NotFound,
    NotFoundType,
    SearchResult,
    normalize_bounds,
    normalize_length,
    normalize_offset,
)
from strkit.runtime.case_insensitive import CaseInsensitiveView, case_insensitive
from strkit.runtime.ops import (
    OPERATIONS,
    PUBLIC_NAMES,
    QueryDispatchOps,
    StringOps,
    default_ops,
    resolve_operation,
)
from strkit.runtime.queries import (
    AnyOfChars,
    AnyOfStrings,
    NoneOfChars,
    NoneOfStrings,
    Query,
    any_of,
    none_of,
)

__all__ = [
    # Bounds
    "NotFound",
    "NotFoundType",
    "SearchResult",
    "normalize_offset",
    "normalize_length",
    "normalize_bounds",
    # Queries
    "Query",
    "AnyOfChars",
    "NoneOfChars",
    "AnyOfStrings",
    "NoneOfStrings",
    "any_of",
    "none_of",
    # Views
    "CaseInsensitiveView",
    "case_insensitive",
    # Operation sets
    "StringOps",
    "QueryDispatchOps",
    "default_ops",
    "OPERATIONS",
    "PUBLIC_NAMES",
    "resolve_operation",
]
