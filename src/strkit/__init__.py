"""
strkit - A safely-bounded, extensible string operation API.

Every operation takes the subject string first and returns a new value.
Offsets may be negative (counted from the end), search operations return
``NotFound`` rather than a magic index, and the search family accepts
``any_of`` / ``none_of`` queries in place of a needle:

    >>> import strkit
    >>> strkit.slice("hello world", -5)
    'world'
    >>> strkit.index_of("abc123", strkit.any_of("0123456789"))
    3
    >>> strkit.case_insensitive("Hello").starts_with("HE")
    True
"""

from strkit.runtime import (
    AnyOfChars,
    AnyOfStrings,
    CaseInsensitiveView,
    NoneOfChars,
    NoneOfStrings,
    NotFound,
    NotFoundType,
    Query,
    QueryDispatchOps,
    StringOps,
    any_of,
    case_insensitive,
    default_ops,
    none_of,
)
from strkit.utils.errors import (
    ArgumentError,
    ExpressionError,
    RangeError,
    StrKitError,
    UnknownOperationError,
)

__version__ = "0.1.0"

# Query-aware operations bound to the default operation set
length = default_ops.length
slice = default_ops.slice
replace_slice = default_ops.replace_slice
index_of = default_ops.index_of
last_index_of = default_ops.last_index_of
contains = default_ops.contains
starts_with = default_ops.starts_with
ends_with = default_ops.ends_with
count = default_ops.count
replace = default_ops.replace
replace_one = default_ops.replace_one
replace_many = default_ops.replace_many
split = default_ops.split
chunk = default_ops.chunk
repeat = default_ops.repeat
reverse = default_ops.reverse
to_lower = default_ops.to_lower
to_upper = default_ops.to_upper
trim = default_ops.trim
trim_left = default_ops.trim_left
trim_right = default_ops.trim_right
pad_left = default_ops.pad_left
pad_right = default_ops.pad_right

__all__ = [
    # Operations
    "length",
    "slice",
    "replace_slice",
    "index_of",
    "last_index_of",
    "contains",
    "starts_with",
    "ends_with",
    "count",
    "replace",
    "replace_one",
    "replace_many",
    "split",
    "chunk",
    "repeat",
    "reverse",
    "to_lower",
    "to_upper",
    "trim",
    "trim_left",
    "trim_right",
    "pad_left",
    "pad_right",
    # Queries and views
    "any_of",
    "none_of",
    "case_insensitive",
    "Query",
    "AnyOfChars",
    "NoneOfChars",
    "AnyOfStrings",
    "NoneOfStrings",
    "CaseInsensitiveView",
    # Results
    "NotFound",
    "NotFoundType",
    # Operation sets
    "StringOps",
    "QueryDispatchOps",
    "default_ops",
    # Errors
    "StrKitError",
    "RangeError",
    "ArgumentError",
    "ExpressionError",
    "UnknownOperationError",
]
