"""
strkit Runtime - Operation Sets and Query Dispatch.

``StringOps`` is the core operation set: every operation of
``strkit.runtime.stdlib.string`` as a method taking the subject first.

``QueryDispatchOps`` wraps an operation set and lets the search family
(``index_of``, ``last_index_of``, ``contains``, ``starts_with``,
``ends_with``) accept a ``Query`` in place of a needle string. Every other
operation is forwarded to the wrapped set unchanged.

Operations can also be invoked by name, which is how the interactive
harness drives them:

    default_ops.call("indexOf", "hello", "l")      -> 2
    default_ops.call("contains", "a1", any_of("0123456789")) -> True
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from strkit.runtime.bounds import SearchResult
from strkit.runtime.case_insensitive import case_insensitive
from strkit.runtime.queries import Query
from strkit.runtime.stdlib import string
from strkit.utils.errors import UnknownOperationError
from strkit.utils.suggestions import suggest_similar

logger = logging.getLogger(__name__)


# =============================================================================
# Operation Registry
# =============================================================================


OPERATION_NAMES: tuple[str, ...] = (
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
    "case_insensitive",
)


def camel_case(name: str) -> str:
    """Convert ``last_index_of`` to ``lastIndexOf``."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# Public spellings shown to users
PUBLIC_NAMES: tuple[str, ...] = tuple(camel_case(name) for name in OPERATION_NAMES)

# Every accepted spelling -> method name
OPERATIONS: dict[str, str] = {}
for _name in OPERATION_NAMES:
    OPERATIONS[_name] = _name
    OPERATIONS[camel_case(_name)] = _name
del _name


def resolve_operation(name: str) -> str:
    """
    Map an operation name in either spelling to its method name.

    Raises:
        UnknownOperationError: If ``name`` is not registered
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(name, suggest_similar(name, PUBLIC_NAMES)) from None


def call_operation(ops: Any, name: str, subject: str, *args: Any) -> Any:
    """Resolve ``name`` and apply it to ``subject`` through ``ops``."""
    operation = resolve_operation(name)
    logger.debug("calling %s with %d argument(s) on %d chars", operation, len(args), len(subject))
    return getattr(ops, operation)(subject, *args)


# =============================================================================
# Core Operation Set
# =============================================================================


class StringOps:
    """The baseline, literal-search operation set."""

    length = staticmethod(string.length)
    slice = staticmethod(string.slice)
    replace_slice = staticmethod(string.replace_slice)
    index_of = staticmethod(string.index_of)
    last_index_of = staticmethod(string.last_index_of)
    contains = staticmethod(string.contains)
    starts_with = staticmethod(string.starts_with)
    ends_with = staticmethod(string.ends_with)
    count = staticmethod(string.count)
    replace = staticmethod(string.replace)
    replace_one = staticmethod(string.replace_one)
    replace_many = staticmethod(string.replace_many)
    split = staticmethod(string.split)
    chunk = staticmethod(string.chunk)
    repeat = staticmethod(string.repeat)
    reverse = staticmethod(string.reverse)
    to_lower = staticmethod(string.to_lower)
    to_upper = staticmethod(string.to_upper)
    trim = staticmethod(string.trim)
    trim_left = staticmethod(string.trim_left)
    trim_right = staticmethod(string.trim_right)
    pad_left = staticmethod(string.pad_left)
    pad_right = staticmethod(string.pad_right)
    case_insensitive = staticmethod(case_insensitive)

    def call(self, name: str, subject: str, *args: Any) -> Any:
        return call_operation(self, name, subject, *args)


# =============================================================================
# Query Dispatch
# =============================================================================


class QueryDispatchOps:
    """
    Operation set whose search family also accepts ``Query`` needles.

    This is the single place where literal search and query search meet:
    a ``Query`` needle is asked directly, anything else goes to ``base``.
    """

    def __init__(self, base: Optional[StringOps] = None) -> None:
        self.base = base if base is not None else StringOps()

    def __getattr__(self, name: str) -> Any:
        # Only reached for operations this class does not override
        if name == "base":
            raise AttributeError(name)
        return getattr(self.base, name)

    def call(self, name: str, subject: str, *args: Any) -> Any:
        return call_operation(self, name, subject, *args)

    def index_of(self, s: str, needle: str | Query, offset: int = 0) -> SearchResult:
        if isinstance(needle, Query):
            return needle.first_index_in(s, offset)
        return self.base.index_of(s, needle, offset)

    def last_index_of(
        self, s: str, needle: str | Query, offset: Optional[int] = None
    ) -> SearchResult:
        if isinstance(needle, Query):
            return needle.last_index_in(s, offset)
        return self.base.last_index_of(s, needle, offset)

    def contains(self, s: str, needle: str | Query) -> bool:
        if isinstance(needle, Query):
            return needle.is_contained_in(s)
        return self.base.contains(s, needle)

    def starts_with(self, s: str, needle: str | Query) -> bool:
        if isinstance(needle, Query):
            return needle.is_start_of(s)
        return self.base.starts_with(s, needle)

    def ends_with(self, s: str, needle: str | Query) -> bool:
        if isinstance(needle, Query):
            return needle.is_end_of(s)
        return self.base.ends_with(s, needle)


default_ops = QueryDispatchOps(StringOps())
