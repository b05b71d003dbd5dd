"""
Error types for strkit string operations.
"""

from typing import Optional


class StrKitError(Exception):
    """Base exception for all strkit errors."""

    def __init__(self, message: str, parameter: Optional[str] = None) -> None:
        self.message = message
        self.parameter = parameter
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.parameter:
            return f"[{self.parameter}] {self.message}"
        return self.message

    @property
    def kind(self) -> str:
        """Short error kind used when reporting to a user."""
        return type(self).__name__


class RangeError(StrKitError):
    """Raised when an offset or length cannot be normalized."""

    pass


class ArgumentError(StrKitError):
    """Raised when a scalar argument fails a precondition."""

    pass


class ExpressionError(StrKitError):
    """Raised when a harness expression is not a supported call shape."""

    pass


class UnknownOperationError(StrKitError):
    """
    Raised when an operation name cannot be resolved.

    This error is raised when:
    - A name is not registered in the operation table
    - A method is called on a view that does not provide it
    """

    def __init__(
        self,
        name: str,
        suggestions: Optional[list[str]] = None,
    ) -> None:
        """
        Initialize the error.

        Args:
            name: The operation name that couldn't be resolved
            suggestions: Similar registered names, closest first
        """
        self.name = name
        self.suggestions = suggestions or []
        super().__init__(f"unknown operation '{name}'")

    def _format_message(self) -> str:
        if not self.suggestions:
            return self.message
        hints = ", ".join(f"'{s}'" for s in self.suggestions)
        return f"{self.message} (did you mean {hints}?)"
