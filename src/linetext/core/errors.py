"""Standardized error types for text and position values.

Every error carries a machine-readable code next to the human-readable
message so callers can report failures in structured payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# -----------------------------------------------------------------------------
# Error Code Constants
# -----------------------------------------------------------------------------

class ErrorCode:
    """Constants for error codes attached to text errors."""

    INVALID_LINE = "invalid_line"
    INVALID_ARGUMENT = "invalid_argument"
    NULL_INPUT = "null_input"


# -----------------------------------------------------------------------------
# Base Error Class
# -----------------------------------------------------------------------------

@dataclass
class TextError(ValueError):
    """Base exception class for all text value errors.

    Attributes:
        error_code: Machine-readable error identifier.
        message: Human-readable error description.
        details: Additional structured error information.
    """

    error_code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary for structured error reports."""
        result: dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = dict(self.details)
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# -----------------------------------------------------------------------------
# Validation Errors
# -----------------------------------------------------------------------------

@dataclass
class InvalidLineError(TextError):
    """Error raised when a line passed for joining embeds a line separator.

    ``line`` keeps the raw offending value; the message and ``details`` only
    ever show the escaped form.
    """

    error_code: str = field(default=ErrorCode.INVALID_LINE)
    message: str = field(default="The line contains a line separator")
    details: dict[str, Any] = field(default_factory=dict)

    line: str | None = field(default=None)
    index: int | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.index is not None:
            result["index"] = self.index
        return result


@dataclass
class InvalidArgumentError(TextError):
    """Error raised when an argument violates a value contract."""

    error_code: str = field(default=ErrorCode.INVALID_ARGUMENT)
    message: str = field(default="Invalid argument")
    details: dict[str, Any] = field(default_factory=dict)

    argument: str | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.argument:
            result["argument"] = self.argument
        return result


@dataclass
class NullInputError(TextError, TypeError):
    """Error raised when a required argument is ``None``."""

    error_code: str = field(default=ErrorCode.NULL_INPUT)
    message: str = field(default="A required argument is missing")
    details: dict[str, Any] = field(default_factory=dict)

    argument: str | None = field(default=None)

    @classmethod
    def for_argument(cls, name: str) -> "NullInputError":
        """Create an error naming the missing ``name`` argument."""
        return cls(message=f"`{name}` must not be None", argument=name)


def require(value: Any, name: str) -> Any:
    """Return ``value`` unchanged, raising :class:`NullInputError` when it is ``None``."""

    if value is None:
        raise NullInputError.for_argument(name)
    return value


__all__ = [
    "ErrorCode",
    "TextError",
    "InvalidLineError",
    "InvalidArgumentError",
    "NullInputError",
    "require",
]
