"""Custom exceptions for rusty_utils.

These are raised only at the two escape hatches of the library (``unwrap`` and
``expect``) and when a combinator is called with unusable arguments. Modelled
failures (``Err`` and ``none``) are plain values and never raised.
"""

from enum import Enum
from typing import Any, Optional


class ErrorType(Enum):
    """Kinds of errors raised by the library."""

    # Extraction errors
    UNWRAP_FAILED = "unwrap_failed"
    EXPECT_FAILED = "expect_failed"

    # Caller errors
    INVALID_PATTERN = "invalid_pattern"
    INVALID_ARGUMENT = "invalid_argument"


class RustyUtilsError(Exception):
    """Base exception for all rusty_utils errors.

    Attributes:
        message: Human-readable error message
        error_type: Type of error from ErrorType enum
        details: Optional dict with additional error context
    """

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNWRAP_FAILED,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        base = f"[{self.error_type.value}] {self.message}"
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class UnwrapError(RustyUtilsError, RuntimeError):
    """Raised when unwrap() is called on Err or on a Nothing value.

    Attributes:
        payload: The Err payload that could not be unwrapped (None for Nothing)
    """

    def __init__(self, message: str, payload: Any = None):
        self.payload = payload
        details = {}
        if payload is not None:
            details["payload_type"] = type(payload).__name__
        super().__init__(message, ErrorType.UNWRAP_FAILED, details)


class ExpectError(RustyUtilsError, RuntimeError):
    """Raised when expect() is called on Err or on a Nothing value.

    The message is the one supplied by the caller; the original payload is
    not kept.
    """

    def __init__(self, message: str):
        super().__init__(message, ErrorType.EXPECT_FAILED)

    def __str__(self) -> str:
        return self.message


class PatternError(RustyUtilsError, TypeError):
    """Raised when a match() branch is not callable."""

    def __init__(self, branch: str, value: Any):
        message = f"match() branch '{branch}' must be callable"
        super().__init__(
            message,
            ErrorType.INVALID_PATTERN,
            {"branch": branch, "got": type(value).__name__},
        )


class InvalidArgumentError(RustyUtilsError, ValueError):
    """Raised when a helper is given an argument it cannot work with."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, ErrorType.INVALID_ARGUMENT, dict(kwargs))
