"""Tests for custom exceptions."""

import pytest
from rusty_utils.exceptions import (
    ErrorType,
    ExpectError,
    InvalidArgumentError,
    PatternError,
    RustyUtilsError,
    UnwrapError,
)


def test_base_exception():
    """Test base RustyUtilsError."""
    error = RustyUtilsError(
        "Test error",
        error_type=ErrorType.INVALID_ARGUMENT,
        details={"size": -1},
    )

    assert error.message == "Test error"
    assert error.error_type == ErrorType.INVALID_ARGUMENT
    assert error.details["size"] == -1
    assert str(error) == "[invalid_argument] Test error (size=-1)"


def test_exception_to_dict():
    """Test exception serialization."""
    error = UnwrapError("Called unwrap() on Err: 404", payload=404)
    error_dict = error.to_dict()

    assert error_dict["error_type"] == "unwrap_failed"
    assert error_dict["message"] == "Called unwrap() on Err: 404"
    assert error_dict["details"]["payload_type"] == "int"


def test_unwrap_error():
    """Test UnwrapError exception."""
    error = UnwrapError("Called unwrap() on a Nothing value")

    assert isinstance(error, RustyUtilsError)
    assert isinstance(error, RuntimeError)
    assert error.payload is None
    assert error.details == {}


def test_expect_error_keeps_caller_message():
    """Test ExpectError renders only the caller's message."""
    error = ExpectError("database must be configured")

    assert error.error_type == ErrorType.EXPECT_FAILED
    assert str(error) == "database must be configured"
    assert isinstance(error, RuntimeError)


def test_pattern_error():
    """Test PatternError exception."""
    error = PatternError("ok", 42)

    assert isinstance(error, TypeError)
    assert error.details == {"branch": "ok", "got": "int"}
    assert "'ok'" in error.message


def test_invalid_argument_error():
    """Test InvalidArgumentError exception."""
    error = InvalidArgumentError("step must not be zero", step=0)

    assert isinstance(error, ValueError)
    assert error.error_type == ErrorType.INVALID_ARGUMENT
    assert error.details["step"] == 0


def test_catch_all_library_errors():
    """All library errors share one base class."""
    for error in (
        UnwrapError("x"),
        ExpectError("x"),
        PatternError("none", None),
        InvalidArgumentError("x"),
    ):
        with pytest.raises(RustyUtilsError):
            raise error
