"""Exceptions raised by errorforge about its own usage."""

from typing import Any

from errorforge.core.exceptions.codes import ErrorCode
from errorforge.core.exceptions.messages import ErrorMessageTemplate


class ErrorForgeError(Exception):
    """Base class of errorforge's own errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.GENERAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the error.

        Args:
            message: human-readable message
            error_code: stable error code
            details: extra structured context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "details": dict(self.details),
        }


class InvalidArgumentError(ErrorForgeError, TypeError):
    """An argument passed to :func:`errorforge.create` has the wrong shape."""

    def __init__(
        self,
        parameter: str,
        expected: str,
        value: Any,
        error_code: ErrorCode = ErrorCode.INVALID_ARGUMENT,
    ):
        actual = type(value).__name__
        message = ErrorMessageTemplate.get_message(
            error_code,
            parameter=parameter,
            expected=expected,
            actual=actual,
            value=value,
        )
        super().__init__(
            message,
            error_code,
            {"parameter": parameter, "expected": expected, "actual": actual},
        )
        self.parameter = parameter
        self.expected = expected
        self.actual = actual
        self.value = value


class UnknownCodeError(ErrorForgeError, ValueError):
    """A strict variant was constructed with a code it does not declare."""

    def __init__(self, variant: str, code: Any, declared: list[str]):
        message = ErrorMessageTemplate.get_message(
            ErrorCode.UNKNOWN_CODE,
            variant=variant,
            code=code,
            declared=declared,
        )
        super().__init__(message, ErrorCode.UNKNOWN_CODE, {"variant": variant, "code": code})
        self.variant = variant
        self.code = code


__all__ = ["ErrorForgeError", "InvalidArgumentError", "UnknownCodeError"]
