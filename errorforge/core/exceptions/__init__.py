"""Exceptions raised by errorforge about its own usage."""

from errorforge.core.exceptions.base import (
    ErrorForgeError,
    InvalidArgumentError,
    UnknownCodeError,
)
from errorforge.core.exceptions.codes import ErrorCode
from errorforge.core.exceptions.handler import log_error
from errorforge.core.exceptions.messages import ErrorMessageTemplate

__all__ = [
    "ErrorForgeError",
    "InvalidArgumentError",
    "UnknownCodeError",
    "ErrorCode",
    "ErrorMessageTemplate",
    "log_error",
]
