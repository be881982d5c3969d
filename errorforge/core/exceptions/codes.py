"""Error codes raised by errorforge itself."""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable codes for errors about errorforge's own usage."""

    GENERAL_ERROR = "GENERAL_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    RESERVED_CODE = "RESERVED_CODE"
    UNKNOWN_CODE = "UNKNOWN_CODE"


__all__ = ["ErrorCode"]
