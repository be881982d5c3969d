"""Structured logging of errors."""

from typing import Any

from errorforge.core.logging import get_logger
from errorforge.core.serialization import describe_error

_logger = get_logger(__name__)


def log_error(error: Any, level: str = "ERROR", **context: Any) -> None:
    """Log ``error`` as one structured record.

    The record message is ``str(error)``. The variant name and code (when the
    error is a variant instance) and the ``describe_error`` payload are bound
    as extras, along with ``context``.

    Args:
        error: variant instance, any other exception, or a plain value
        level: loguru level name
        **context: extra fields attached to the record. ``variant``, ``code``
            and ``error`` are always taken from ``error`` and win over
            context keys of the same name.
    """
    is_variant = getattr(error, "is_variant", False) is True
    extras = {
        **context,
        "variant": error.name if is_variant else type(error).__name__,
        "code": error.code if is_variant else getattr(error, "code", None),
        "error": describe_error(error),
    }
    _logger.bind(**extras).opt(depth=1).log(level, str(error))
