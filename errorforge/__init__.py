"""errorforge - structured, taxonomy-bound error types.

Build an error variant once from a name and a table of codes, then raise
instances through the per-code creators::

    >>> import errorforge
    >>> StorageError = errorforge.create(
    ...     "StorageError",
    ...     {"NotFound": "The object does not exist.", "TimedOut": "The operation timed out."},
    ... )
    >>> err = StorageError.NotFound({"key": "users/42"})
    >>> str(err)
    'StorageError: The object does not exist.'
    >>> err.isNotFound
    True
    >>> err.to_json()["metadata"]
    {'key': 'users/42'}
"""

from errorforge.core import (
    ConfigManager,
    ForgeConfig,
    VariantError,
    create,
    describe_error,
    dumps,
)
from errorforge.core.exceptions import (
    ErrorCode,
    ErrorForgeError,
    ErrorMessageTemplate,
    InvalidArgumentError,
    UnknownCodeError,
    log_error,
)
from errorforge.core.logging import LogConfig, configure_logging, disable_logging, get_logger, log_context

__version__ = "0.1.0"

__all__ = [
    "create",
    "VariantError",
    "describe_error",
    "dumps",
    "log_error",
    "ErrorCode",
    "ErrorForgeError",
    "ErrorMessageTemplate",
    "InvalidArgumentError",
    "UnknownCodeError",
    "ConfigManager",
    "ForgeConfig",
    "LogConfig",
    "configure_logging",
    "disable_logging",
    "get_logger",
    "log_context",
]
