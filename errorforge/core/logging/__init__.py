"""Structured logging utilities."""

from errorforge.core.logging.config import LogConfig
from errorforge.core.logging.logger import (
    configure_logging,
    disable_logging,
    get_logger,
    log_context,
    logger,
)

__all__ = [
    "LogConfig",
    "configure_logging",
    "disable_logging",
    "get_logger",
    "log_context",
    "logger",
]
