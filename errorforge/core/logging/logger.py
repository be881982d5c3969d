"""Structured JSON logging for errorforge, built on loguru.

The package logger is disabled on import so that applications which never
call :func:`configure_logging` see nothing from errorforge. Configuring adds
errorforge's own filtered sinks next to the application's handlers and
leaves those untouched.
"""

from __future__ import annotations

import json
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import IO, Any, Iterator

from loguru import logger

from errorforge.core.logging.config import LogConfig

_PACKAGE = "errorforge"
_MARKER = "_errorforge"
_RESERVED_EXTRA = {"logger", "variant", "code", _MARKER}

_HANDLER_IDS: list[int] = []
_EXTRA: dict[str, Any] = {}

_CONTEXT_VAR: ContextVar[dict[str, Any]] = ContextVar("errorforge_log_context", default={})


def _patch_record(record: dict[str, Any]) -> None:
    extra = record["extra"]
    for key, value in _CONTEXT_VAR.get({}).items():
        extra.setdefault(key, value)
    for key, value in _EXTRA.items():
        extra.setdefault(key, value)
    extra.setdefault("variant", None)
    extra.setdefault("code", None)


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _format_payload(record: dict[str, Any]) -> dict[str, Any]:
    extra = record.get("extra", {})
    context = {k: v for k, v in extra.items() if k not in _RESERVED_EXTRA}
    level = record.get("level")
    payload: dict[str, Any] = {
        "timestamp": record["time"].isoformat() if "time" in record else datetime.now(timezone.utc).isoformat(),
        "level": getattr(level, "name", "INFO"),
        "message": record.get("message"),
        "logger": extra.get("logger"),
        "variant": extra.get("variant"),
        "code": extra.get("code"),
    }
    if context:
        payload["context"] = context
    exception = record.get("exception")
    if exception:
        payload["exception"] = str(exception)
    return payload


class _StreamJsonSink:
    """Sink writing structured JSON payloads to a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    def __call__(self, message: Any) -> None:
        payload = _format_payload(message.record)
        self._stream.write(json.dumps(payload, default=_json_default))
        self._stream.write("\n")
        self._stream.flush()


class _FileJsonSink:
    """Sink persisting JSON lines to a file path."""

    def __init__(self, path: str) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self._path = path

    def __call__(self, message: Any) -> None:
        payload = _format_payload(message.record)
        with open(self._path, "a", encoding="utf-8") as file:
            file.write(json.dumps(payload, default=_json_default))
            file.write("\n")


def _is_errorforge_record(record: dict[str, Any]) -> bool:
    return record["extra"].get(_MARKER, False) is True


def _remove_handlers() -> None:
    while _HANDLER_IDS:
        logger.remove(_HANDLER_IDS.pop())


def _configure_from_config(config: LogConfig) -> None:
    _remove_handlers()
    sinks: list[Any] = []
    if config.console_output:
        sinks.append(_StreamJsonSink(config.console_stream or sys.stderr))
    if config.file_output and config.file_path:
        sinks.append(_FileJsonSink(config.file_path))

    for sink in sinks:
        _HANDLER_IDS.append(logger.add(sink, level=config.level, filter=_is_errorforge_record))
    _EXTRA.clear()
    _EXTRA.update(config.extra)
    logger.enable(_PACKAGE)


def configure_logging(config: LogConfig | None = None, **kwargs: Any) -> None:
    """Enable errorforge logging and install JSON sinks.

    Either pass a ready :class:`LogConfig` or keyword arguments to build one,
    e.g. ``configure_logging(level="DEBUG", console_stream=buffer)``.
    """

    if config is None:
        config = LogConfig(**kwargs)
    elif kwargs:
        config = config.model_copy(update=kwargs)
    _configure_from_config(config)


def disable_logging() -> None:
    """Silence errorforge's records again and remove the sinks it added."""

    _remove_handlers()
    logger.disable(_PACKAGE)


def get_logger(name: str | None = None) -> Any:
    """Return a loguru logger whose records reach errorforge's sinks.

    The record is tagged with ``name`` (``"errorforge"`` by default).
    """

    return logger.patch(_patch_record).bind(logger=name or _PACKAGE, **{_MARKER: True})


@contextmanager
def log_context(**extra: Any) -> Iterator[dict[str, Any]]:
    """Attach ``extra`` to every record emitted inside the block."""

    previous = _CONTEXT_VAR.get({})
    merged = {**previous, **extra}
    token = _CONTEXT_VAR.set(merged)
    try:
        yield merged
    finally:
        _CONTEXT_VAR.reset(token)


logger.disable(_PACKAGE)


__all__ = [
    "configure_logging",
    "disable_logging",
    "get_logger",
    "log_context",
    "logger",
]
