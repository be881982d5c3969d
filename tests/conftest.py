"""Pytest configuration for the errorforge test suite."""

from __future__ import annotations

import io
import json
from collections.abc import Callable, Iterator

import pytest
import errorforge

ERRORS = {
    "Unexpected": "An unexpected error has occurred.",
    "TimedOut": "The operation timed out.",
}


@pytest.fixture
def errors() -> dict[str, str]:
    """A fresh copy of the code table, safe to mutate inside a test."""

    return dict(ERRORS)


@pytest.fixture
def my_error(errors: dict[str, str]) -> type[errorforge.VariantError]:
    return errorforge.create("MyError", errors)


@pytest.fixture
def log_stream() -> Iterator[io.StringIO]:
    """Enable errorforge logging into an in-memory JSON-lines buffer."""

    buffer = io.StringIO()
    errorforge.configure_logging(level="DEBUG", console_stream=buffer)
    yield buffer
    errorforge.disable_logging()


@pytest.fixture
def log_records(log_stream: io.StringIO) -> Callable[[], list[dict[str, object]]]:
    """Return a reader parsing the JSON records written so far."""

    def _read() -> list[dict[str, object]]:
        lines = [line for line in log_stream.getvalue().splitlines() if line.strip()]
        return [json.loads(line) for line in lines]

    return _read
