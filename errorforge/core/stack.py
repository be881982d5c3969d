"""Stack capture for variant instances."""

from __future__ import annotations

import sys
import traceback
from types import FrameType

_INTERNAL_MODULES = frozenset(
    {
        "errorforge.core.stack",
        "errorforge.core.variant",
        "errorforge.core.factory",
    }
)


def _first_external_frame() -> FrameType | None:
    frame: FrameType | None = sys._getframe(1)
    while frame is not None and frame.f_globals.get("__name__") in _INTERNAL_MODULES:
        frame = frame.f_back
    return frame


def capture_stack(header: str, limit: int | None = None) -> str:
    """Format the current call stack, starting at the first caller frame
    outside errorforge.

    ``limit`` keeps only the frames closest to the caller. ``header`` is
    appended as the final line, the way Python ends a traceback with the
    exception line.
    """
    summary = traceback.extract_stack(_first_external_frame(), limit=limit)
    return "Traceback (most recent call last):\n" + "".join(summary.format()) + header


def format_exception_stack(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


__all__ = ["capture_stack", "format_exception_stack"]
