"""Diagnostic payloads for variant instances and their causes."""

from __future__ import annotations

import json
from datetime import datetime
from typing import TYPE_CHECKING, Any

from errorforge.core.stack import format_exception_stack

if TYPE_CHECKING:
    from errorforge.core.variant import VariantError


def describe_error(value: Any) -> Any:
    """Shape ``value`` the way a cause is shaped inside ``to_json()``.

    Variant instances recurse into their own ``to_json()``. Other exceptions
    are reduced to ``{code, message, stack}``, where ``code`` is only present
    if the exception carries one. Anything else is returned unchanged.
    """
    if getattr(value, "is_variant", False) is True:
        return value.to_json()
    if isinstance(value, BaseException):
        shaped: dict[str, Any] = {}
        if hasattr(value, "code"):
            shaped["code"] = value.code
        shaped["message"] = str(value)
        shaped["stack"] = format_exception_stack(value)
        return shaped
    return value


def variant_payload(error: VariantError) -> dict[str, Any]:
    result: dict[str, Any] = {"name": error.name, "code": error.code}

    if error.metadata is not None:
        result["metadata"] = error.metadata

    if error.cause is not None:
        result["cause"] = describe_error(error.cause)

    result["stack"] = error.stack
    return result


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def dumps(error: Any, **kwargs: Any) -> str:
    """Serialize ``describe_error(error)`` to JSON text.

    Values json cannot encode natively are rendered with ``str``. Extra
    keyword arguments go to :func:`json.dumps`.
    """
    kwargs.setdefault("default", _json_default)
    return json.dumps(describe_error(error), **kwargs)


__all__ = ["describe_error", "dumps", "variant_payload"]
