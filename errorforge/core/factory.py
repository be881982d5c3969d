"""The error variant factory."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any

from errorforge.core.config import ForgeConfig
from errorforge.core.exceptions import ErrorCode, InvalidArgumentError
from errorforge.core.logging import get_logger
from errorforge.core.variant import VariantError, make_creator, make_predicate, reserved_names

_logger = get_logger(__name__)


def _validate_name(name: Any) -> None:
    if not isinstance(name, str):
        raise InvalidArgumentError("name", "str", name)
    if not name:
        raise InvalidArgumentError("name", "non-empty str", name)


def _is_dunder(code: str) -> bool:
    return len(code) > 4 and code.startswith("__") and code.endswith("__")


def _validate_codes(codes: Any) -> None:
    if not isinstance(codes, Mapping):
        raise InvalidArgumentError("codes", "Mapping", codes)

    reserved = reserved_names()
    predicates = {f"is{code}" for code in codes if isinstance(code, str)}
    for code in codes:
        parameter = f"codes[{code!r}]"
        if not isinstance(code, str):
            raise InvalidArgumentError(parameter, "str", code)
        if not code:
            raise InvalidArgumentError(parameter, "non-empty str", code)
        if code in reserved or f"is{code}" in reserved or code in predicates or _is_dunder(code):
            raise InvalidArgumentError(parameter, "unreserved name", code, ErrorCode.RESERVED_CODE)


def create(
    name: str | None = None,
    codes: Mapping[str, str] | None = None,
    *,
    strict: bool | None = None,
    config: ForgeConfig | None = None,
) -> type[VariantError]:
    """Create a new error variant.

    Args:
        name: name of the variant, used as the class name and as the
            ``name`` of every instance
        codes: mapping of error code to message. The variant keeps a
            reference to it, so later edits to the messages show up on
            existing instances. Creators are attached for the codes present
            now.
        strict: when True, constructing an instance with an undeclared code
            raises :class:`UnknownCodeError`. Defaults to
            ``config.strict_codes``.
        config: defaults for strictness and stack capture

    Returns:
        A new subclass of :class:`VariantError` with one creator classmethod
        and one ``is<Code>`` property per code.

    Raises:
        InvalidArgumentError: ``name`` is not a non-empty string, ``codes`` is
            not a mapping, or a code is not a string or shadows a
            VariantError attribute.
    """
    _validate_name(name)
    _validate_codes(codes)

    config = config or ForgeConfig()
    namespace: dict[str, Any] = {
        "__module__": sys._getframe(1).f_globals.get("__name__", __name__),
        "__qualname__": name,
        "__doc__": f"Error variant {name!r} with codes: {', '.join(codes) or '(none)'}.",
        "_variant_name": name,
        "_messages": codes,
        "_strict": config.strict_codes if strict is None else strict,
        "_stack_limit": config.stack_limit,
    }
    for code in codes:
        namespace[code] = make_creator(code)
        namespace[f"is{code}"] = make_predicate(code)

    variant = type(name, (VariantError,), namespace)
    _logger.bind(variant=name).debug(
        "Created error variant {} with {} codes (strict={})",
        name,
        len(codes),
        namespace["_strict"],
    )
    return variant


__all__ = ["create"]
