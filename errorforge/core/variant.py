"""The base class shared by every error variant and the per-code helpers
that :func:`errorforge.create` attaches to it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from errorforge.core.exceptions import UnknownCodeError
from errorforge.core.serialization import variant_payload
from errorforge.core.stack import capture_stack


@dataclass(frozen=True)
class _ErrorProps:
    code: str
    metadata: Any
    cause: Any
    stack: str


class VariantError(Exception):
    """Base class of the error variants produced by :func:`errorforge.create`.

    A variant is bound to a name and a table of code to message. Instances
    carry a code, optional metadata, an optional cause and the stack captured
    when they were built. All of these are read-only.

    The message is looked up in the table every time it is read, so changes
    made to the table after the variant was created are visible on existing
    instances.
    """

    _variant_name: ClassVar[str] = "VariantError"
    _messages: ClassVar[Mapping[str, Any]] = {}
    _strict: ClassVar[bool] = False
    _stack_limit: ClassVar[int | None] = None

    def __init__(self, code: str, metadata: Any = None, cause: Any = None):
        if type(self) is VariantError:
            raise TypeError("VariantError cannot be instantiated directly; build a variant with create()")

        if cause is None and isinstance(metadata, BaseException):
            metadata, cause = None, metadata

        if self._strict and code not in self._messages:
            raise UnknownCodeError(self._variant_name, code, list(self._messages))

        super().__init__(code)
        self._props = _ErrorProps(
            code=code,
            metadata=metadata,
            cause=cause,
            stack=capture_stack(f"{self._variant_name}: {code}", self._stack_limit),
        )
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @property
    def name(self) -> str:
        return self._variant_name

    @property
    def code(self) -> str:
        return self._props.code

    @property
    def message(self) -> Any:
        return self._messages.get(self._props.code)

    @property
    def metadata(self) -> Any:
        return self._props.metadata

    @property
    def cause(self) -> Any:
        return self._props.cause

    @property
    def stack(self) -> str:
        return self._props.stack

    @property
    def is_variant(self) -> bool:
        return isinstance(self, VariantError)

    def has_code(self, code: str) -> bool:
        """Return True when this instance carries ``code``."""
        return self._props.code == code

    def to_json(self) -> dict[str, Any]:
        """Return the diagnostic payload ``{name, code, metadata?, cause?, stack}``.

        ``metadata`` and ``cause`` are left out when None. A cause that is a
        variant instance is expanded with its own ``to_json()``; any other
        exception is reduced to ``{code, message, stack}``.
        """
        return variant_payload(self)

    def to_string(self) -> str:
        return f"{self.name}: {self.message}"

    def to_detailed_string(self) -> str:
        return self.stack

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.name}(code={self.code!r}, metadata={self.metadata!r})"


def make_creator(code: str) -> classmethod:
    """Build the ``Variant.<code>(metadata=None, cause=None)`` classmethod."""

    def creator(cls: type[VariantError], metadata: Any = None, cause: Any = None) -> VariantError:
        return cls(code, metadata, cause)

    creator.__name__ = code
    creator.__doc__ = f"Create an error with code {code!r}."
    return classmethod(creator)


def make_predicate(code: str) -> property:
    """Build the ``is<code>`` property."""

    def predicate(self: VariantError) -> bool:
        return self._props.code == code

    predicate.__name__ = f"is{code}"
    return property(predicate, doc=f"True when the error code is {code!r}.")


def reserved_names() -> frozenset[str]:
    return frozenset(dir(VariantError)) | {"_props", "__slots__", "__qualname__", "__classcell__", "__module__", "__doc__"}


__all__ = ["VariantError", "make_creator", "make_predicate", "reserved_names"]
