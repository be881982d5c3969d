"""Message templates for errorforge's own errors."""

from typing import Any

from errorforge.core.exceptions.codes import ErrorCode


class ErrorMessageTemplate:
    """Manager of the message template for each :class:`ErrorCode`."""

    _templates: dict[ErrorCode, str] = {
        ErrorCode.GENERAL_ERROR: "An unknown error occurred",
        ErrorCode.INVALID_ARGUMENT: '{parameter}: expected {expected}; got {actual}: "{value}"',
        ErrorCode.RESERVED_CODE: '{parameter}: "{value}" is reserved by VariantError',
        ErrorCode.UNKNOWN_CODE: '{variant}: "{code}" is not one of the declared codes {declared}',
    }

    @classmethod
    def get_message(cls, error_code: ErrorCode, **kwargs: Any) -> str:
        """Render the template of ``error_code``.

        Args:
            error_code: the code whose template is rendered
            **kwargs: template variables

        Returns:
            The formatted message. When a variable is missing, the generic
            message tagged with the code is returned instead.
        """
        template = cls._templates.get(error_code, cls._templates[ErrorCode.GENERAL_ERROR])
        try:
            return template.format(**kwargs)
        except KeyError:
            return f"{cls._templates[ErrorCode.GENERAL_ERROR]} (error code: {error_code.value})"


__all__ = ["ErrorMessageTemplate"]
