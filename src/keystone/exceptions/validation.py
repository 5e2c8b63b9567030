"""
Validation exceptions.

Raised when a value object or utility function receives input that breaks
its contract.
"""

from typing import Any

from .base import KeystoneError
from .templates import ErrorMessageTemplates


class ValidationError(KeystoneError, ValueError):
    """A value failed validation."""


class RequiredFieldError(ValidationError):
    """A required field was never set."""

    error_code = "FIELD_REQUIRED"

    def __init__(self, field: str):
        self.field = field
        super().__init__(
            ErrorMessageTemplates.REQUIRED_FIELD.format(field=field),
            help_text=f"Provide a value for '{field}' before building",
            field=field,
        )


class InvalidRangeError(ValidationError):
    """A numeric field is outside its allowed range."""

    error_code = "VALUE_OUT_OF_RANGE"

    def __init__(self, field: str, value: Any, expected: str = ">= 0"):
        self.field = field
        self.value = value
        super().__init__(
            ErrorMessageTemplates.NEGATIVE_VALUE.format(field=field),
            help_text=f"'{field}' must be {expected}",
            field=field,
            value=value,
        )


class NullArgumentError(KeystoneError, TypeError):
    """A required function argument was None."""

    error_code = "ARGUMENT_NULL"

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(
            ErrorMessageTemplates.NULL_ARGUMENT.format(argument=argument),
            argument=argument,
        )
