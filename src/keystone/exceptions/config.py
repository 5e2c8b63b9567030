"""
Configuration exceptions raised while loading or saving the settings file.
"""

from typing import Any, List

from .base import KeystoneError
from .templates import ErrorMessageTemplates


class ConfigurationError(KeystoneError):
    """The configuration file could not be read or written."""

    error_code = "CONFIG_ERROR"


class InvalidConfigurationError(ConfigurationError):
    """A configuration source holds a value of the wrong shape."""

    error_code = "CONFIG_INVALID"

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        super().__init__(
            ErrorMessageTemplates.CONFIG_INVALID.format(field=field, value=value, expected=expected),
            help_text=f"Make '{field}' match: {expected}",
            field=field,
        )


class ConfigurationValidationError(ConfigurationError):
    """Configuration values failed model validation."""

    error_code = "CONFIG_VALIDATION"

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = ErrorMessageTemplates.CONFIG_VALIDATION + "".join(f"\n  - {e}" for e in errors)
        super().__init__(
            message,
            help_text="Fix the listed values in the configuration file or KEYSTONE_* variables",
            errors=errors,
        )
