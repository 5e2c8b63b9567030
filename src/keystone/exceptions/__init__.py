"""
Keystone Exception Hierarchy

Every error raised by Keystone derives from KeystoneError so that callers can
handle application failures uniformly.

    KeystoneError
    ├── ValidationError (also a ValueError)
    │   ├── RequiredFieldError
    │   └── InvalidRangeError
    ├── NullArgumentError (also a TypeError)
    ├── BuilderStateError
    └── ConfigurationError
        ├── InvalidConfigurationError
        └── ConfigurationValidationError
"""

from .base import KeystoneError
from .builder import BuilderStateError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .templates import ErrorMessageTemplates
from .validation import (
    InvalidRangeError,
    NullArgumentError,
    RequiredFieldError,
    ValidationError,
)

__all__ = [
    "KeystoneError",
    "ValidationError",
    "RequiredFieldError",
    "InvalidRangeError",
    "NullArgumentError",
    "BuilderStateError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
    "ErrorMessageTemplates",
]
