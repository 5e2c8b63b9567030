"""
Keystone: immutable value objects with validating builders.

Architecture Overview:
- Models: the Person value object and its single-use builder
- Utils: null-tolerant string helpers and an integer calculator
- Exceptions: the KeystoneError hierarchy
- Logging: structured logging with key/value context
- Core: configuration loaded from TOML and the environment
"""

__version__ = "1.0.0"

from .exceptions import KeystoneError
from .models import Person, PersonBuilder
from .utils import Calculator, capitalize, is_empty, is_not_empty, join

__all__ = [
    "Person",
    "PersonBuilder",
    "Calculator",
    "capitalize",
    "is_empty",
    "is_not_empty",
    "join",
    "KeystoneError",
]
