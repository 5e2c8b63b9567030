"""
Pure utility helpers with no shared state.
"""

from .calculator import Calculator
from .strings import capitalize, is_empty, is_not_empty, join

__all__ = [
    "Calculator",
    "capitalize",
    "is_empty",
    "is_not_empty",
    "join",
]
