"""
Domain models.
"""

from .person import Person, PersonBuilder, validate_person_fields

__all__ = [
    "Person",
    "PersonBuilder",
    "validate_person_fields",
]
