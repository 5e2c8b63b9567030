"""
Immutable person value object and its validating builder.

``Person`` instances are only ever observed in a valid state: the builder
stages values without checking them and validation runs once, when the
instance is constructed by ``build()``.

    person = (
        Person.builder()
        .with_first_name("John")
        .with_last_name("Doe")
        .with_age(30)
        .build()
    )
    person.full_name  # "John Doe"
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ..exceptions import (
    BuilderStateError,
    InvalidRangeError,
    RequiredFieldError,
    ValidationError,
)
from ..logging import get_logger

logger = get_logger(__name__)


def validate_person_fields(first_name: Optional[str], last_name: Optional[str], age: int) -> None:
    """Check person invariants, reporting only the first violation.

    Raises:
        RequiredFieldError: first or last name is None (first name checked first)
        InvalidRangeError: age is negative
    """
    if first_name is None:
        raise RequiredFieldError("firstName")
    if last_name is None:
        raise RequiredFieldError("lastName")
    if age < 0:
        raise InvalidRangeError("age", age)


@dataclass(frozen=True)
class Person:
    """A validated (first name, last name, age) triple.

    Equality and hashing cover the three stored fields only; ``full_name`` is
    derived on access.
    """

    first_name: str
    last_name: str
    age: int

    def __post_init__(self):
        validate_person_fields(self.first_name, self.last_name, self.age)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def builder(cls) -> "PersonBuilder":
        """Start staging a new Person."""
        return PersonBuilder()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class PersonBuilder:
    """Single-use staged constructor for Person.

    Setters accept any value, including invalid ones. The first ``build()``
    call validates and consumes the builder whether or not it succeeds; any
    later call raises BuilderStateError.
    """

    def __init__(self):
        self._first_name: Optional[str] = None
        self._last_name: Optional[str] = None
        self._age: int = 0
        self._consumed = False

    @property
    def is_consumed(self) -> bool:
        return self._consumed

    def _ensure_accumulating(self) -> None:
        if self._consumed:
            raise BuilderStateError(type(self).__name__)

    def with_first_name(self, first_name: Optional[str]) -> "PersonBuilder":
        self._ensure_accumulating()
        self._first_name = first_name
        return self

    def with_last_name(self, last_name: Optional[str]) -> "PersonBuilder":
        self._ensure_accumulating()
        self._last_name = last_name
        return self

    def with_age(self, age: int) -> "PersonBuilder":
        self._ensure_accumulating()
        self._age = age
        return self

    def build(self) -> Person:
        """Validate the staged values and create the Person.

        Raises:
            RequiredFieldError: a name was never set
            InvalidRangeError: age is negative
            BuilderStateError: the builder was already consumed
        """
        self._ensure_accumulating()
        self._consumed = True

        try:
            person = Person(self._first_name, self._last_name, self._age)
        except ValidationError as e:
            logger.warning("person_build_failed", **e.log_fields())
            raise

        logger.debug("person_built", age=person.age)
        return person
