"""
Builder lifecycle exceptions.
"""

from .base import KeystoneError
from .templates import ErrorMessageTemplates


class BuilderStateError(KeystoneError):
    """A single-use builder was touched after build()."""

    error_code = "BUILDER_CONSUMED"

    def __init__(self, builder: str):
        super().__init__(
            ErrorMessageTemplates.BUILDER_CONSUMED.format(builder=builder),
            help_text="Create a new builder for each instance",
            builder=builder,
        )
