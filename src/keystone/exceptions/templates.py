"""
Message templates shared by Keystone exceptions.

Tests and callers match on these phrases, so keep them stable.
"""


class ErrorMessageTemplates:
    REQUIRED_FIELD = "{field} cannot be null"
    NEGATIVE_VALUE = "{field} cannot be negative"
    NULL_ARGUMENT = "{argument} cannot be null"
    BUILDER_CONSUMED = "{builder} has already been used to build an instance"
    CONFIG_INVALID = (
        "Invalid configuration for '{field}': got {value!r}, expected {expected}"
    )
    CONFIG_VALIDATION = "Configuration validation failed:"
