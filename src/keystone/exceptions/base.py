"""
Root of the Keystone exception hierarchy.
"""

from typing import Any, Dict, Optional


class KeystoneError(Exception):
    """Base class for every error Keystone raises.

    ``details`` carries structured facts about the failure (the offending
    field, argument or file). Subclasses set ``error_code``. Wrap an
    underlying cause with ``raise KeystoneError(...) from cause``.
    """

    error_code: Optional[str] = None

    def __init__(self, message: str, help_text: Optional[str] = None, **details: Any):
        self.message = message
        self.help_text = help_text
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.help_text:
            return f"{self.message}\n\nHelp: {self.help_text}"
        return self.message

    def log_fields(self) -> Dict[str, Any]:
        """Flat key/value view attached to structured log records."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            **self.details,
        }
