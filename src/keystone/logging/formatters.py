"""
Log formatters: JSON lines, key=value console text and Rich terminal output.
"""

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with the record's key/value context inlined."""

    def __init__(self, service_name: str, version: str):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
        }
        entry.update(getattr(record, "extra_context", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class KeyValueFormatter(logging.Formatter):
    """Human-readable line followed by the record's context as key=value pairs."""

    def __init__(self):
        super().__init__(
            "%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra_context = getattr(record, "extra_context", None)
        if extra_context:
            line += " " + " ".join(f"{k}={v}" for k, v in extra_context.items())
        return line


def create_rich_handler() -> logging.Handler:
    """Rich handler writing to stderr."""
    return RichHandler(console=Console(stderr=True), markup=False, rich_tracebacks=True)
