"""
Logging configuration.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ..constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    SERVICE_NAME,
)

VALID_FORMATS = ("console", "json", "rich")
VALID_OUTPUTS = ("console", "file")


def resolve_level(level: Union[str, int]) -> int:
    """Turn a level name such as "debug" into its numeric value."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


@dataclass
class LoggingConfig:
    """Where log records go and how they are rendered."""

    level: Union[str, int] = logging.INFO
    format_type: str = "console"
    output: List[str] = field(default_factory=lambda: ["console"])
    file_path: Optional[Path] = None
    max_file_size: int = DEFAULT_LOG_FILE_SIZE_BYTES
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT
    service_name: str = SERVICE_NAME
    version: str = "unknown"

    def __post_init__(self):
        self.level = resolve_level(self.level)
        if self.format_type not in VALID_FORMATS:
            raise ValueError(f"format_type must be one of: {', '.join(VALID_FORMATS)}")
        if isinstance(self.output, str):
            self.output = [self.output]
        unknown = [o for o in self.output if o not in VALID_OUTPUTS]
        if unknown:
            raise ValueError(f"output must contain only: {', '.join(VALID_OUTPUTS)}")
        self.file_path = Path(self.file_path) if self.file_path else Path(DEFAULT_LOG_FILE)
