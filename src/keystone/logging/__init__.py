"""
Keystone Logging Package

- config: LoggingConfig
- formatters: JSON, key=value console and Rich output
- loggers: KeystoneLogger, which records keyword arguments as context
- manager: installs handlers on the root logger
"""

from .config import LoggingConfig
from .formatters import KeyValueFormatter, StructuredFormatter
from .loggers import KeystoneLogger
from .manager import LoggingManager, configure_logging, get_logger, logging_manager

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "logging_manager",
    "configure_logging",
    "KeystoneLogger",
    "get_logger",
    "StructuredFormatter",
    "KeyValueFormatter",
]
