"""
Installs Keystone's handlers on the root logger.
"""

import logging
import logging.handlers
import sys
from typing import List

from .config import LoggingConfig
from .formatters import KeyValueFormatter, StructuredFormatter, create_rich_handler
from .loggers import KeystoneLogger


class LoggingManager:
    """Owns the handlers Keystone adds so reconfiguring replaces only those."""

    def __init__(self):
        self.handlers: List[logging.Handler] = []

    def configure(self, config: LoggingConfig):
        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

        root_logger.setLevel(config.level)
        for output in config.output:
            handler = self._file_handler(config) if output == "file" else self._console_handler(config)
            handler.setLevel(config.level)
            root_logger.addHandler(handler)
            self.handlers.append(handler)

    def _console_handler(self, config: LoggingConfig) -> logging.Handler:
        if config.format_type == "rich":
            return create_rich_handler()
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._formatter(config))
        return handler

    def _file_handler(self, config: LoggingConfig) -> logging.Handler:
        config.file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        # rich renders to the terminal only
        handler.setFormatter(self._formatter(config))
        return handler

    @staticmethod
    def _formatter(config: LoggingConfig) -> logging.Formatter:
        if config.format_type == "json":
            return StructuredFormatter(config.service_name, config.version)
        return KeyValueFormatter()


logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Route log records according to ``config``."""
    logging_manager.configure(config)


def get_logger(name: str, **context) -> KeystoneLogger:
    """Logger for ``name`` with ``context`` attached to every record."""
    return KeystoneLogger(logging.getLogger(name), context)
