"""
Unit tests for LoggingManager.
"""

import json
import logging
import logging.handlers

import pytest
from rich.logging import RichHandler

from keystone.logging import get_logger
from keystone.logging.config import LoggingConfig
from keystone.logging.formatters import KeyValueFormatter, StructuredFormatter
from keystone.logging.manager import LoggingManager, configure_logging, logging_manager


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    original_level = root_logger.level
    yield
    for handler in logging_manager.handlers:
        root_logger.removeHandler(handler)
        handler.close()
    logging_manager.handlers.clear()
    root_logger.setLevel(original_level)


@pytest.mark.unit
class TestLoggingManager:
    def setup_method(self):
        self._original_root_level = logging.getLogger().level
        self.manager = LoggingManager()

    def teardown_method(self):
        root_logger = logging.getLogger()
        for handler in self.manager.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.setLevel(self._original_root_level)

    def test_console_handler(self):
        self.manager.configure(LoggingConfig(level="DEBUG"))

        assert len(self.manager.handlers) == 1
        handler = self.manager.handlers[0]
        assert isinstance(handler.formatter, KeyValueFormatter)
        assert handler.level == logging.DEBUG
        assert handler in logging.getLogger().handlers
        assert logging.getLogger().level == logging.DEBUG

    def test_json_handler(self):
        self.manager.configure(LoggingConfig(format_type="json"))

        assert isinstance(self.manager.handlers[0].formatter, StructuredFormatter)

    def test_rich_handler(self):
        self.manager.configure(LoggingConfig(format_type="rich"))

        assert isinstance(self.manager.handlers[0], RichHandler)

    def test_file_handler_writes_json(self, temp_dir):
        log_file = temp_dir / "logs" / "app.log"
        self.manager.configure(LoggingConfig(output="file", file_path=log_file, format_type="json"))

        handler = self.manager.handlers[0]
        assert isinstance(handler, logging.handlers.RotatingFileHandler)

        get_logger("keystone.tests.manager").info("written", key="value")
        handler.flush()
        entry = json.loads(log_file.read_text().splitlines()[-1])
        assert entry["message"] == "written"
        assert entry["key"] == "value"

    def test_rich_format_falls_back_to_text_in_files(self, temp_dir):
        self.manager.configure(
            LoggingConfig(output="file", file_path=temp_dir / "app.log", format_type="rich")
        )

        assert isinstance(self.manager.handlers[0].formatter, KeyValueFormatter)

    def test_reconfigure_replaces_own_handlers_only(self):
        foreign = logging.NullHandler()
        root_logger = logging.getLogger()
        root_logger.addHandler(foreign)
        try:
            self.manager.configure(LoggingConfig())
            first = self.manager.handlers[0]
            self.manager.configure(LoggingConfig(output=["console"]))

            assert len(self.manager.handlers) == 1
            assert first not in root_logger.handlers
            assert foreign in root_logger.handlers
        finally:
            root_logger.removeHandler(foreign)


@pytest.mark.unit
def test_configure_logging_uses_module_manager(restore_root_logger):
    configure_logging(LoggingConfig(level="WARNING"))

    assert len(logging_manager.handlers) == 1
    assert logging.getLogger().level == logging.WARNING
