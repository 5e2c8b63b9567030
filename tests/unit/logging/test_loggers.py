"""
Unit tests for KeystoneLogger and get_logger.
"""

import logging

import pytest

from keystone.logging import KeystoneLogger, get_logger

LOGGER_NAME = "keystone.tests.loggers"


@pytest.mark.unit
class TestKeystoneLogger:
    def test_get_logger_returns_adapter(self):
        logger = get_logger(LOGGER_NAME)

        assert isinstance(logger, KeystoneLogger)
        assert logger.logger is logging.getLogger(LOGGER_NAME)

    def test_keywords_become_context(self, caplog):
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            get_logger(LOGGER_NAME).info("login_attempt", user_id=123, action="login")

        record = caplog.records[-1]
        assert record.getMessage() == "login_attempt"
        assert record.extra_context == {"user_id": 123, "action": "login"}

    def test_bound_context_is_merged(self, caplog):
        logger = get_logger(LOGGER_NAME, request="r1")
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            logger.info("step", step=1)

        assert caplog.records[-1].extra_context == {"request": "r1", "step": 1}

    def test_call_keyword_overrides_bound_context(self, caplog):
        logger = get_logger(LOGGER_NAME, step=0)
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            logger.info("step", step=2)

        assert caplog.records[-1].extra_context == {"step": 2}

    def test_no_context_no_attribute(self, caplog):
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            get_logger(LOGGER_NAME).info("plain")

        assert not hasattr(caplog.records[-1], "extra_context")

    def test_standard_keywords_pass_through(self, caplog):
        with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                get_logger(LOGGER_NAME).error("failed", exc_info=True, extra={"tag": "x"}, attempt=1)

        record = caplog.records[-1]
        assert record.exc_info is not None
        assert record.tag == "x"
        assert record.extra_context == {"attempt": 1}
