"""
KeystoneLogger: a LoggerAdapter that turns keyword arguments into record context.

    logger = get_logger(__name__, config_file="app.toml")
    logger.info("config_saved", entries=3)
    # record.extra_context == {"config_file": "app.toml", "entries": 3}
"""

import logging

_LOG_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


class KeystoneLogger(logging.LoggerAdapter):
    """Adapter whose bound context and call keywords land in ``extra_context``."""

    def process(self, msg, kwargs):
        fields = {k: kwargs.pop(k) for k in list(kwargs) if k not in _LOG_KWARGS}
        extra = dict(kwargs.pop("extra", None) or {})
        context = {**self.extra, **fields}
        if context:
            extra["extra_context"] = context
        kwargs["extra"] = extra
        return msg, kwargs
