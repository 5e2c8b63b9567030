"""
Configuration management for Keystone.

Usage:
    from keystone.core.config import ConfigManager

    ConfigManager().apply_logging()
"""

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .manager import ConfigManager, default_config_file
from .models import KeystoneConfig, KeystoneSettings, LoggingSettings, LogLevel

__all__ = [
    "KeystoneConfig",
    "KeystoneSettings",
    "LoggingSettings",
    "LogLevel",
    "ConfigManager",
    "default_config_file",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
