"""
Configuration manager for Keystone.

Loads configuration from a TOML file, applies environment variable
overrides and validates the result.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError as PydanticValidationError

from keystone.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from keystone.exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from keystone.logging import LoggingConfig, configure_logging, get_logger

from .models import KeystoneConfig, KeystoneSettings


def default_config_file() -> Path:
    """Standard per-user configuration file location."""
    return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class ConfigManager:
    """Configuration manager with TOML persistence and environment overrides."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to custom config file. If None, uses default location.
        """
        self.config_file = Path(config_file) if config_file else default_config_file()
        self._config: Optional[KeystoneConfig] = None
        self._logger = get_logger(__name__, config_file=str(self.config_file))

    def load_config(self) -> KeystoneConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = KeystoneConfig(**config_data)
        except PydanticValidationError as e:
            raise ConfigurationValidationError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            ) from e

        self._logger.debug("config_loaded")
        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {self.config_file}",
                help_text="Check file permissions and path",
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = KeystoneSettings()
        logging_config = config_data.setdefault("logging", {})

        if settings.keystone_log_level:
            logging_config["level"] = settings.keystone_log_level
        if settings.keystone_log_format:
            logging_config["format"] = settings.keystone_log_format
        if settings.keystone_log_output:
            # Comma-separated outputs
            logging_config["output"] = [
                o.strip() for o in settings.keystone_log_output.split(",") if o.strip()
            ]
        if settings.keystone_log_file:
            logging_config["file_path"] = settings.keystone_log_file

        return config_data

    def save_config(self, config: Optional[KeystoneConfig] = None) -> None:
        """Save configuration to TOML file."""
        if config is None:
            config = self.load_config()

        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        config_dict = _remove_none_values(config.model_dump(mode="json"))

        try:
            with open(self.config_file, "wb") as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write configuration file: {self.config_file}",
                help_text="Check file permissions and path",
            ) from e

        self._config = config
        self._logger.info("config_saved")

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        self.save_config(KeystoneConfig())

    def to_logging_config(self) -> LoggingConfig:
        """Translate the loaded configuration into a logging setup."""
        from keystone import __version__

        config = self.load_config()
        return LoggingConfig(
            level=config.logging.level.value,
            format_type=config.logging.format,
            output=config.logging.output,
            file_path=config.logging.file_path,
            max_file_size=config.logging.max_file_size,
            backup_count=config.logging.backup_count,
            service_name=config.service_name,
            version=__version__,
        )

    def apply_logging(self) -> LoggingConfig:
        """Configure process logging from the loaded settings."""
        logging_config = self.to_logging_config()
        configure_logging(logging_config)
        self._logger.debug("logging_configured", format=logging_config.format_type)
        return logging_config


def _remove_none_values(data):
    """Recursively remove None values, which TOML cannot represent."""
    if isinstance(data, dict):
        return {k: _remove_none_values(v) for k, v in data.items() if v is not None}
    if isinstance(data, list):
        return [_remove_none_values(item) for item in data if item is not None]
    return data
