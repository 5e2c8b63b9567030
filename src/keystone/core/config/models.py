"""
Configuration models for Keystone.

Pydantic-based models that validate the TOML configuration file, plus the
pydantic-settings model holding environment variable overrides.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from keystone.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    MAX_LOG_BACKUP_COUNT,
    MIN_LOG_FILE_SIZE_BYTES,
    SERVICE_NAME,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=MAX_LOG_BACKUP_COUNT,
        description="Number of backup log files to keep",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class KeystoneConfig(BaseModel):
    """Main Keystone configuration model."""

    service_name: str = Field(SERVICE_NAME, description="Service name stamped on log records")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class KeystoneSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    keystone_log_level: Optional[str] = Field(None, alias="KEYSTONE_LOG_LEVEL")
    keystone_log_format: Optional[str] = Field(None, alias="KEYSTONE_LOG_FORMAT")
    keystone_log_output: Optional[str] = Field(None, alias="KEYSTONE_LOG_OUTPUT")
    keystone_log_file: Optional[str] = Field(None, alias="KEYSTONE_LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
