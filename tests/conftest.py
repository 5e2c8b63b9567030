"""
Pytest configuration and shared fixtures for Keystone tests.
"""

import tempfile
from pathlib import Path

import pytest

ENV_VARS = [
    "KEYSTONE_LOG_LEVEL",
    "KEYSTONE_LOG_FORMAT",
    "KEYSTONE_LOG_OUTPUT",
    "KEYSTONE_LOG_FILE",
]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_file(temp_dir):
    """Path to a config file inside a not-yet-created config directory."""
    return temp_dir / ".config" / "keystone" / "config.toml"


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "service_name": "keystone-test",
        "logging": {
            "level": "DEBUG",
            "format": "json",
            "output": ["console", "file"],
            "file_path": "logs/test.log",
            "backup_count": 3,
        },
    }


@pytest.fixture
def clean_environment(monkeypatch, temp_dir):
    """Remove Keystone environment variables and any stray .env file."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(temp_dir)
    return monkeypatch
