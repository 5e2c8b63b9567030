"""
Application-wide constants for Keystone.
"""

SERVICE_NAME = "keystone"

# File size constants (bytes)
BYTES_PER_KB = 1024
BYTES_PER_MB = 1024 * 1024

# Logging constants
DEFAULT_LOG_FILE = "logs/keystone.log"
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * BYTES_PER_MB
MIN_LOG_FILE_SIZE_BYTES = BYTES_PER_KB
DEFAULT_LOG_BACKUP_COUNT = 5
MAX_LOG_BACKUP_COUNT = 20

# Configuration file locations
CONFIG_DIR_NAME = "keystone"
CONFIG_FILE_NAME = "config.toml"
