"""Centralized configuration documentation and defaults for css-editor.

This module provides an overview of all configuration options and their
environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Data & Storage
# --------------
# CSS_EDITOR_DATA_DIR: Base directory for all persistent data (default: ./data)
#   Used for: public files, private files, config records
#
# CSS_EDITOR_PUBLIC_DIR: Root of the public:// scheme (default: {DATA_DIR}/public)
#   Generated theme stylesheets land in {PUBLIC_DIR}/css_editor/
#
# CSS_EDITOR_PRIVATE_DIR: Root of the private:// scheme (default: {DATA_DIR}/private)
#
# CSS_EDITOR_CONFIG_DIR: YAML config records (default: {DATA_DIR}/config)
#   One file per record, e.g. css_editor.theme.basic.yml
#
# Permissions
# -----------
# CSS_EDITOR_FILE_MODE: Octal mode applied to written files (default: 664)
# CSS_EDITOR_DIRECTORY_MODE: Octal mode applied to created directories (default: 775)
#
# Development & Testing
# ---------------------
# CSS_EDITOR_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

import os

from css_editor.config import (
    Config,
    DEFAULT_DIRECTORY_MODE,
    DEFAULT_FILE_MODE,
    DEFAULT_LOG_LEVEL,
)
from css_editor.exceptions import ConfigurationError


def get_config_summary() -> dict:
    """Get a summary of current configuration from environment.

    Returns:
        Dictionary with current configuration values
    """
    return {
        "data_dir": str(Config.get_data_dir()),
        "public_dir": str(Config.get_public_dir()),
        "private_dir": str(Config.get_private_dir()),
        "config_dir": str(Config.get_config_dir()),
        "file_mode": os.getenv("CSS_EDITOR_FILE_MODE", oct(DEFAULT_FILE_MODE)[2:]),
        "directory_mode": os.getenv("CSS_EDITOR_DIRECTORY_MODE", oct(DEFAULT_DIRECTORY_MODE)[2:]),
        "log_level": os.getenv("CSS_EDITOR_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        "test_mode": Config.is_test_mode(),
    }


def validate_configuration() -> tuple[bool, list[str]]:
    """Validate current configuration for completeness and consistency.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []

    # Check every data directory is writable
    for label, getter in [
        ("Public", Config.get_public_dir),
        ("Private", Config.get_private_dir),
        ("Config", Config.get_config_dir),
    ]:
        try:
            directory = getter()
            if not directory.exists():
                directory.mkdir(parents=True, exist_ok=True)
            if not os.access(directory, os.W_OK):
                errors.append(f"{label} directory not writable: {directory}")
        except Exception as e:
            errors.append(f"Cannot access {label.lower()} directory: {e}")

    for getter in (Config.get_file_mode, Config.get_directory_mode, Config.get_log_level):
        try:
            getter()
        except ConfigurationError as e:
            errors.append(str(e))

    return len(errors) == 0, errors
