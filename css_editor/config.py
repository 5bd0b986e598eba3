"""Runtime configuration for css-editor.

All locations derive from a single data directory which can be overridden
by environment variables or, for the test suite, redirected with
``Config.set_test_mode``.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from css_editor.exceptions import ConfigurationError

DEFAULT_DATA_DIR = "data"
DEFAULT_FILE_MODE = 0o664
DEFAULT_DIRECTORY_MODE = 0o775
DEFAULT_LOG_LEVEL = "INFO"


def _parse_mode(value: str, variable: str) -> int:
    try:
        return int(value, 8)
    except ValueError:
        raise ConfigurationError(
            f"{variable} must be an octal permission mode, got '{value}'",
            code="INVALID_MODE",
            details={"variable": variable, "value": value},
        )


class Config:
    """Environment driven configuration with a test-mode override"""

    _test_data_dir: Optional[Path] = None

    @classmethod
    def set_test_mode(cls, data_dir: Path) -> None:
        """Redirect every data location under ``data_dir``"""
        cls._test_data_dir = Path(data_dir)

    @classmethod
    def clear_test_mode(cls) -> None:
        cls._test_data_dir = None

    @classmethod
    def is_test_mode(cls) -> bool:
        return cls._test_data_dir is not None

    @classmethod
    def get_data_dir(cls) -> Path:
        if cls._test_data_dir is not None:
            return cls._test_data_dir
        return Path(os.environ.get("CSS_EDITOR_DATA_DIR", DEFAULT_DATA_DIR))

    @classmethod
    def _get_dir(cls, variable: str, subdir: str) -> Path:
        # Test mode wins over environment overrides
        if cls._test_data_dir is None:
            override = os.environ.get(variable)
            if override:
                return Path(override)
        return cls.get_data_dir() / subdir

    @classmethod
    def get_public_dir(cls) -> Path:
        """Root directory of the ``public://`` scheme"""
        return cls._get_dir("CSS_EDITOR_PUBLIC_DIR", "public")

    @classmethod
    def get_private_dir(cls) -> Path:
        """Root directory of the ``private://`` scheme"""
        return cls._get_dir("CSS_EDITOR_PRIVATE_DIR", "private")

    @classmethod
    def get_config_dir(cls) -> Path:
        """Directory holding one YAML file per config record"""
        return cls._get_dir("CSS_EDITOR_CONFIG_DIR", "config")

    @classmethod
    def get_file_mode(cls) -> int:
        value = os.environ.get("CSS_EDITOR_FILE_MODE")
        if not value:
            return DEFAULT_FILE_MODE
        return _parse_mode(value, "CSS_EDITOR_FILE_MODE")

    @classmethod
    def get_directory_mode(cls) -> int:
        value = os.environ.get("CSS_EDITOR_DIRECTORY_MODE")
        if not value:
            return DEFAULT_DIRECTORY_MODE
        return _parse_mode(value, "CSS_EDITOR_DIRECTORY_MODE")

    @classmethod
    def get_log_level(cls) -> int:
        name = os.environ.get("CSS_EDITOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(
                f"Unknown log level '{name}'",
                code="INVALID_LOG_LEVEL",
                details={"value": name},
            )
        return level


def get_default_public_dir() -> str:
    return str(Config.get_public_dir())


def get_default_config_dir() -> str:
    return str(Config.get_config_dir())
