"""YAML file config store

Stores each record as ``<config_dir>/<name>.yml``.
"""

import os
import re
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from css_editor.config import get_default_config_dir
from css_editor.config_store.base import ConfigStoreBase
from css_editor.exceptions import ConfigSaveError, InvalidConfigNameError
from css_editor.logger import Logger, session_logger

MAX_NAME_LENGTH = 250
FILE_EXTENSION = ".yml"
_FORBIDDEN_CHARS = re.compile(r"[:?*<>\"'/\\\x00]")


def validate_config_name(name: str) -> None:
    """
    Check that ``name`` can be stored as a record file

    Raises:
        InvalidConfigNameError: If the name is empty, too long, has no
            namespace dot or holds path/reserved characters
    """
    if not name:
        raise InvalidConfigNameError(name, "name is empty")
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidConfigNameError(name, f"name exceeds {MAX_NAME_LENGTH} characters")
    if "." not in name:
        raise InvalidConfigNameError(name, "name must contain a namespace separator '.'")
    if _FORBIDDEN_CHARS.search(name):
        raise InvalidConfigNameError(name, "name contains reserved characters")


class YamlConfigStore(ConfigStoreBase):
    """Config store backed by one YAML file per record"""

    def __init__(self, config_dir: Optional[str] = None, logger: Optional[Logger] = None):
        """
        Initialize YAML config store

        Args:
            config_dir: Directory holding record files. If None, uses configured
                default from css_editor.config
        """
        if config_dir is None:
            config_dir = get_default_config_dir()
        self.config_dir = Path(config_dir)
        self.logger: Logger = logger or session_logger

    def _record_path(self, name: str) -> Path:
        return self.config_dir / f"{name}{FILE_EXTENSION}"

    def _read(self, name: str) -> Dict[str, Any]:
        try:
            validate_config_name(name)
        except InvalidConfigNameError:
            self.logger.debug("Config name cannot exist, returning empty record", name=name)
            return {}

        path = self._record_path(name)
        if not path.is_file():
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self.logger.warning("Failed to read config record", name=name, error=str(e))
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            self.logger.warning(
                "Config record has unexpected structure, treating as empty",
                name=name,
                type=type(data).__name__,
            )
            return {}
        return data

    def _write(self, name: str, data: Dict[str, Any]) -> None:
        try:
            validate_config_name(name)
        except InvalidConfigNameError as e:
            raise ConfigSaveError(name, e.message)

        path = self._record_path(name)
        tmp_name = None
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.config_dir, prefix=f".{name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=True, allow_unicode=True)
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, yaml.YAMLError) as e:
            self.logger.error("Failed to save config record", name=name, error=str(e))
            raise ConfigSaveError(name, str(e))
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        self.logger.debug("Config record saved", name=name, path=str(path))

    def list_all(self, prefix: str = "") -> List[str]:
        if not self.config_dir.is_dir():
            return []

        names = []
        for path in self.config_dir.glob(f"*{FILE_EXTENSION}"):
            if not path.is_file() or path.name.startswith("."):
                continue
            name = path.name[: -len(FILE_EXTENSION)]
            if name.startswith(prefix):
                names.append(name)
        return sorted(names)
