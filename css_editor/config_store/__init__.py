"""Config store module

Provides the abstract config store, the YAML file implementation used by
default and an in-memory implementation.
"""

from typing import Optional

from css_editor.config_store.base import ConfigRecord, ConfigStoreBase, EditableConfigRecord
from css_editor.config_store.memory_store import MemoryConfigStore
from css_editor.config_store.yaml_store import YamlConfigStore, validate_config_name

# Global config store instance
_config_store: Optional[ConfigStoreBase] = None


def get_config_store(config_dir: Optional[str] = None) -> ConfigStoreBase:
    """
    Get or create the global config store instance

    Args:
        config_dir: Directory for record files (only used on first call).
                    If None, uses configured default from css_editor.config

    Returns:
        ConfigStoreBase implementation (YamlConfigStore by default)
    """
    global _config_store
    if _config_store is None:
        _config_store = YamlConfigStore(config_dir)
    return _config_store


def set_config_store(store: Optional[ConfigStoreBase]) -> None:
    """
    Set a custom config store implementation or reset to None

    Args:
        store: Custom config store, or None to reset
    """
    global _config_store
    _config_store = store


def reset_config_store() -> None:
    """Reset the global config store instance (useful for testing)"""
    global _config_store
    _config_store = None


__all__ = [
    "ConfigRecord",
    "ConfigStoreBase",
    "EditableConfigRecord",
    "MemoryConfigStore",
    "YamlConfigStore",
    "validate_config_name",
    "get_config_store",
    "set_config_store",
    "reset_config_store",
]
