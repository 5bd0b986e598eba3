"""Base config store interface

A config store holds named records (``css_editor.theme.basic``) made of
flat key/value fields. Reads and writes go through two distinct handles:

* ``get`` returns an immutable :class:`ConfigRecord` snapshot.
* ``get_editable`` returns an :class:`EditableConfigRecord` whose changes
  only reach the store when ``save()`` is called.
"""

import copy
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, List, Optional


class ConfigRecord:
    """Read-only snapshot of a config record"""

    def __init__(self, name: str, data: Optional[Dict[str, Any]] = None):
        self._name = name
        self._data = MappingProxyType(copy.deepcopy(data or {}))

    @property
    def name(self) -> str:
        return self._name

    def get(self, key: str, default: Any = None) -> Any:
        """Return a field value, or ``default`` when the field is missing"""
        return copy.deepcopy(self._data.get(key, default))

    def is_new(self) -> bool:
        """True when the record has no stored fields"""
        return not self._data

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(dict(self._data))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, fields={sorted(self._data)})"


class EditableConfigRecord:
    """Mutable view of a config record, committed explicitly with save()"""

    def __init__(self, store: "ConfigStoreBase", name: str, data: Optional[Dict[str, Any]] = None):
        self._store = store
        self._name = name
        self._data: Dict[str, Any] = copy.deepcopy(data or {})

    @property
    def name(self) -> str:
        return self._name

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> "EditableConfigRecord":
        self._data[key] = value
        return self

    def clear(self, key: str) -> "EditableConfigRecord":
        self._data.pop(key, None)
        return self

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def save(self) -> "EditableConfigRecord":
        """
        Commit the record to its store

        Raises:
            ConfigSaveError: If the store cannot persist the record
        """
        self._store._write(self._name, copy.deepcopy(self._data))
        return self


class ConfigStoreBase(ABC):
    """Abstract base class for config store implementations"""

    def get(self, name: str) -> ConfigRecord:
        """
        Load an immutable snapshot of a record

        Missing records (and names that can never exist) yield an empty
        snapshot rather than an error.
        """
        return ConfigRecord(name, self._read(name))

    def get_editable(self, name: str) -> EditableConfigRecord:
        """Load a record for editing; changes persist only on save()"""
        return EditableConfigRecord(self, name, self._read(name))

    @abstractmethod
    def list_all(self, prefix: str = "") -> List[str]:
        """
        List record names starting with ``prefix``

        Args:
            prefix: Name prefix to filter by (empty string lists everything)

        Returns:
            List of record names
        """
        pass

    @abstractmethod
    def _read(self, name: str) -> Dict[str, Any]:
        """Return stored fields for ``name`` or an empty dict. Must not raise."""
        pass

    @abstractmethod
    def _write(self, name: str, data: Dict[str, Any]) -> None:
        """
        Persist fields for ``name``

        Raises:
            ConfigSaveError: If the record cannot be written
        """
        pass
