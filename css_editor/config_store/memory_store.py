"""In-memory config store for embedding and tests."""

import copy
from typing import Any, Dict, List, Optional

from css_editor.config_store.base import ConfigStoreBase


class MemoryConfigStore(ConfigStoreBase):
    """Dict-backed config store. Records are deep-copied in and out."""

    def __init__(self, records: Optional[Dict[str, Dict[str, Any]]] = None):
        self._records: Dict[str, Dict[str, Any]] = copy.deepcopy(records or {})

    def _read(self, name: str) -> Dict[str, Any]:
        return copy.deepcopy(self._records.get(name, {}))

    def _write(self, name: str, data: Dict[str, Any]) -> None:
        self._records[name] = copy.deepcopy(data)

    def list_all(self, prefix: str = "") -> List[str]:
        return sorted(name for name in self._records if name.startswith(prefix))
