"""
JSON File Storage.

StoragePort persisted to a single JSON file so cached ledger data
survives restarts. The whole map is rewritten on every change through
a temporary file and an atomic rename.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from offline_ledger.resilience.errors import StorageFault

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """String key-value store backed by a JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Initialize the store, loading existing contents.

        An unreadable file is logged and treated as empty.

        Args:
            path: Location of the JSON file
        """
        self.path = Path(path)
        self._items: Dict[str, str] = self._load()

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        previous = self._items.get(key)
        self._items[key] = value
        try:
            self._flush()
        except OSError as e:
            if previous is None:
                del self._items[key]
            else:
                self._items[key] = previous
            raise StorageFault(f"Failed to write {self.path}: {e}") from e

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is None:
            return
        try:
            self._flush()
        except OSError as e:
            raise StorageFault(f"Failed to write {self.path}: {e}") from e

    def keys(self) -> Iterable[str]:
        return list(self._items)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring storage file {self.path}: not a JSON object")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(self._items, f)
        os.replace(tmp_path, self.path)
