"""
In-Memory Storage.

Dict-backed StoragePort used by tests and short-lived sessions. An
optional byte quota reproduces quota-exceeded failures of real stores.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from offline_ledger.resilience.errors import StorageQuotaExceeded


class InMemoryStorage:
    """Simple in-memory string key-value store."""

    def __init__(self, quota_bytes: Optional[int] = None) -> None:
        """
        Initialize the store.

        Args:
            quota_bytes: Maximum total size of keys and values (UTF-8),
                unlimited if None
        """
        self._items: Dict[str, str] = {}
        self.quota_bytes = quota_bytes

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            current = self.size_bytes() - self._entry_size(key, self._items.get(key))
            if current + self._entry_size(key, value) > self.quota_bytes:
                raise StorageQuotaExceeded(
                    f"Writing '{key}' would exceed quota of {self.quota_bytes} bytes"
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> Iterable[str]:
        return list(self._items)

    def size_bytes(self) -> int:
        """Total UTF-8 size of stored keys and values."""
        return sum(self._entry_size(k, v) for k, v in self._items.items())

    def __len__(self) -> int:
        return len(self._items)

    @staticmethod
    def _entry_size(key: str, value: Optional[str]) -> int:
        if value is None:
            return 0
        return len(key.encode("utf-8")) + len(value.encode("utf-8"))
