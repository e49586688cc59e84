"""
Storage Port Protocol.

Defines the storage primitive that PersistentKVCache writes through.
The contract mirrors a browser-style key-value store:

    - get_item returns the stored string or None
    - set_item may raise (quota exceeded, storage disabled)
    - remove_item is a no-op for unknown keys
    - keys enumerates every stored key (used for namespace-wide clear)

Design Notes:
    - Synchronous; no operation in the cache layer suspends
    - Values are opaque strings, serialization belongs to the cache
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable


@runtime_checkable
class StoragePort(Protocol):
    """Abstract interface for a string key-value store."""

    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store value under key. May raise StorageFault."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        ...

    def keys(self) -> Iterable[str]:
        """Enumerate all stored keys."""
        ...
