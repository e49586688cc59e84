"""
Persistent Cache - TTL Key-Value Cache over a Storage Port.

Stores API responses as timestamped JSON records so they can be served
back when the remote ledger is unreachable.

Design Notes:
    - Best-effort: storage faults are logged and swallowed, never raised
    - TTL-based expiration, evicted lazily on read
    - Keys are namespaced with a prefix so clear() leaves foreign keys alone
    - Time is read through an injected clock
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Protocol

from offline_ledger.interfaces.clock import Clock, system_clock
from offline_ledger.interfaces.storage import StoragePort

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "shop_pwa_cache_"
DEFAULT_TTL = timedelta(hours=24)


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collection."""

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        ...


def _check_json_keys(value: Any) -> None:
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"cache data has non-string key {key!r}")
            _check_json_keys(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_json_keys(item)


@dataclass(frozen=True)
class CacheEntry:
    """
    A single persisted record.

    timestamp is the write instant in epoch milliseconds, never the
    business date of the cached data.
    """

    data: Any
    timestamp: int

    def to_json(self) -> str:
        """
        Serialize the record.

        Raises:
            TypeError: If data is not JSON-native (including dict keys
                that are not strings, which JSON would coerce)
        """
        _check_json_keys(self.data)
        return json.dumps({"data": self.data, "timestamp": self.timestamp})

    @classmethod
    def from_json(cls, raw: str) -> "CacheEntry":
        """
        Parse a persisted record.

        Raises:
            ValueError: If the record is not valid JSON or lacks fields
        """
        payload = json.loads(raw)
        if not isinstance(payload, dict) or "data" not in payload:
            raise ValueError("cache record has no data field")
        timestamp = payload.get("timestamp")
        if not isinstance(timestamp, (int, float)) or isinstance(timestamp, bool):
            raise ValueError("cache record has no numeric timestamp")
        return cls(data=payload["data"], timestamp=int(timestamp))


@dataclass
class CacheStats:
    """Cache statistics."""

    hits: int = 0
    misses: int = 0
    expirations: int = 0
    write_failures: int = 0
    read_failures: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


def to_epoch_millis(instant: datetime) -> int:
    """Convert an aware datetime to integer epoch milliseconds."""
    return int(instant.timestamp() * 1000)


class PersistentKVCache:
    """
    TTL cache persisted through a StoragePort.

    Record Format:
        key:   f"{namespace}{logical_key}"
        value: '{"data": <json>, "timestamp": <epoch ms>}'

        Example: "shop_pwa_cache_payments_date_2026-02-13"
    """

    def __init__(
        self,
        storage: StoragePort,
        *,
        namespace: str = DEFAULT_NAMESPACE,
        ttl: timedelta = DEFAULT_TTL,
        clock: Clock = system_clock,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
    ) -> None:
        """
        Initialize persistent cache.

        Args:
            storage: Storage primitive to write through
            namespace: Prefix applied to every logical key
            ttl: Age after which an entry is treated as expired
            clock: Source of the current instant
            metrics_collector: Optional collector for hit/miss counts
        """
        self.storage = storage
        self.namespace = namespace
        self.ttl = ttl
        self._ttl_ms = int(ttl.total_seconds() * 1000)
        self._clock = clock
        self._metrics = metrics_collector
        self._stats = CacheStats()

    def set(self, key: str, data: Any) -> None:
        """
        Store data under key, overwriting any previous entry.

        A storage or serialization failure is logged and the write is
        dropped.

        Args:
            key: Logical cache key
            data: JSON-native value (string dict keys only)
        """
        entry = CacheEntry(data=data, timestamp=to_epoch_millis(self._clock()))
        try:
            self.storage.set_item(self._full_key(key), entry.to_json())
        except Exception as e:
            self._stats.write_failures += 1
            self._record("storage_fault", operation="set")
            logger.warning(f"Failed to cache data for '{key}': {e}")
            return

        logger.debug(f"Cache SET: {key}")

    def get(self, key: str) -> Optional[Any]:
        """
        Get data from cache.

        Args:
            key: Logical cache key

        Returns:
            Cached data, or None if missing, expired, malformed or the
            storage could not be read
        """
        full_key = self._full_key(key)
        try:
            raw = self.storage.get_item(full_key)
            if raw is None:
                self._miss(key)
                return None
            entry = CacheEntry.from_json(raw)
        except Exception as e:
            self._stats.read_failures += 1
            self._record("storage_fault", operation="get")
            logger.warning(f"Failed to retrieve cached data for '{key}': {e}")
            self._miss(key)
            return None

        now_ms = to_epoch_millis(self._clock())
        if now_ms - entry.timestamp > self._ttl_ms:
            self._evict(full_key)
            self._stats.expirations += 1
            self._record("cache_expired")
            self._miss(key)
            logger.debug(f"Cache EXPIRED: {key}")
            return None

        self._stats.hits += 1
        self._record("cache_hit")
        logger.debug(f"Cache HIT: {key}")
        return entry.data

    def clear(self) -> int:
        """
        Remove every entry under this cache's namespace.

        Returns:
            Number of entries removed
        """
        try:
            keys_to_remove = [
                k for k in list(self.storage.keys()) if k.startswith(self.namespace)
            ]
            for full_key in keys_to_remove:
                self.storage.remove_item(full_key)
        except Exception as e:
            logger.warning(f"Failed to clear cache: {e}")
            return 0

        logger.info(f"Cache CLEARED ({len(keys_to_remove)} entries)")
        return len(keys_to_remove)

    def get_stats(self) -> CacheStats:
        """Get a copy of the cache statistics."""
        return CacheStats(
            hits=self._stats.hits,
            misses=self._stats.misses,
            expirations=self._stats.expirations,
            write_failures=self._stats.write_failures,
            read_failures=self._stats.read_failures,
        )

    def _full_key(self, key: str) -> str:
        return f"{self.namespace}{key}"

    def _evict(self, full_key: str) -> None:
        """Remove an expired entry; failures leave it for the next read."""
        try:
            self.storage.remove_item(full_key)
        except Exception as e:
            logger.warning(f"Failed to evict expired entry '{full_key}': {e}")

    def _miss(self, key: str) -> None:
        self._stats.misses += 1
        self._record("cache_miss")
        logger.debug(f"Cache MISS: {key}")

    def _record(self, name: str, **tags: str) -> None:
        if self._metrics:
            self._metrics.record_count(name, 1, tags=tags or None)
