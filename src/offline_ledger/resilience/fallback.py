"""
Read-Through Fallback - Remote First, Cache on Failure.

Every read endpoint of the ledger client follows the same policy:

    1. Call the remote.
    2. On success, write the response through the cache and return it.
    3. On any failure, serve the cached response if one is usable.
    4. Otherwise raise OfflineDataUnavailable (or return None for
       endpoints where "nothing recorded" is a valid answer).

Design Notes:
    - Every transport failure is treated as "remote unavailable"
    - No retry; the user re-triggers the action
    - Cached JSON is validated back into domain models via TypeAdapter
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

from pydantic import TypeAdapter

from offline_ledger.caching.persistent_cache import PersistentKVCache
from offline_ledger.interfaces.transport import Transport
from offline_ledger.resilience.errors import (
    OfflineDataUnavailable,
    OfflineOperationError,
)

logger = logging.getLogger(__name__)


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collection."""

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        ...


def require_online(is_online: bool, action: str = "operation") -> None:
    """
    Guard a mutating operation.

    Raises:
        OfflineOperationError: If is_online is False
    """
    if not is_online:
        logger.info(f"Refusing {action} while offline")
        raise OfflineOperationError()


class ReadThrough:
    """
    Remote read with write-through caching and cache fallback.

    Usage:
        reader = ReadThrough(transport, cache)
        summary = await reader.fetch(
            "/summary/daily/2026-02-13",
            cache_key="daily_summary_2026-02-13",
            adapter=TypeAdapter(DailySummary),
        )
    """

    def __init__(
        self,
        transport: Transport,
        cache: PersistentKVCache,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
    ) -> None:
        """
        Initialize read-through helper.

        Args:
            transport: Ledger API transport
            cache: Cache written on success and read on failure
            metrics_collector: Optional collector for fallback counts
        """
        self.transport = transport
        self.cache = cache
        self.metrics = metrics_collector

    async def fetch(
        self,
        resource: str,
        cache_key: str,
        adapter: TypeAdapter,
        *,
        params: Optional[Dict[str, str]] = None,
        allow_missing: bool = False,
    ) -> Any:
        """
        Fetch a resource, falling back to the cache.

        Args:
            resource: API path
            cache_key: Logical cache key for the response
            adapter: TypeAdapter describing the response type
            params: Query parameters
            allow_missing: Return None instead of raising when neither
                remote nor cache can answer

        Returns:
            Validated response from the remote or the cache

        Raises:
            OfflineDataUnavailable: Remote failed and no cached response
        """
        try:
            payload = await self.transport.fetch(resource, params=params)
            value = adapter.validate_python(payload)
        except Exception as e:
            logger.warning(f"Remote unavailable for {resource}, using cache: {e}")
            return self._fallback(resource, cache_key, adapter, allow_missing)

        self.cache.set(cache_key, adapter.dump_python(value, mode="json"))
        return value

    def _fallback(
        self,
        resource: str,
        cache_key: str,
        adapter: TypeAdapter,
        allow_missing: bool,
    ) -> Any:
        self._record("remote_fallback", resource)
        cached = self.cache.get(cache_key)
        if cached is not None:
            try:
                return adapter.validate_python(cached)
            except ValueError as e:
                logger.warning(f"Cached response for '{cache_key}' is unreadable: {e}")

        if allow_missing:
            return None
        self._record("offline_unavailable", resource)
        raise OfflineDataUnavailable()

    def _record(self, name: str, resource: str) -> None:
        if self.metrics:
            self.metrics.record_count(name, 1, tags={"resource": resource})
