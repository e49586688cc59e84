"""
Ledger Client - Facade over the Endpoint Services.

Wires one storage port, one transport and one clock into the caches
and services, following the configuration.

Usage:
    client = create_client(load_config("config/default.yaml"))
    summary = await client.summary.get_daily_summary(date(2026, 2, 13))

    fetcher = client.new_fetcher()
    fetcher.request("2026-02-13", lambda: client.summary.get_daily_summary(day))
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import List, Optional

from pydantic import TypeAdapter

from offline_ledger.adapters.file_storage import JsonFileStorage
from offline_ledger.adapters.http_transport import HttpxTransport
from offline_ledger.adapters.memory_storage import InMemoryStorage
from offline_ledger.api.payments import PaymentsService
from offline_ledger.api.revenue import RevenueService
from offline_ledger.api.suppliers import SuppliersService
from offline_ledger.api.summary import SummaryService
from offline_ledger.caching.persistent_cache import MetricsCollectorProtocol, PersistentKVCache
from offline_ledger.caching.windowed_cache import WindowedEntityCache
from offline_ledger.config.models import LedgerConfig, StorageConfig
from offline_ledger.domain.entities import Payment, payment_reference_date
from offline_ledger.fetching.sequenced_fetcher import SequencedFetcher
from offline_ledger.interfaces.clock import Clock, system_clock
from offline_ledger.interfaces.storage import StoragePort
from offline_ledger.interfaces.transport import Transport
from offline_ledger.resilience.fallback import ReadThrough

logger = logging.getLogger(__name__)


class LedgerClient:
    """Entry point bundling every ledger service."""

    def __init__(
        self,
        config: LedgerConfig,
        storage: StoragePort,
        transport: Transport,
        clock: Clock = system_clock,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
    ) -> None:
        """
        Initialize client with all dependencies.

        Args:
            config: Ledger configuration
            storage: Storage primitive for the persistent cache
            transport: Ledger API transport
            clock: Source of the current instant
            metrics_collector: Optional collector for cache events
        """
        self.config = config
        self.transport = transport
        self.cache = PersistentKVCache(
            storage,
            namespace=config.cache.namespace,
            ttl=timedelta(hours=config.cache.ttl_hours),
            clock=clock,
            metrics_collector=metrics_collector,
        )
        self.payment_window: WindowedEntityCache[Payment] = WindowedEntityCache(
            self.cache,
            payment_reference_date,
            key=config.window.key,
            window_days=config.window.window_days,
            adapter=TypeAdapter(List[Payment]),
            clock=clock,
            refilter_on_read=config.window.refilter_on_read,
            merge_on_store=config.window.merge_on_store,
            identity=lambda payment: payment.id,
        )
        reader = ReadThrough(transport, self.cache, metrics_collector)

        self.payments = PaymentsService(transport, reader, self.payment_window, clock)
        self.revenue = RevenueService(transport, reader)
        self.suppliers = SuppliersService(transport, reader)
        self.summary = SummaryService(reader)

    def new_fetcher(self) -> SequencedFetcher:
        """Fetcher for one UI surface, using the configured ordering policy."""
        return SequencedFetcher(strict_ordering=self.config.fetcher.strict_ordering)

    def logout(self) -> int:
        """
        Drop every cached response.

        Returns:
            Number of cache entries removed
        """
        removed = self.cache.clear()
        logger.info(f"Logged out, removed {removed} cached entries")
        return removed

    async def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()


def create_storage(config: StorageConfig) -> StoragePort:
    """Build the storage backend named in the configuration."""
    if config.backend == "file":
        if not config.path:
            raise ValueError("storage.path is required for the file backend")
        return JsonFileStorage(config.path)
    return InMemoryStorage(quota_bytes=config.quota_bytes)


def create_client(
    config: Optional[LedgerConfig] = None,
    *,
    storage: Optional[StoragePort] = None,
    transport: Optional[Transport] = None,
    clock: Clock = system_clock,
    metrics_collector: Optional[MetricsCollectorProtocol] = None,
) -> LedgerClient:
    """
    Build a LedgerClient from configuration.

    Args:
        config: Ledger configuration (defaults if None)
        storage: Storage override (built from config.storage if None)
        transport: Transport override (HttpxTransport if None)
        clock: Source of the current instant
        metrics_collector: Optional collector for cache events

    Returns:
        Ready-to-use LedgerClient
    """
    config = config or LedgerConfig()
    if storage is None:
        storage = create_storage(config.storage)
    if transport is None:
        transport = HttpxTransport(
            config.transport.base_url, timeout=config.transport.timeout_seconds
        )
    return LedgerClient(config, storage, transport, clock, metrics_collector)
