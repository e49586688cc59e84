"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the interfaces defined
in the interfaces package, following the Ports & Adapters pattern.

Storage:
    - InMemoryStorage: Dict-backed store with optional quota
    - JsonFileStorage: Store persisted to a JSON file

Transport:
    - HttpxTransport: Ledger API over httpx.AsyncClient

Metrics:
    - InMemoryMetricsCollector: Cache and fallback event counts

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from offline_ledger.adapters.file_storage import JsonFileStorage
from offline_ledger.adapters.http_transport import HttpxTransport
from offline_ledger.adapters.memory_storage import InMemoryStorage
from offline_ledger.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "HttpxTransport",
    "InMemoryMetricsCollector",
    "InMemoryStorage",
    "JsonFileStorage",
]
