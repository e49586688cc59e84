"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Offline Ledger:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - LedgerConfig: Root configuration object
    - CacheConfig: Namespace and TTL of the persistent cache
    - WindowConfig: Rolling payment window settings
    - FetcherConfig: Sequenced fetcher ordering policy
    - TransportConfig: Ledger API base URL and timeout
    - StorageConfig: Storage backend selection
"""

from offline_ledger.config.loader import ConfigLoader, load_config
from offline_ledger.config.models import (
    CacheConfig,
    FetcherConfig,
    LedgerConfig,
    StorageConfig,
    TransportConfig,
    WindowConfig,
)

__all__ = [
    "CacheConfig",
    "ConfigLoader",
    "FetcherConfig",
    "LedgerConfig",
    "StorageConfig",
    "TransportConfig",
    "WindowConfig",
    "load_config",
]
