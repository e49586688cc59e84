"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class CacheConfig(BaseModel):
    """Configuration for the persistent cache."""

    namespace: str = Field(default="shop_pwa_cache_", min_length=1)
    ttl_hours: float = Field(default=24.0, gt=0)


class WindowConfig(BaseModel):
    """Configuration for the rolling payment window."""

    key: str = Field(default="payments:last90days", min_length=1)
    window_days: int = Field(default=90, ge=1, le=3650)
    refilter_on_read: bool = False
    merge_on_store: bool = False


class FetcherConfig(BaseModel):
    """Configuration for sequenced fetchers."""

    strict_ordering: bool = False


class TransportConfig(BaseModel):
    """Configuration for the HTTP transport."""

    base_url: str = Field(default="http://localhost:8000")
    timeout_seconds: float = Field(default=15.0, gt=0)


class StorageConfig(BaseModel):
    """Configuration for the storage backend."""

    backend: Literal["memory", "file"] = "memory"
    path: Optional[str] = None
    quota_bytes: Optional[int] = Field(default=None, ge=1)


class LedgerConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    cache: CacheConfig = Field(default_factory=CacheConfig)
    window: WindowConfig = Field(default_factory=WindowConfig)
    fetcher: FetcherConfig = Field(default_factory=FetcherConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    model_config = {"populate_by_name": True}
