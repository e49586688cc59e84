"""
Caching Layer.

Provides the persistent caches the offline layer falls back to:
    - PersistentKVCache: TTL key-value cache over a storage port
    - WindowedEntityCache: rolling 90-day window for one entity type
    - is_date_range_within_window: coverage estimate for the window
    - Key helpers for week/month keyed period views
"""

from offline_ledger.caching.keys import month_identifier, period_cache_key, week_identifier
from offline_ledger.caching.persistent_cache import (
    CacheEntry,
    CacheStats,
    PersistentKVCache,
)
from offline_ledger.caching.windowed_cache import (
    WindowedEntityCache,
    is_date_range_within_window,
)

__all__ = [
    "CacheEntry",
    "CacheStats",
    "PersistentKVCache",
    "WindowedEntityCache",
    "is_date_range_within_window",
    "month_identifier",
    "period_cache_key",
    "week_identifier",
]
