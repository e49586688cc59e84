"""
Resilience Package - Error Taxonomy and Offline Fallback.

This package provides the degradation rules used when the remote ledger
cannot be reached:
    - Error types for transport, storage and terminal offline conditions
    - ReadThrough: remote call with write-through caching and cache fallback
    - require_online: guard for operations that cannot run offline

Design Principles:
    - Recoverable faults (transport, storage) are absorbed and degrade to cache
    - Only "remote failed AND no usable cache" reaches the caller
    - No automatic retry; the user re-triggers the action
"""

from offline_ledger.resilience.errors import (
    LedgerError,
    OfflineDataUnavailable,
    OfflineOperationError,
    StorageFault,
    StorageQuotaExceeded,
    TransportUnavailable,
)
from offline_ledger.resilience.fallback import ReadThrough, require_online

__all__ = [
    "LedgerError",
    "OfflineDataUnavailable",
    "OfflineOperationError",
    "ReadThrough",
    "StorageFault",
    "StorageQuotaExceeded",
    "TransportUnavailable",
    "require_online",
]
