"""
Error Types for the Offline Ledger.

Taxonomy:
    - TransportUnavailable: the remote call failed for any reason
    - StorageFault: the storage primitive raised (quota, disabled, I/O)
    - OfflineDataUnavailable: remote failed and no usable cache exists
    - OfflineOperationError: a write was attempted while offline

Only the last two are meant to reach the user; the others are absorbed
by the cache and fallback layers.
"""

from __future__ import annotations

from typing import Optional

OFFLINE_DATA_MESSAGE = "Data not available offline"
OFFLINE_SEARCH_MESSAGE = "No cached data. Connect to load payments."
OFFLINE_OPERATION_MESSAGE = "Operation not possible offline"


class LedgerError(Exception):
    """Base class for all offline ledger errors."""
    pass


class TransportUnavailable(LedgerError):
    """Raised when the remote ledger cannot serve a request."""

    def __init__(
        self,
        message: str,
        resource: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.resource = resource
        self.status_code = status_code


class StorageFault(LedgerError):
    """Raised by a storage adapter when a read or write fails."""
    pass


class StorageQuotaExceeded(StorageFault):
    """Raised when a write would exceed the storage quota."""
    pass


class OfflineDataUnavailable(LedgerError):
    """Raised when neither the remote nor the cache can answer."""

    def __init__(self, message: str = OFFLINE_DATA_MESSAGE) -> None:
        super().__init__(message)


class OfflineOperationError(LedgerError):
    """Raised when a mutating operation is attempted offline."""

    def __init__(self, message: str = OFFLINE_OPERATION_MESSAGE) -> None:
        super().__init__(message)
