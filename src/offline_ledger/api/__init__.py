"""
API Package - Ledger Endpoint Services.

Services:
    - PaymentsService: Day lists, single payments, search with 90-day
      offline window, payment mutations
    - RevenueService: Daily revenue
    - SuppliersService: Supplier lists and mutations
    - SummaryService: Daily, period and per-supplier summaries

Facade:
    - LedgerClient / create_client: Wires storage, transport and caches

Design Principles:
    - Reads: remote first, write-through cache, cache fallback
    - Writes: refused while offline, never queued
"""

from offline_ledger.api.client import LedgerClient, create_client, create_storage
from offline_ledger.api.payments import PaymentsService
from offline_ledger.api.revenue import RevenueService
from offline_ledger.api.suppliers import SuppliersService
from offline_ledger.api.summary import SummaryService

__all__ = [
    "LedgerClient",
    "PaymentsService",
    "RevenueService",
    "SummaryService",
    "SuppliersService",
    "create_client",
    "create_storage",
]
