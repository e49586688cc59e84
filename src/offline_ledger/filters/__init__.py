"""
Filters Package - Local Replicas of Server Filters.

Filters:
    - PaymentSearchFilter: Payment search predicates (supplier, status,
      expected-date range, overdue)

Design Principles:
    - Pure functions of (entities, filters, now)
    - Semantics match the server exactly, including the credit-only
      exemptions of the date predicates
"""

from offline_ledger.filters.payment_filter import (
    PaymentSearchFilter,
    filter_payments_local,
)

__all__ = ["PaymentSearchFilter", "filter_payments_local"]
