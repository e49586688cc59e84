"""
Domain Layer - Ledger Entities and Value Objects.

This package contains the domain model of the ledger client. All
entities are Pydantic models so the same classes validate API responses
and cached JSON.

Entities:
    - Payment, PaymentStatus: Supplier payments (paid, credit, installments)
    - Supplier, SupplierWithCredit: Supplier records
    - Revenue: Daily revenue entry
    - DailySummary, PeriodSummary, SupplierBreakdown: Aggregated views

Value Objects:
    - PaymentSearchFilters: Filter set for payment search
    - SummaryMode: WEEK or MONTH keyed period summaries
"""

from offline_ledger.domain.entities import (
    CREDIT_LIKE_STATUSES,
    DailyPayment,
    DailySummary,
    Payment,
    PaymentInput,
    PaymentListResponse,
    PaymentStatus,
    PeriodSummary,
    Revenue,
    RevenueInput,
    Supplier,
    SupplierBreakdown,
    SupplierInput,
    SupplierSummary,
    SupplierTransaction,
    SupplierWithCredit,
    as_utc_instant,
    payment_reference_date,
)
from offline_ledger.domain.value_objects import PaymentSearchFilters, SummaryMode

__all__ = [
    "CREDIT_LIKE_STATUSES",
    "DailyPayment",
    "DailySummary",
    "Payment",
    "PaymentInput",
    "PaymentListResponse",
    "PaymentSearchFilters",
    "PaymentStatus",
    "PeriodSummary",
    "Revenue",
    "RevenueInput",
    "SummaryMode",
    "Supplier",
    "SupplierBreakdown",
    "SupplierInput",
    "SupplierSummary",
    "SupplierTransaction",
    "SupplierWithCredit",
    "as_utc_instant",
    "payment_reference_date",
]
