"""
Core Domain Entities.

This module defines the records exchanged with the ledger API. Field
names follow the API's JSON so responses validate without aliases.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import FrozenSet, List, Optional, Union

from pydantic import BaseModel, Field


class PaymentStatus(str, Enum):
    """Settlement status of a supplier payment."""

    PAID = "PAID"
    CREDIT = "CREDIT"
    INSTALLMENTS = "INSTALLMENTS"


# Statuses eligible for expected-date and overdue filtering
CREDIT_LIKE_STATUSES: FrozenSet[PaymentStatus] = frozenset({PaymentStatus.CREDIT})


class Payment(BaseModel):
    """A payment made (or owed) to a supplier."""

    id: int = Field(..., description="Payment identifier")
    supplier: str = Field(..., description="Supplier display name")
    supplier_id: int = Field(..., description="Owning supplier identifier")
    date: dt.date = Field(..., description="Business date of the payment")
    amount: float
    status: PaymentStatus
    note: Optional[str] = None
    expected_payment_date: Optional[dt.date] = Field(
        default=None, description="Expected settlement date for credit"
    )
    created_at: Optional[dt.datetime] = Field(
        default=None, description="Creation instant, used for the rolling window"
    )

    model_config = {"frozen": True}

    @property
    def is_credit_like(self) -> bool:
        return self.status in CREDIT_LIKE_STATUSES


class PaymentListResponse(BaseModel):
    """Payments of a single day with totals."""

    payments: List[Payment] = Field(default_factory=list)
    total_paid: float = 0.0
    total_credit: float = 0.0


class Supplier(BaseModel):
    """A supplier the shop pays."""

    id: int
    name: str
    phone: Optional[str] = None
    notes: Optional[str] = None


class SupplierWithCredit(Supplier):
    """Supplier with its outstanding credit total."""

    credit_total: float = 0.0


class Revenue(BaseModel):
    """Revenue recorded for one day."""

    date: dt.date
    amount: float
    note: Optional[str] = None


class DailyPayment(BaseModel):
    """Payment line inside a daily summary."""

    supplier: str
    amount: float
    status: str
    note: str = ""


class DailySummary(BaseModel):
    """Cash position for one day."""

    revenue: float
    paid: float
    credit: float
    cash_remaining: float
    payments: List[DailyPayment] = Field(default_factory=list)


class PeriodSummary(BaseModel):
    """Aggregated totals over a date range."""

    revenue: float
    paid: float
    credit: float
    net_cash: float


class SupplierSummary(BaseModel):
    """Per-supplier totals over a date range."""

    supplier_id: int
    supplier: str
    total_amount: float
    total_paid: float
    total_credit: float


class SupplierBreakdown(BaseModel):
    """Per-supplier totals with grand totals."""

    suppliers: List[SupplierSummary] = Field(default_factory=list)
    total_paid: float
    total_credit: float
    total: float


class SupplierTransaction(BaseModel):
    """One payment line in a supplier's history over a period."""

    date: dt.date
    amount: float
    status: PaymentStatus
    expected_payment_date: Optional[dt.date] = None
    note: Optional[str] = None


def as_utc_instant(value: Union[dt.date, dt.datetime]) -> dt.datetime:
    """
    Normalize a date or datetime to an aware UTC datetime.

    Plain dates map to midnight UTC; naive datetimes are read as UTC.
    """
    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=dt.timezone.utc)
        return value.astimezone(dt.timezone.utc)
    return dt.datetime.combine(value, dt.time.min, tzinfo=dt.timezone.utc)


def payment_reference_date(payment: Payment) -> dt.datetime:
    """Creation instant of a payment, falling back to its business date."""
    return as_utc_instant(payment.created_at or payment.date)


class PaymentInput(BaseModel):
    """Body of a create or update payment request."""

    supplier_id: int
    date: dt.date
    amount: float = Field(..., gt=0)
    status: PaymentStatus
    note: Optional[str] = None
    expected_payment_date: Optional[dt.date] = None


class SupplierInput(BaseModel):
    """Body of a create or update supplier request."""

    name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    notes: Optional[str] = None


class RevenueInput(BaseModel):
    """Body of a save revenue request."""

    date: dt.date
    amount: float = Field(..., ge=0)
    note: str = ""
