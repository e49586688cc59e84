"""
Local Payment Search Filter.

Replicates the server's payment search filter so results served from
the window cache differ from online results only in coverage, never in
kind.

Predicates (all AND-combined, each a pass-through when unset):
    - supplier_id: exact match
    - status: exact match
    - start/end_expected_date: bound the expected settlement date of
      credit-like payments; other statuses and credit payments without
      an expected date are exempt
    - overdue_only: keep credit-like payments whose expected date is
      strictly before now; drop everything else
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Sequence

from offline_ledger.domain.entities import Payment, as_utc_instant
from offline_ledger.domain.value_objects import PaymentSearchFilters

Predicate = Callable[[Payment], bool]


class PaymentSearchFilter:
    """Filter payments the way the search endpoint does."""

    def __init__(self, filters: PaymentSearchFilters, now: datetime) -> None:
        """
        Initialize with filter values.

        Args:
            filters: Search filters to apply
            now: Current instant, used by overdue_only
        """
        self.filters = filters
        self.now = now

    @property
    def name(self) -> str:
        return "payment_search_filter"

    def predicates(self) -> List[Predicate]:
        """Active predicates; their order does not affect the result."""
        active: List[Predicate] = []
        if self.filters.supplier_id is not None:
            active.append(self._matches_supplier)
        if self.filters.status is not None:
            active.append(self._matches_status)
        if self.filters.start_expected_date is not None:
            active.append(self._after_start)
        if self.filters.end_expected_date is not None:
            active.append(self._before_end)
        if self.filters.overdue_only:
            active.append(self._is_overdue)
        return active

    def apply(self, payments: Sequence[Payment]) -> List[Payment]:
        """
        Apply all active predicates.

        Args:
            payments: Payments to filter

        Returns:
            Payments passing every predicate, in input order
        """
        active = self.predicates()
        return [p for p in payments if all(check(p) for check in active)]

    def _matches_supplier(self, payment: Payment) -> bool:
        return payment.supplier_id == self.filters.supplier_id

    def _matches_status(self, payment: Payment) -> bool:
        return payment.status == self.filters.status

    def _after_start(self, payment: Payment) -> bool:
        if not payment.is_credit_like or payment.expected_payment_date is None:
            return True
        return payment.expected_payment_date >= self.filters.start_expected_date

    def _before_end(self, payment: Payment) -> bool:
        if not payment.is_credit_like or payment.expected_payment_date is None:
            return True
        return payment.expected_payment_date <= self.filters.end_expected_date

    def _is_overdue(self, payment: Payment) -> bool:
        if not payment.is_credit_like or payment.expected_payment_date is None:
            return False
        return as_utc_instant(payment.expected_payment_date) < self.now


def filter_payments_local(
    payments: Sequence[Payment],
    filters: PaymentSearchFilters,
    now: datetime,
) -> List[Payment]:
    """Filter cached payments with the search endpoint's semantics."""
    return PaymentSearchFilter(filters, now).apply(payments)
