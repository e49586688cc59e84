"""
Unit Tests for the local payment search filter.

Test Aspects Covered:
    ✅ Business Logic: Each predicate, credit-only date exemptions
    ✅ Edge Cases: Missing expected date, overdue boundary
    ✅ Properties: Idempotence, predicate order independence
"""

from __future__ import annotations

import itertools
from datetime import date, timedelta
from typing import List

import pytest

from offline_ledger.domain.entities import Payment, PaymentStatus
from offline_ledger.domain.value_objects import PaymentSearchFilters
from offline_ledger.filters.payment_filter import (
    PaymentSearchFilter,
    filter_payments_local,
)
from tests.conftest import REFERENCE_NOW

TODAY = REFERENCE_NOW.date()


def ids(payments: List[Payment]) -> List[int]:
    return [p.id for p in payments]


class TestSinglePredicates:
    """Test cases for each filter field on its own."""

    def test_no_filters_pass_everything(self, sample_payments) -> None:
        result = filter_payments_local(sample_payments, PaymentSearchFilters(), REFERENCE_NOW)
        assert result == sample_payments

    def test_supplier_exact_match(self, sample_payments) -> None:
        result = filter_payments_local(
            sample_payments, PaymentSearchFilters(supplier_id=2), REFERENCE_NOW
        )
        assert ids(result) == [3, 4]

    def test_status_exact_match(self, sample_payments) -> None:
        result = filter_payments_local(
            sample_payments,
            PaymentSearchFilters(status=PaymentStatus.CREDIT),
            REFERENCE_NOW,
        )
        assert ids(result) == [2, 3, 4, 6]

    def test_start_bound_only_constrains_dated_credit(self, sample_payments) -> None:
        """
        SCENARIO: start_expected_date = today
        EXPECTED: Credit payments expected before today are dropped;
                  non-credit and undated credit payments pass
        """
        result = filter_payments_local(
            sample_payments,
            PaymentSearchFilters(start_expected_date=TODAY),
            REFERENCE_NOW,
        )
        assert ids(result) == [1, 3, 4, 5]

    def test_end_bound_only_constrains_dated_credit(self, sample_payments) -> None:
        result = filter_payments_local(
            sample_payments,
            PaymentSearchFilters(end_expected_date=TODAY),
            REFERENCE_NOW,
        )
        assert ids(result) == [1, 2, 4, 5, 6]

    def test_bounds_are_inclusive(self, make_payment) -> None:
        payment = make_payment(
            1, status=PaymentStatus.CREDIT, expected_payment_date=date(2026, 2, 10)
        )
        filters = PaymentSearchFilters(
            start_expected_date=date(2026, 2, 10), end_expected_date=date(2026, 2, 10)
        )
        assert filter_payments_local([payment], filters, REFERENCE_NOW) == [payment]


class TestCreditExemptions:
    """Date predicates follow the server's credit-only policy."""

    def test_status_and_start_combination(self, make_payment) -> None:
        """
        SCENARIO: status=CREDIT, start_expected_date=2026-01-01
        EXPECTED: A PAID payment is excluded by status even when its date
                  is in range; a CREDIT payment without expected date is
                  included, since the date bound does not apply to it
        """
        paid_in_range = make_payment(
            1, status=PaymentStatus.PAID, expected_payment_date=date(2026, 1, 10)
        )
        undated_credit = make_payment(2, status=PaymentStatus.CREDIT)
        early_credit = make_payment(
            3, status=PaymentStatus.CREDIT, expected_payment_date=date(2025, 12, 20)
        )

        result = filter_payments_local(
            [paid_in_range, undated_credit, early_credit],
            PaymentSearchFilters(
                status=PaymentStatus.CREDIT, start_expected_date=date(2026, 1, 1)
            ),
            REFERENCE_NOW,
        )

        assert ids(result) == [2]

    def test_installments_exempt_from_date_bounds(self, make_payment) -> None:
        payment = make_payment(
            1, status=PaymentStatus.INSTALLMENTS, expected_payment_date=date(2020, 1, 1)
        )
        filters = PaymentSearchFilters(start_expected_date=date(2026, 1, 1))
        assert filter_payments_local([payment], filters, REFERENCE_NOW) == [payment]


class TestOverdue:
    """Tests for overdue_only."""

    def test_yesterday_included_tomorrow_excluded(self, make_payment) -> None:
        """
        SCENARIO: Credit payments expected yesterday and tomorrow
        EXPECTED: Only yesterday's is overdue
        """
        yesterday = make_payment(
            1, status=PaymentStatus.CREDIT, expected_payment_date=TODAY - timedelta(days=1)
        )
        tomorrow = make_payment(
            2, status=PaymentStatus.CREDIT, expected_payment_date=TODAY + timedelta(days=1)
        )

        result = filter_payments_local(
            [yesterday, tomorrow], PaymentSearchFilters(overdue_only=True), REFERENCE_NOW
        )

        assert ids(result) == [1]

    def test_today_counts_once_midnight_has_passed(self, make_payment) -> None:
        payment = make_payment(1, status=PaymentStatus.CREDIT, expected_payment_date=TODAY)
        filters = PaymentSearchFilters(overdue_only=True)
        assert filter_payments_local([payment], filters, REFERENCE_NOW) == [payment]

    def test_drops_non_credit_and_undated(self, sample_payments) -> None:
        result = filter_payments_local(
            sample_payments, PaymentSearchFilters(overdue_only=True), REFERENCE_NOW
        )
        assert ids(result) == [2, 6]


class TestFilterProperties:
    """Algebraic properties of the filter."""

    FILTER_SETS = [
        PaymentSearchFilters(),
        PaymentSearchFilters(supplier_id=1, status=PaymentStatus.CREDIT),
        PaymentSearchFilters(start_expected_date=TODAY, overdue_only=True),
        PaymentSearchFilters(
            supplier_id=3,
            status=PaymentStatus.CREDIT,
            start_expected_date=date(2025, 12, 1),
            end_expected_date=TODAY,
            overdue_only=True,
        ),
    ]

    @pytest.mark.parametrize("filters", FILTER_SETS)
    def test_idempotent(self, sample_payments, filters) -> None:
        once = filter_payments_local(sample_payments, filters, REFERENCE_NOW)
        twice = filter_payments_local(once, filters, REFERENCE_NOW)
        assert twice == once

    def test_predicate_order_does_not_matter(self, sample_payments) -> None:
        """
        SCENARIO: All five predicates applied one after another
        EXPECTED: Every ordering yields the same result
        """
        filters = PaymentSearchFilters(
            supplier_id=1,
            status=PaymentStatus.CREDIT,
            start_expected_date=date(2025, 12, 1),
            end_expected_date=TODAY,
            overdue_only=True,
        )
        stage = PaymentSearchFilter(filters, REFERENCE_NOW)
        predicates = stage.predicates()
        assert len(predicates) == 5

        expected = stage.apply(sample_payments)
        for ordering in itertools.permutations(predicates):
            remaining = list(sample_payments)
            for predicate in ordering:
                remaining = [p for p in remaining if predicate(p)]
            assert remaining == expected

        assert ids(expected) == [2]
