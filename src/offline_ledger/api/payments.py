"""
Payments Service.

Reads are served remote-first with cache fallback. Search results are
additionally kept in a rolling 90-day window so that filtered searches
can be answered offline with the local filter replica.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, List

from pydantic import TypeAdapter

from offline_ledger.caching.windowed_cache import WindowedEntityCache
from offline_ledger.domain.entities import Payment, PaymentInput, PaymentListResponse
from offline_ledger.domain.value_objects import PaymentSearchFilters
from offline_ledger.filters.payment_filter import filter_payments_local
from offline_ledger.interfaces.clock import Clock, system_clock
from offline_ledger.interfaces.transport import Transport
from offline_ledger.resilience.errors import (
    OFFLINE_DATA_MESSAGE,
    OFFLINE_SEARCH_MESSAGE,
    OfflineDataUnavailable,
)
from offline_ledger.resilience.fallback import ReadThrough, require_online

logger = logging.getLogger(__name__)

PAYMENT_LIST = TypeAdapter(List[Payment])


class PaymentsService:
    """Payment endpoints with offline support."""

    def __init__(
        self,
        transport: Transport,
        reader: ReadThrough,
        window: WindowedEntityCache[Payment],
        clock: Clock = system_clock,
    ) -> None:
        self.transport = transport
        self.reader = reader
        self.window = window
        self._clock = clock

    async def get_payments_by_date(self, day: date) -> PaymentListResponse:
        """Payments recorded on one day, with paid/credit totals."""
        return await self.reader.fetch(
            f"/payments/date/{day.isoformat()}",
            cache_key=f"payments_date_{day.isoformat()}",
            adapter=TypeAdapter(PaymentListResponse),
        )

    async def get_payment(self, payment_id: int) -> Payment:
        return await self.reader.fetch(
            f"/payments/{payment_id}",
            cache_key=f"payment_{payment_id}",
            adapter=TypeAdapter(Payment),
        )

    async def search_payments(
        self,
        filters: PaymentSearchFilters,
        is_online: bool,
    ) -> List[Payment]:
        """
        Search payments.

        Online, the server answers and its result replaces the window
        cache. Offline, or when the server fails, the window cache is
        filtered locally; that answer may be incomplete but never
        differs in kind from the server's.

        Args:
            filters: Search filters
            is_online: Current connectivity as reported by the caller

        Returns:
            Matching payments

        Raises:
            OfflineDataUnavailable: No cached payments to search
        """
        if not is_online:
            return self._search_cached(filters, OFFLINE_SEARCH_MESSAGE)

        try:
            payload = await self.transport.fetch(
                "/payments/search/filter", params=filters.to_query_params()
            )
            payments = PAYMENT_LIST.validate_python(payload)
        except Exception as e:
            logger.warning(f"Payment search failed, filtering cached window: {e}")
            return self._search_cached(filters)

        self.window.store(payments)
        return payments

    def is_search_covered(self, filters: PaymentSearchFilters) -> bool:
        """Whether an offline answer to filters can be complete."""
        return self.window.is_range_coverable(
            filters.start_expected_date, filters.end_expected_date
        )

    async def create_payment(self, payment: PaymentInput, is_online: bool) -> Any:
        require_online(is_online, "create payment")
        return await self.transport.fetch(
            "/payments", method="POST", json=payment.model_dump(mode="json")
        )

    async def update_payment(
        self, payment_id: int, payment: PaymentInput, is_online: bool
    ) -> Any:
        require_online(is_online, "update payment")
        return await self.transport.fetch(
            f"/payments/{payment_id}", method="PUT", json=payment.model_dump(mode="json")
        )

    async def delete_payment(self, payment_id: int, is_online: bool) -> Any:
        require_online(is_online, "delete payment")
        return await self.transport.fetch(f"/payments/{payment_id}", method="DELETE")

    async def settle_credit(self, payment_id: int, is_online: bool) -> Any:
        """Mark a credit payment as paid."""
        require_online(is_online, "settle credit")
        return await self.transport.fetch(f"/payments/{payment_id}/settle", method="POST")

    def _search_cached(
        self,
        filters: PaymentSearchFilters,
        message: str = OFFLINE_DATA_MESSAGE,
    ) -> List[Payment]:
        cached = self.window.retrieve()
        if not cached:
            raise OfflineDataUnavailable(message)
        return filter_payments_local(cached, filters, self._clock())
