"""
Summary Service.

Daily summaries are cached per day. Period views are cached per ISO
week or per month when requested in WEEK/MONTH mode, otherwise per
exact date range.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from pydantic import TypeAdapter

from offline_ledger.caching.keys import period_cache_key
from offline_ledger.domain.entities import DailySummary, PeriodSummary, SupplierBreakdown
from offline_ledger.domain.value_objects import SummaryMode
from offline_ledger.resilience.fallback import ReadThrough


def _range_params(start: date, end: date) -> Dict[str, str]:
    return {"start_date": start.isoformat(), "end_date": end.isoformat()}


class SummaryService:
    """Summary endpoints with offline support."""

    def __init__(self, reader: ReadThrough) -> None:
        self.reader = reader

    async def get_daily_summary(self, day: date) -> DailySummary:
        return await self.reader.fetch(
            f"/summary/daily/{day.isoformat()}",
            cache_key=f"daily_summary_{day.isoformat()}",
            adapter=TypeAdapter(DailySummary),
        )

    async def get_period_summary(
        self,
        start: date,
        end: date,
        mode: Optional[SummaryMode] = None,
    ) -> PeriodSummary:
        return await self.reader.fetch(
            "/summary/period",
            cache_key=period_cache_key("period_summary", start, end, mode),
            adapter=TypeAdapter(PeriodSummary),
            params=_range_params(start, end),
        )

    async def get_supplier_breakdown(
        self,
        start: date,
        end: date,
        mode: Optional[SummaryMode] = None,
    ) -> SupplierBreakdown:
        """Per-supplier paid/credit totals over a period."""
        return await self.reader.fetch(
            "/summary/suppliers",
            cache_key=period_cache_key("supplier_breakdown", start, end, mode),
            adapter=TypeAdapter(SupplierBreakdown),
            params=_range_params(start, end),
        )
