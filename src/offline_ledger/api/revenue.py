"""
Revenue Service.

A day without recorded revenue is a normal answer, so revenue reads
return None when neither the remote nor the cache has an entry.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import TypeAdapter

from offline_ledger.domain.entities import Revenue, RevenueInput
from offline_ledger.interfaces.transport import Transport
from offline_ledger.resilience.fallback import ReadThrough, require_online


class RevenueService:
    """Revenue endpoints with offline support."""

    def __init__(self, transport: Transport, reader: ReadThrough) -> None:
        self.transport = transport
        self.reader = reader

    async def get_revenue(self, day: date) -> Optional[Revenue]:
        return await self.reader.fetch(
            f"/revenue/{day.isoformat()}",
            cache_key=f"revenue_{day.isoformat()}",
            adapter=TypeAdapter(Optional[Revenue]),
            allow_missing=True,
        )

    async def save_revenue(self, revenue: RevenueInput, is_online: bool) -> Any:
        require_online(is_online, "save revenue")
        return await self.transport.fetch(
            "/revenue", method="POST", json=revenue.model_dump(mode="json")
        )
