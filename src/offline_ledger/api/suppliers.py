"""
Suppliers Service.

Supplier lists are cached whole under fixed keys, transaction histories
per supplier and date range. Mutations require connectivity.
"""

from __future__ import annotations

from datetime import date
from typing import Any, List

from pydantic import TypeAdapter

from offline_ledger.domain.entities import (
    Supplier,
    SupplierInput,
    SupplierTransaction,
    SupplierWithCredit,
)
from offline_ledger.interfaces.transport import Transport
from offline_ledger.resilience.fallback import ReadThrough, require_online


class SuppliersService:
    """Supplier endpoints with offline support."""

    def __init__(self, transport: Transport, reader: ReadThrough) -> None:
        self.transport = transport
        self.reader = reader

    async def get_suppliers(self) -> List[Supplier]:
        return await self.reader.fetch(
            "/suppliers",
            cache_key="suppliers",
            adapter=TypeAdapter(List[Supplier]),
        )

    async def get_suppliers_with_credit(self) -> List[SupplierWithCredit]:
        """Suppliers with their outstanding credit totals."""
        return await self.reader.fetch(
            "/suppliers/with-credit",
            cache_key="suppliers_with_credit",
            adapter=TypeAdapter(List[SupplierWithCredit]),
        )

    async def get_supplier_transactions(
        self, supplier_id: int, start: date, end: date
    ) -> List[SupplierTransaction]:
        """Payments made to one supplier between start and end, inclusive."""
        return await self.reader.fetch(
            f"/suppliers/{supplier_id}/transactions",
            cache_key=(
                f"supplier_transactions_{supplier_id}_{start.isoformat()}_{end.isoformat()}"
            ),
            adapter=TypeAdapter(List[SupplierTransaction]),
            params={"start_date": start.isoformat(), "end_date": end.isoformat()},
        )

    async def create_supplier(self, supplier: SupplierInput, is_online: bool) -> Any:
        require_online(is_online, "create supplier")
        return await self.transport.fetch(
            "/suppliers", method="POST", json=supplier.model_dump(mode="json")
        )

    async def update_supplier(
        self, supplier_id: int, supplier: SupplierInput, is_online: bool
    ) -> Any:
        require_online(is_online, "update supplier")
        return await self.transport.fetch(
            f"/suppliers/{supplier_id}",
            method="PUT",
            json=supplier.model_dump(mode="json"),
        )

    async def delete_supplier(self, supplier_id: int, is_online: bool) -> Any:
        require_online(is_online, "delete supplier")
        return await self.transport.fetch(f"/suppliers/{supplier_id}", method="DELETE")
