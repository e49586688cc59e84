"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from offline_ledger.adapters.memory_storage import InMemoryStorage
from offline_ledger.adapters.metrics_collector import InMemoryMetricsCollector
from offline_ledger.caching.persistent_cache import PersistentKVCache
from offline_ledger.config.models import LedgerConfig
from offline_ledger.domain.entities import Payment, PaymentStatus
from offline_ledger.resilience.errors import TransportUnavailable

REFERENCE_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Manually advanced clock."""

    def __init__(self, now: datetime = REFERENCE_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


class FakeTransport:
    """
    Scripted ledger transport.

    Responses are registered per (method, resource). While offline, or
    for unregistered routes, every call raises TransportUnavailable.
    """

    def __init__(self) -> None:
        self.online = True
        self.responses: Dict[Tuple[str, str], Any] = {}
        self.calls: List[Dict[str, Any]] = []

    def add(self, resource: str, payload: Any, method: str = "GET") -> None:
        self.responses[(method, resource)] = payload

    async def fetch(
        self,
        resource: str,
        *,
        method: str = "GET",
        params: Optional[Dict[str, str]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        self.calls.append(
            {"method": method, "resource": resource, "params": params, "json": json}
        )
        if not self.online:
            raise TransportUnavailable("network unreachable", resource=resource)
        if (method, resource) not in self.responses:
            raise TransportUnavailable(f"no route for {method} {resource}", resource=resource)
        return self.responses[(method, resource)]


@pytest.fixture
def clock() -> FrozenClock:
    """Clock frozen at REFERENCE_NOW."""
    return FrozenClock()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def cache(
    storage: InMemoryStorage,
    clock: FrozenClock,
    metrics_collector: InMemoryMetricsCollector,
) -> PersistentKVCache:
    """Persistent cache over in-memory storage with the frozen clock."""
    return PersistentKVCache(storage, clock=clock, metrics_collector=metrics_collector)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def default_config() -> LedgerConfig:
    """Create default ledger configuration."""
    return LedgerConfig()


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def make_payment() -> Callable[..., Payment]:
    """
    Factory for payments dated relative to REFERENCE_NOW.

    days_ago sets both the business date and created_at.
    """

    def factory(
        payment_id: int,
        *,
        days_ago: int = 0,
        status: PaymentStatus = PaymentStatus.PAID,
        supplier_id: int = 1,
        expected_payment_date: Optional[date] = None,
        with_created_at: bool = True,
        amount: float = 100.0,
    ) -> Payment:
        created = REFERENCE_NOW - timedelta(days=days_ago)
        return Payment(
            id=payment_id,
            supplier=f"Supplier {supplier_id}",
            supplier_id=supplier_id,
            date=created.date(),
            amount=amount,
            status=status,
            expected_payment_date=expected_payment_date,
            created_at=created if with_created_at else None,
        )

    return factory


@pytest.fixture
def sample_payments(make_payment) -> List[Payment]:
    """A mix of paid, credit and installment payments."""
    today = REFERENCE_NOW.date()
    return [
        make_payment(1, days_ago=1, status=PaymentStatus.PAID, supplier_id=1),
        make_payment(
            2,
            days_ago=10,
            status=PaymentStatus.CREDIT,
            supplier_id=1,
            expected_payment_date=today - timedelta(days=1),
        ),
        make_payment(
            3,
            days_ago=20,
            status=PaymentStatus.CREDIT,
            supplier_id=2,
            expected_payment_date=today + timedelta(days=1),
        ),
        make_payment(4, days_ago=30, status=PaymentStatus.CREDIT, supplier_id=2),
        make_payment(5, days_ago=40, status=PaymentStatus.INSTALLMENTS, supplier_id=3),
        make_payment(
            6,
            days_ago=50,
            status=PaymentStatus.CREDIT,
            supplier_id=3,
            expected_payment_date=date(2025, 12, 15),
        ),
    ]
