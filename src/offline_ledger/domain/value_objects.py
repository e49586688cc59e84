"""
Value Objects for Domain Layer.

Value objects describe request parameters; they carry no identity.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel

from offline_ledger.domain.entities import PaymentStatus


class SummaryMode(str, Enum):
    """How a period summary is keyed in the cache."""

    WEEK = "WEEK"
    MONTH = "MONTH"


class PaymentSearchFilters(BaseModel):
    """
    Filter set for the payment search endpoint.

    All fields are optional and combined with AND. The expected-date
    bounds and overdue_only only concern credit-like payments.
    """

    supplier_id: Optional[int] = None
    status: Optional[PaymentStatus] = None
    start_expected_date: Optional[dt.date] = None
    end_expected_date: Optional[dt.date] = None
    overdue_only: bool = False

    model_config = {"frozen": True}

    def to_query_params(self) -> Dict[str, str]:
        """Query string parameters understood by the search endpoint."""
        params: Dict[str, str] = {}
        if self.supplier_id is not None:
            params["supplier_id"] = str(self.supplier_id)
        if self.status is not None:
            params["status"] = self.status.value
        if self.start_expected_date is not None:
            params["start_expected_date"] = self.start_expected_date.isoformat()
        if self.end_expected_date is not None:
            params["end_expected_date"] = self.end_expected_date.isoformat()
        if self.overdue_only:
            params["overdue_only"] = "true"
        return params

    def selection_key(self) -> str:
        """Stable composite key identifying this filter combination."""
        params = self.to_query_params()
        if not params:
            return "payments_search:all"
        return "payments_search:" + "&".join(
            f"{name}={value}" for name, value in sorted(params.items())
        )
