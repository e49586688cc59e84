"""
Clock capability.

Every TTL and window computation reads "now" through an injected clock
so expiry and cutoff logic stays deterministic under test.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
