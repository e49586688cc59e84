"""
Cache key helpers for date-keyed ledger views.

Period summaries requested in WEEK or MONTH mode are cached under the
week or month they start in, so any date of that period finds the same
entry offline.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from offline_ledger.domain.value_objects import SummaryMode

DateLike = Union[str, date]


def _parse(value: DateLike) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def week_identifier(value: DateLike) -> str:
    """ISO week id, e.g. "2026_W06"."""
    iso_year, iso_week, _ = _parse(value).isocalendar()
    return f"{iso_year}_W{iso_week:02d}"


def month_identifier(value: DateLike) -> str:
    """Month id, e.g. "2026_M02"."""
    d = _parse(value)
    return f"{d.year}_M{d.month:02d}"


def period_cache_key(
    prefix: str,
    start: DateLike,
    end: DateLike,
    mode: Optional[SummaryMode] = None,
) -> str:
    """
    Cache key for a period view.

    Examples:
        period_cache_key("period_summary", "2026-02-09", "2026-02-15", WEEK)
            -> "period_summary_week_2026_W07"
        period_cache_key("period_summary", "2026-02-01", "2026-02-10")
            -> "period_summary_2026-02-01_2026-02-10"
    """
    if mode is SummaryMode.WEEK:
        return f"{prefix}_week_{week_identifier(start)}"
    if mode is SummaryMode.MONTH:
        return f"{prefix}_month_{month_identifier(start)}"
    return f"{prefix}_{_parse(start).isoformat()}_{_parse(end).isoformat()}"
