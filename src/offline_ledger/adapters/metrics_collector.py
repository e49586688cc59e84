"""
In-Memory Metrics Collector.

Counts cache and fallback events in memory: cache_hit, cache_miss,
cache_expired, storage_fault, remote_fallback, offline_unavailable.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple


class InMemoryMetricsCollector:
    """Simple in-memory counter store."""

    def __init__(self) -> None:
        """Initialize the metrics collector."""
        self._events: List[Dict[str, Any]] = []
        self._totals: Counter = Counter()

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        tag_items: Tuple[Tuple[str, str], ...] = tuple(sorted((tags or {}).items()))
        self._totals[(name, tag_items)] += value
        self._events.append(
            {
                "name": name,
                "value": value,
                "tags": dict(tag_items),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    def get_count(self, name: str, **tags: str) -> int:
        """
        Total recorded for name, restricted to events carrying tags.

        Example:
            collector.get_count("remote_fallback", resource="/suppliers")
        """
        total = 0
        for (metric, tag_items), value in self._totals.items():
            if metric != name:
                continue
            if all(item in tag_items for item in tags.items()):
                total += value
        return total

    def get_metrics(self) -> Dict[str, Any]:
        """Totals per metric name."""
        summary: Dict[str, Any] = {}
        for (name, _), value in self._totals.items():
            summary.setdefault(name, {"count": 0, "total": 0})
            summary[name]["total"] += value
        for event in self._events:
            summary[event["name"]]["count"] += 1
        return summary

    def clear(self) -> None:
        """Clear all metrics."""
        self._events.clear()
        self._totals.clear()
