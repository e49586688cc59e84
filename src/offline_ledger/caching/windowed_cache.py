"""
Windowed Entity Cache - Rolling Window over PersistentKVCache.

Keeps only the entities whose reference date falls inside a trailing
window (90 days by default) under a single fixed cache key. Used for
payments, whose full history is too large to cache wholesale.

Design Notes:
    - The window is applied once, at write time; coverage degrades as
      wall-clock time advances between writes
    - store() replaces the previous contents, it does not merge
    - Both behaviors can be upgraded via refilter_on_read / merge_on_store
    - Coverage checks reason about the theoretical window, not about
      what was actually stored
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar, Union

from pydantic import TypeAdapter

from offline_ledger.caching.persistent_cache import PersistentKVCache
from offline_ledger.interfaces.clock import Clock, system_clock

logger = logging.getLogger(__name__)

E = TypeVar("E")

DEFAULT_WINDOW_DAYS = 90
DEFAULT_WINDOW_KEY = "payments:last90days"

DateBound = Union[str, date, None]


def _as_date(value: Union[str, date]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def is_date_range_within_window(
    start: DateBound = None,
    end: DateBound = None,
    *,
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> bool:
    """
    Estimate whether a date range can be answered from the window cache.

    Args:
        start: Lower bound (ISO date string or date), optional
        end: Upper bound (ISO date string or date), optional
        now: Current instant
        window_days: Length of the trailing window

    Empty strings count as unset bounds.

    Returns:
        True when no bound is set, False if start precedes the window
        or end lies after today, True otherwise
    """
    if not start and not end:
        return True

    cutoff = (now - timedelta(days=window_days)).date()
    today = now.date()

    if start and _as_date(start) < cutoff:
        return False
    if end and _as_date(end) > today:
        return False
    return True


class WindowedEntityCache(Generic[E]):
    """
    Rolling-window cache for a single entity type.

    Usage:
        window = WindowedEntityCache(
            cache,
            reference_date=payment_reference_date,
            adapter=TypeAdapter(List[Payment]),
        )
        window.store(payments)      # drops payments older than 90 days
        cached = window.retrieve()  # [] when absent or expired
    """

    def __init__(
        self,
        cache: PersistentKVCache,
        reference_date: Callable[[E], datetime],
        *,
        key: str = DEFAULT_WINDOW_KEY,
        window_days: int = DEFAULT_WINDOW_DAYS,
        adapter: Optional[TypeAdapter] = None,
        clock: Clock = system_clock,
        refilter_on_read: bool = False,
        merge_on_store: bool = False,
        identity: Optional[Callable[[E], Any]] = None,
    ) -> None:
        """
        Initialize windowed cache.

        Args:
            cache: Underlying persistent cache
            reference_date: Returns the aware datetime an entity is dated by
            key: Fixed cache key holding the window
            window_days: Length of the trailing window
            adapter: TypeAdapter for a list of entities; when given, entities
                are dumped to JSON on store and validated on retrieve
            clock: Source of the current instant
            refilter_on_read: Re-apply the cutoff on every retrieve
            merge_on_store: Merge with stored entities by identity instead
                of replacing them
            identity: Entity identity for merge_on_store (required then)
        """
        if merge_on_store and identity is None:
            raise ValueError("merge_on_store requires an identity function")

        self.cache = cache
        self.key = key
        self.window_days = window_days
        self._reference_date = reference_date
        self._adapter = adapter
        self._clock = clock
        self._refilter_on_read = refilter_on_read
        self._merge_on_store = merge_on_store
        self._identity = identity

    def cutoff(self) -> datetime:
        """Oldest reference instant kept in the window."""
        return self._clock() - timedelta(days=self.window_days)

    def store(self, entities: Sequence[E]) -> List[E]:
        """
        Store the entities that fall inside the window.

        Args:
            entities: Entities fetched from the remote

        Returns:
            The entities actually written
        """
        if self._merge_on_store:
            entities = self._merge(self._load(), entities)

        kept = self._within_window(entities)
        dropped = len(entities) - len(kept)
        if dropped:
            logger.debug(
                f"Window '{self.key}': dropped {dropped} entities older than "
                f"{self.window_days} days"
            )

        self.cache.set(self.key, self._dump(kept))
        return kept

    def retrieve(self) -> List[E]:
        """Return the cached entities, or an empty list."""
        entities = self._load()
        if self._refilter_on_read:
            entities = self._within_window(entities)
        return entities

    def is_range_coverable(self, start: DateBound = None, end: DateBound = None) -> bool:
        """Estimate whether [start, end] lies inside the current window."""
        return is_date_range_within_window(
            start, end, now=self._clock(), window_days=self.window_days
        )

    def _within_window(self, entities: Sequence[E]) -> List[E]:
        cutoff = self.cutoff()
        return [e for e in entities if self._reference_date(e) >= cutoff]

    def _merge(self, existing: Sequence[E], incoming: Sequence[E]) -> List[E]:
        merged = {self._identity(e): e for e in existing}
        for entity in incoming:
            merged[self._identity(entity)] = entity
        return list(merged.values())

    def _load(self) -> List[E]:
        raw = self.cache.get(self.key)
        if not raw:
            return []
        if not isinstance(raw, list):
            logger.warning(
                f"Discarding window cache '{self.key}': expected a list, got {type(raw).__name__}"
            )
            return []
        if self._adapter is None:
            return list(raw)
        try:
            return list(self._adapter.validate_python(raw))
        except ValueError as e:
            logger.warning(f"Discarding unreadable window cache '{self.key}': {e}")
            return []

    def _dump(self, entities: List[E]) -> Any:
        if self._adapter is None:
            return entities
        return self._adapter.dump_python(entities, mode="json")
