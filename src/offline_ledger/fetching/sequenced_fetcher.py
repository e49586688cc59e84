"""
Sequenced Fetcher - Selection-Key Aware Async Fetch State Machine.

One SequencedFetcher backs one UI surface (a day view, a period view, a
search screen). Every time the surface's selection key changes it calls
request(); the fetcher guarantees that observers never see data or an
error belonging to a key other than the active one.

States:
    IDLE -> FETCHING(key) -> RESOLVED(key, data) | REJECTED(key, error)

Design Notes:
    - A key change clears data synchronously, before the new fetch starts
    - Results are committed only while their key is still active;
      superseded results are dropped, never queued or retried
    - Superseded fetches are not cancelled, they run to completion
    - No deduplication: overlapping requests for the same key race and
      the last one to settle wins, unless strict_ordering is enabled,
      in which case only the most recently issued request may commit
    - Fetch failures become REJECTED state; request() never raises them
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, List, Optional, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchFn = Callable[[], Awaitable[T]]
Listener = Callable[["FetchSnapshot[T]"], None]


class FetchStatus(Enum):
    """Fetch state machine states."""
    IDLE = "idle"
    FETCHING = "fetching"
    RESOLVED = "resolved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class FetchSnapshot(Generic[T]):
    """Observable state of a fetcher at one instant."""

    key: Optional[str] = None
    status: FetchStatus = FetchStatus.IDLE
    data: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def is_loading(self) -> bool:
        return self.status is FetchStatus.FETCHING


class SequencedFetcher(Generic[T]):
    """
    Per-surface fetch orchestrator keyed by selection key.

    Usage:
        fetcher = SequencedFetcher()
        fetcher.subscribe(render)

        # on every selection change (inside the event loop)
        fetcher.request("2026-02-13", lambda: client.summary.get_daily_summary(day))

        await fetcher.wait_idle()
        fetcher.snapshot.data  # data for "2026-02-13" or None
    """

    def __init__(self, strict_ordering: bool = False) -> None:
        """
        Initialize fetcher.

        Args:
            strict_ordering: Compare a per-request generation on completion
                so an older same-key request can never overwrite a newer one
        """
        self.strict_ordering = strict_ordering
        self._snapshot: FetchSnapshot[T] = FetchSnapshot()
        self._active_key: Optional[str] = None
        self._generation = 0
        self._listeners: List[Listener] = []
        self._pending: Set[asyncio.Task] = set()

    @property
    def snapshot(self) -> FetchSnapshot[T]:
        """Current observable state."""
        return self._snapshot

    @property
    def active_key(self) -> Optional[str]:
        return self._active_key

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with every published snapshot.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def request(self, key: str, fetch_fn: FetchFn) -> FetchSnapshot[T]:
        """
        Start fetching data for key.

        Must be called from a running event loop. The returned snapshot
        is already FETCHING for key, with data cleared if key changed.

        Args:
            key: Selection key the data belongs to
            fetch_fn: Zero-argument coroutine function performing the fetch

        Returns:
            Snapshot right after the request was registered
        """
        key_changed = self._active_key is not None and self._active_key != key
        if key_changed:
            logger.debug(f"Selection changed {self._active_key!r} -> {key!r}, clearing data")

        self._active_key = key
        self._generation += 1
        generation = self._generation

        snapshot: FetchSnapshot[T] = FetchSnapshot(
            key=key,
            status=FetchStatus.FETCHING,
            data=None if key_changed else self._snapshot.data,
            error=None,
        )

        # The fetch is scheduled before listeners are notified.
        task = asyncio.get_running_loop().create_task(
            self._run(key, generation, fetch_fn)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

        self._publish(snapshot)
        return snapshot

    async def wait_idle(self) -> None:
        """Wait until every outstanding fetch has settled."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def reset(self) -> None:
        """Forget the active key; in-flight results will be discarded."""
        self._active_key = None
        self._generation += 1
        self._publish(FetchSnapshot())

    async def _run(self, key: str, generation: int, fetch_fn: FetchFn) -> None:
        try:
            result = await fetch_fn()
        except Exception as e:
            if not self._is_current(key, generation):
                logger.debug(f"Discarding stale failure for {key!r}: {e}")
                return
            logger.debug(f"Fetch for {key!r} failed: {e}")
            self._publish(
                FetchSnapshot(key=key, status=FetchStatus.REJECTED, data=None, error=e)
            )
            return

        if not self._is_current(key, generation):
            logger.debug(f"Discarding stale result for {key!r}")
            return
        self._publish(
            FetchSnapshot(key=key, status=FetchStatus.RESOLVED, data=result, error=None)
        )

    def _is_current(self, key: str, generation: int) -> bool:
        if self._active_key != key:
            return False
        if self.strict_ordering:
            return generation == self._generation
        return True

    def _publish(self, snapshot: FetchSnapshot[T]) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            listener(snapshot)
