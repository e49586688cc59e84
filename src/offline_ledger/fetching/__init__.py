"""
Fetching Package - Selection-Key Sequencing.

Provides the state machine that keeps UI surfaces from showing data
that belongs to a previous selection:
    - SequencedFetcher: request(key, fetch_fn) orchestrator
    - FetchSnapshot: observable {key, status, data, error} state
    - FetchStatus: IDLE, FETCHING, RESOLVED, REJECTED
"""

from offline_ledger.fetching.sequenced_fetcher import (
    FetchSnapshot,
    FetchStatus,
    SequencedFetcher,
)

__all__ = ["FetchSnapshot", "FetchStatus", "SequencedFetcher"]
