"""
Offline Ledger - Offline-Capable Client for a Remote Ledger API.

A client layer over a ledger service (payments, revenue, suppliers and
period summaries) that keeps working while the network is unavailable.
Responses are written through a persistent TTL cache and served back
when the remote cannot be reached.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for storage, transport and clock
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Ledger entities (Payment, Supplier, summaries)
    - interfaces: Protocols for storage, transport and clock
    - caching: PersistentKVCache and WindowedEntityCache
    - filters: Local replica of the server payment search filter
    - fetching: SequencedFetcher, the selection-key state machine
    - resilience: Error taxonomy and read-through fallback
    - api: Endpoint services and the LedgerClient facade
    - adapters: Storage, transport and metrics implementations
    - config: Configuration models and loaders

Example:
    >>> from offline_ledger.api import create_client
    >>> client = create_client(load_config("config/default.yaml"))
    >>> payments = await client.payments.search_payments(
    ...     PaymentSearchFilters(status=PaymentStatus.CREDIT), is_online=False
    ... )

"""

import logging

__version__ = "0.2.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Offline Ledger.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import offline_ledger
        >>> offline_ledger.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("offline_ledger").setLevel(level)
