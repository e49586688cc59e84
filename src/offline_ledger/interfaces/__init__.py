"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for all
external collaborators of the offline layer. High-level modules depend on
these abstractions, not on concrete implementations.

Protocols:
    - StoragePort: Synchronous string key-value store (may raise on write)
    - Transport: Asynchronous request/response access to the ledger API
    - Clock: Callable returning the current instant

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
    - No implementation details leak into interfaces
"""

from offline_ledger.interfaces.clock import Clock, system_clock
from offline_ledger.interfaces.storage import StoragePort
from offline_ledger.interfaces.transport import Transport

__all__ = ["Clock", "StoragePort", "Transport", "system_clock"]
