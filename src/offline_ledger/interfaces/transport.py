"""
Transport Protocol.

Defines the request/response contract used to reach the ledger API.
Any failure (network, timeout, HTTP error status) is raised; the
offline layer treats every failure the same way: "remote unavailable".
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Abstract interface for ledger API access."""

    async def fetch(
        self,
        resource: str,
        *,
        method: str = "GET",
        params: Optional[Dict[str, str]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """
        Perform a request against the ledger API.

        Args:
            resource: Path relative to the API base URL
            method: HTTP method
            params: Query string parameters
            json: JSON body for mutating requests

        Returns:
            Decoded JSON body (None for empty responses)

        Raises:
            Exception: On any transport or server-side failure
        """
        ...
