"""
HTTPX Transport.

Transport implementation over httpx.AsyncClient. Every failure, from a
refused connection to a 5xx response, surfaces as TransportUnavailable
so callers can fall back to the cache uniformly.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from offline_ledger.resilience.errors import TransportUnavailable

logger = logging.getLogger(__name__)

# Request timeout
REQUEST_TIMEOUT = 15.0


class HttpxTransport:
    """Ledger API access over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = REQUEST_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            base_url: Root URL of the ledger API
            timeout: Request timeout in seconds
            client: Preconfigured client (created lazily if None)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch(
        self,
        resource: str,
        *,
        method: str = "GET",
        params: Optional[Dict[str, str]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """
        Perform a request and decode its JSON body.

        Returns:
            Decoded body, or None for an empty response

        Raises:
            TransportUnavailable: On network errors, error statuses or
                undecodable bodies
        """
        client = self._get_client()
        try:
            response = await client.request(method, resource, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.debug(f"{method} {resource} returned HTTP {status}")
            raise TransportUnavailable(
                f"{method} {resource} failed with HTTP {status}",
                resource=resource,
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            logger.debug(f"{method} {resource} failed: {e}")
            raise TransportUnavailable(
                f"{method} {resource} failed: {e}", resource=resource
            ) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise TransportUnavailable(
                f"{method} {resource} returned invalid JSON", resource=resource
            ) from e
