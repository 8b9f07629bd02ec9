"""
HTTP transport for JSON-RPC requests.

Sends one POST per call through a fresh httpx client. Connection-level
failures and unusable HTTP statuses become TransportError; the response body
is handed back untouched.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from ..errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

JSON_HEADERS = {"Content-Type": "application/json"}


class Transport(Protocol):
    def post(self, url: str, body: bytes, auth: tuple[str, str]) -> bytes:
        ...


class HttpTransport:
    """Synchronous httpx transport with HTTP Basic authentication."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self._transport = transport

    def post(self, url: str, body: bytes, auth: tuple[str, str]) -> bytes:
        """
        POST a serialized request.

        Args:
            url: Node endpoint
            body: Serialized request envelope
            auth: (username, password) for Basic authentication

        Returns:
            Raw response body

        Raises:
            TransportError: On network failure or a non-2xx status
        """
        logger.debug("POST %s (%d bytes)", url, len(body))
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(url, content=body, headers=JSON_HEADERS, auth=auth)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request to {url} timed out: {exc}", url=url) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc

        if response.status_code in (401, 403):
            raise TransportError(
                f"Authentication rejected by {url} (HTTP {response.status_code})",
                url=url,
                status_code=response.status_code,
            )
        if not response.is_success:
            raise TransportError(
                f"HTTP {response.status_code} from {url}",
                url=url,
                status_code=response.status_code,
                body=response.content,
            )
        return response.content


__all__ = ["DEFAULT_TIMEOUT", "HttpTransport", "JSON_HEADERS", "Transport"]
