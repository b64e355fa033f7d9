# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER
# Description: Transport collaborator for exchanging SOAP documents.
# ============================================================================
"""SOAP transports.

A transport posts rendered request text to an endpoint and returns the
response text. Failures surface as ``TransportError`` (except HTTP 500 with a
body, which SOAP uses for faults). Retry policy belongs to the caller.
"""

import logging
from abc import ABC, abstractmethod

import httpx

from ..config.settings import get_settings
from ..core.exceptions import TransportError

logger = logging.getLogger(__name__)


class Transport(ABC):
    """Exchanges one request document for one response document."""

    @abstractmethod
    async def post(self, url: str, payload: str, headers: dict[str, str] | None = None) -> str:
        """Send ``payload`` to ``url`` and return the response body.

        Raises:
            TransportError: If the exchange fails.
        """

    async def close(self) -> None:
        """Release any resources held by the transport."""
        return None

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


class HttpxTransport(Transport):
    """Async HTTP transport backed by ``httpx.AsyncClient``."""

    def __init__(self, timeout: float | None = None, client: httpx.AsyncClient | None = None) -> None:
        """Initialize transport.

        Args:
            timeout: Request timeout in seconds. Defaults to SOAPKIT_HTTP_TIMEOUT.
            client: Optional pre-configured client; it is not closed by ``close``.
        """
        settings = get_settings()
        self.timeout = timeout if timeout is not None else settings.SOAPKIT_HTTP_TIMEOUT
        self.user_agent = settings.SOAPKIT_USER_AGENT
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={
                    "Content-Type": "text/xml; charset=utf-8",
                    "Accept": "text/xml",
                    "User-Agent": self.user_agent,
                },
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def post(self, url: str, payload: str, headers: dict[str, str] | None = None) -> str:
        client = await self._get_client()
        try:
            response = await client.post(url, content=payload.encode("utf-8"), headers=headers or {})
            # SOAP 1.1 reports faults with HTTP 500 and a Fault body.
            if response.status_code == 500 and response.text:
                logger.warning(f"HTTP 500 from {url}, passing body through as a SOAP fault")
                return response.text
            response.raise_for_status()
            return response.text
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP error posting to {url}: {status}")
            raise TransportError(f"HTTP {status} from {url}", status_code=status, body=e.response.text) from e
        except httpx.RequestError as e:
            logger.error(f"Request error posting to {url}: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e
