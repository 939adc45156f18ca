"""
HttpBrokerSource — fetches a broker's raw batch from a raw-broker endpoint.

The endpoint returns ``{success, documentCount, message, documents}``
(see GET /api/v1/brokers/{source}).  Non-2xx responses, bodies that are
not JSON, and bodies missing `success`/`documents` all become a failed
batch; transport errors raise SourceRetrievalError.
"""

from __future__ import annotations

import httpx

from broker_feed.core.constants import BrokerSource
from broker_feed.core.errors import SourceRetrievalError
from broker_feed.core.logging import get_logger
from broker_feed.sources.base import BrokerSourceClient, batch_from_payload, error_text
from broker_feed.standardization.models import SourceBatch

logger = get_logger(__name__)

# Default timeout for broker calls (seconds)
DEFAULT_TIMEOUT = 30.0


class HttpBrokerSource(BrokerSourceClient):
    """Raw broker batch over HTTP."""

    def __init__(
        self,
        source: BrokerSource,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            source: Which broker to fetch.
            base_url: API root, e.g. "http://localhost:8000/api/v1".
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests use MockTransport).
        """
        self.source = source
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self._base_url}/brokers/{self.source}"

    async def fetch(self) -> SourceBatch:
        logger.info("Fetching broker batch", source=str(self.source), url=self.url)

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(self.url, headers={"Accept": "application/json"})
        except httpx.HTTPError as exc:
            raise SourceRetrievalError(
                f"Request to {self.source} failed: {exc}",
                source=self.source,
                url=self.url,
            ) from exc

        try:
            payload = response.json()
        except ValueError:
            return SourceBatch(
                success=False,
                error=f"{self.source} returned a non-JSON response (HTTP {response.status_code})",
            )

        if not response.is_success:
            upstream_error = payload.get("error") if isinstance(payload, dict) else None
            return SourceBatch(
                success=False,
                error=error_text(upstream_error, f"HTTP {response.status_code}"),
            )
        return batch_from_payload(payload)
