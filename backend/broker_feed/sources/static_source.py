"""In-memory broker source, for demos and local runs without a database."""

from __future__ import annotations

from typing import Any

from broker_feed.core.constants import BrokerSource
from broker_feed.sources.base import BrokerSourceClient
from broker_feed.standardization.models import SourceBatch


class StaticBrokerSource(BrokerSourceClient):
    """Serves a fixed list of raw documents for one broker."""

    def __init__(self, source: BrokerSource, documents: list[dict[str, Any]]) -> None:
        self.source = source
        self._documents = list(documents)

    async def fetch(self) -> SourceBatch:
        return SourceBatch(
            success=True,
            documents=list(self._documents),
            document_count=len(self._documents),
        )
