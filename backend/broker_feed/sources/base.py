"""
BrokerSourceClient — abstract retrieval capability for one broker.

The feed only needs "give me this broker's raw batch".  Whether that
comes from the database, another deployment's HTTP endpoint, or an
in-memory fixture is up to the implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from broker_feed.core.constants import BrokerSource
from broker_feed.standardization.models import SourceBatch


class BrokerSourceClient(ABC):
    """
    Base class for broker retrieval capabilities.

    Subclasses MUST set:
        - source (BrokerSource)  — which broker this client reads
    and implement:
        - fetch()                — return the broker's raw SourceBatch

    fetch() may raise; the collector converts exceptions into a failed
    source outcome.
    """

    source: BrokerSource

    @abstractmethod
    async def fetch(self) -> SourceBatch:
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} source={self.source}>"


def batch_from_payload(payload: Any) -> SourceBatch:
    """
    Interpret a raw-broker response body.

    A body without `success: true` or without a `documents` list is a
    failed batch with no records.
    """
    if not isinstance(payload, dict):
        return SourceBatch(success=False, error="Malformed broker response")

    documents = payload.get("documents")
    if payload.get("success") is not True or not isinstance(documents, list):
        return SourceBatch(
            success=False,
            document_count=_as_count(payload.get("documentCount")),
            error=error_text(payload.get("error"), "Broker response missing success or documents"),
        )

    return SourceBatch(
        success=True,
        documents=documents,
        document_count=_as_count(payload.get("documentCount"), fallback=len(documents)),
    )


def error_text(value: Any, fallback: str) -> str:
    """Upstream error value as a message; blank values give `fallback`."""
    if value is None or (isinstance(value, (str, dict, list)) and not value):
        return fallback
    return value if isinstance(value, str) else str(value)


def _as_count(value: Any, fallback: int = 0) -> int:
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    return fallback
