"""
DatabaseBrokerSource — reads a broker's raw documents straight from PostgreSQL.

Each fetch opens its own session from the process-wide sessionmaker, so
the two broker fetches of one query can run concurrently.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from broker_feed.core.constants import BrokerSource
from broker_feed.core.logging import get_logger
from broker_feed.db.session import get_sessionmaker
from broker_feed.repositories import broker_documents as broker_document_repository
from broker_feed.sources.base import BrokerSourceClient
from broker_feed.standardization.models import SourceBatch

logger = get_logger(__name__)


class DatabaseBrokerSource(BrokerSourceClient):
    """Raw broker batch from the broker_documents table."""

    def __init__(
        self,
        source: BrokerSource,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ) -> None:
        self.source = source
        self._session_factory = session_factory

    async def fetch(self) -> SourceBatch:
        factory = self._session_factory or get_sessionmaker()
        async with factory() as session:
            document_count = await broker_document_repository.count_documents(session, str(self.source))
            documents = await broker_document_repository.list_documents(session, str(self.source))

        logger.debug(
            "Broker documents loaded",
            source=str(self.source),
            document_count=document_count,
        )
        return SourceBatch(
            success=True,
            documents=documents,
            document_count=document_count,
        )
