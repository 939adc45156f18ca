"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from broker_feed.core.constants import BrokerSource
from broker_feed.db.session import get_db as _get_db
from broker_feed.feed.engine import FeedEngine
from broker_feed.sources import BrokerSourceClient, build_source_clients


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


def get_source_clients() -> dict[BrokerSource, BrokerSourceClient]:
    """Broker retrieval clients for the configured source mode."""
    return build_source_clients()


def get_feed_engine(
    clients: dict[BrokerSource, BrokerSourceClient] = Depends(get_source_clients),
) -> FeedEngine:
    """A feed engine per request."""
    return FeedEngine(clients=clients)
