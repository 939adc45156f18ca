"""
Broker document repository — data access for the broker_documents table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from broker_feed.db.models.broker_document import BrokerDocument


async def count_documents(db: AsyncSession, broker: str) -> int:
    """Number of raw documents stored for one broker."""
    stmt = select(func.count()).select_from(BrokerDocument).where(BrokerDocument.broker == broker)
    result = await db.execute(stmt)
    return int(result.scalar_one())


async def list_documents(db: AsyncSession, broker: str) -> list[dict[str, Any]]:
    """All raw documents of one broker, in insertion order."""
    stmt = (
        select(BrokerDocument)
        .where(BrokerDocument.broker == broker)
        .order_by(BrokerDocument.seq)
    )
    result = await db.execute(stmt)
    return [row.to_document() for row in result.scalars().all()]


async def add_documents(
    db: AsyncSession,
    broker: str,
    documents: list[dict[str, Any]],
) -> int:
    """Insert raw documents for one broker (seeding / imports)."""
    rows = [BrokerDocument(broker=broker, data=dict(doc)) for doc in documents]
    db.add_all(rows)
    await db.flush()
    return len(rows)
