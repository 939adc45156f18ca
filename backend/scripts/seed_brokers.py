"""
Seed raw broker documents for development.
Run: python -m scripts.seed_brokers  (from backend/)
"""

import asyncio

from broker_feed.db.models import Base
from broker_feed.db.session import dispose_engine, get_engine, get_sessionmaker
from broker_feed.repositories.broker_documents import add_documents

from scripts.sample_data import BROKER1_DOCUMENTS, BROKER2_DOCUMENTS


SEED_DOCUMENTS = {
    "broker1": BROKER1_DOCUMENTS,
    "broker2": BROKER2_DOCUMENTS,
}


async def seed():
    """Create tables and insert the sample documents."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with get_sessionmaker()() as session:
        for broker, documents in SEED_DOCUMENTS.items():
            inserted = await add_documents(session, broker, documents)
            print(f"  Inserted {inserted} {broker} documents")
        await session.commit()

    await dispose_engine()
    print(f"Seeded {sum(len(d) for d in SEED_DOCUMENTS.values())} broker documents.")


if __name__ == "__main__":
    asyncio.run(seed())
