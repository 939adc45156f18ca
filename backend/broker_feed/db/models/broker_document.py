"""
BrokerDocument — one raw policy document as delivered by a broker.

The document body is kept untouched in a JSONB column; each broker uses
its own field names inside it.  Standardization happens at query time,
never on write.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import BigInteger, Identity, String
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from broker_feed.db.models.base import Base, TimestampMixin


class BrokerDocument(TimestampMixin, Base):
    """Raw broker document row."""

    __tablename__ = "broker_documents"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # insertion order; rows of one flush can share created_at
    seq: Mapped[int] = mapped_column(BigInteger, Identity(), unique=True, nullable=False)
    broker: Mapped[str] = mapped_column(String(20), nullable=False, index=True)    # broker1, broker2
    data: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)

    def to_document(self) -> dict[str, Any]:
        """Stored document with `_id` filled in from the row when absent."""
        document = dict(self.data or {})
        document.setdefault("_id", str(self.id))
        return document

    def __repr__(self) -> str:
        return f"<BrokerDocument broker={self.broker} id={self.id}>"
