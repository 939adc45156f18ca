"""
Models package — re-exports Base and all models.

When adding a new model:
    1. Create `broker_feed/db/models/<table_name>.py`
    2. Import it here
"""

from broker_feed.db.models.base import Base
from broker_feed.db.models.broker_document import BrokerDocument

__all__ = [
    "Base",
    "BrokerDocument",
]
