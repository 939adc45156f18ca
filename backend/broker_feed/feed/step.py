"""
FeedStep — abstract base class for the stages of a feed query.

The engine calls execute() on each step in order and takes care of
logging and failure handling; a step only transforms the FeedContext
and reports what it did.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

from broker_feed.core.constants import StepStatus
from broker_feed.feed.context import FeedContext, StepResult


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FeedStep(ABC):
    """
    Base class for every feed step.

    Subclasses set `name` and `description` and implement execute(ctx).
    They may override should_skip(ctx) to opt out for a given query.
    """

    name: str = "feed_step"
    description: str = ""

    @abstractmethod
    async def execute(self, ctx: FeedContext) -> StepResult:
        """
        Transform `ctx` and return a StepResult.

        Raise StepExecutionError when the query cannot continue.
        """

    async def should_skip(self, ctx: FeedContext) -> bool:
        return False

    def _now(self) -> datetime:
        return utcnow()

    def _success(self, started_at: datetime, metadata: dict[str, Any] | None = None) -> StepResult:
        """A COMPLETED result running from `started_at` until now."""
        return StepResult(
            step_name=self.name,
            status=StepStatus.COMPLETED,
            started_at=started_at,
            completed_at=utcnow(),
            metadata=metadata or {},
        )
