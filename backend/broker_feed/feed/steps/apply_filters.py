"""ApplyFiltersStep — narrow the merged set to what the query asks for."""

from __future__ import annotations

from broker_feed.feed.context import FeedContext, StepResult
from broker_feed.feed.step import FeedStep
from broker_feed.standardization.filters import apply_filters


class ApplyFiltersStep(FeedStep):
    name = "apply_filters"
    description = "Apply source, type, search and range filters"

    async def execute(self, ctx: FeedContext) -> StepResult:
        started_at = self._now()
        ctx.filtered = apply_filters(ctx.policies, ctx.query)
        return self._success(started_at, metadata={
            "input": len(ctx.policies),
            "kept": len(ctx.filtered),
        })
