"""SortPoliciesStep — order the filtered set, most recent start date first."""

from __future__ import annotations

from broker_feed.feed.context import FeedContext, StepResult
from broker_feed.feed.step import FeedStep
from broker_feed.standardization.aggregation import sort_policies


class SortPoliciesStep(FeedStep):
    name = "sort_policies"
    description = "Sort policies by start date (descending)"

    async def should_skip(self, ctx: FeedContext) -> bool:
        return len(ctx.filtered) < 2

    async def execute(self, ctx: FeedContext) -> StepResult:
        started_at = self._now()
        ctx.filtered = sort_policies(ctx.filtered)
        return self._success(started_at, metadata={"sorted": len(ctx.filtered)})
