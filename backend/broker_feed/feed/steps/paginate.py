"""PaginateStep — cut the requested page out of the sorted, filtered set."""

from __future__ import annotations

from broker_feed.feed.context import FeedContext, StepResult
from broker_feed.feed.step import FeedStep
from broker_feed.standardization.aggregation import paginate


class PaginateStep(FeedStep):
    name = "paginate"
    description = "Slice the requested page"

    async def execute(self, ctx: FeedContext) -> StepResult:
        started_at = self._now()
        ctx.page_items, ctx.pagination = paginate(ctx.filtered, ctx.query.page, ctx.query.limit)
        return self._success(started_at, metadata=ctx.pagination.to_dict())
