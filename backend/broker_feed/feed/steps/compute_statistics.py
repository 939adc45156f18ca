"""
ComputeStatisticsStep — summary analytics for the query.

Summary statistics cover the filtered set (all pages).  Active-policy
statistics, data-quality counts and filter options cover the full merged
set, so they do not move when the user changes display filters.
"""

from __future__ import annotations

from broker_feed.feed.context import FeedContext, StepResult
from broker_feed.feed.step import FeedStep
from broker_feed.standardization.aggregation import (
    assess_data_quality,
    collect_filter_options,
    summarize,
    summarize_active,
)


class ComputeStatisticsStep(FeedStep):
    name = "compute_statistics"
    description = "Compute summary, active-policy and data-quality statistics"

    async def execute(self, ctx: FeedContext) -> StepResult:
        started_at = self._now()

        ctx.statistics = summarize(ctx.filtered)
        ctx.active_statistics = summarize_active(ctx.policies, ctx.now)
        ctx.data_quality = assess_data_quality(ctx.policies)
        ctx.filter_options = collect_filter_options(ctx.policies)

        return self._success(started_at, metadata={
            "total_policies": ctx.statistics.total_policies,
            "active_policies": ctx.active_statistics.total_active_policies,
            "valid_dates": ctx.data_quality.policies_with_valid_dates,
        })
