"""
NormalizeRecordsStep — standardize every raw batch and merge them.

Batches are merged in broker order.  Per-record failures are counted and
recorded on the context as non-fatal errors.
"""

from __future__ import annotations

from broker_feed.core.constants import BROKER_ORDER
from broker_feed.core.errors import StepExecutionError
from broker_feed.core.logging import get_logger
from broker_feed.feed.context import FeedContext, StepResult
from broker_feed.feed.step import FeedStep
from broker_feed.standardization.mapping import normalize_batch

logger = get_logger(__name__)


class NormalizeRecordsStep(FeedStep):
    """Map raw broker documents to canonical policies."""

    name = "normalize_records"
    description = "Standardize raw broker documents into canonical policies"

    async def execute(self, ctx: FeedContext) -> StepResult:
        started_at = self._now()

        try:
            merged = []
            reports = []
            for source in BROKER_ORDER:
                if source not in ctx.raw_by_source:
                    continue
                report = normalize_batch(source, ctx.raw_by_source[source])
                merged.extend(report.policies)
                ctx.issues.extend(report.errors)
                reports.append(report.to_dict())

            ctx.policies = merged
        except Exception as exc:
            raise StepExecutionError(
                f"Normalization failed: {exc}",
                step_name=self.name,
            ) from exc

        logger.info(
            "Broker batches normalized",
            query_id=ctx.query_id,
            merged=len(merged),
            by_source=reports,
        )
        return self._success(started_at, metadata={
            "merged": len(merged),
            "by_source": reports,
        })
