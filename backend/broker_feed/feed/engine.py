"""
FeedEngine — runs the feed steps for one standardized-feed query.

The engine owns everything around the steps: building the context (one
`now` snapshot per query), logging each step with the query id bound,
turning exceptions into FAILED step results, and stopping at the first
failure.

Per-source and per-record failures never reach the engine; the steps
absorb them.  Anything that does reach it is a fault in the query itself.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

import structlog

from broker_feed.core.constants import BrokerSource, FeedStatus, StepStatus
from broker_feed.core.errors import StepExecutionError
from broker_feed.feed.context import FeedContext, StepResult
from broker_feed.feed.flow import default_flow
from broker_feed.feed.step import FeedStep, utcnow
from broker_feed.sources.base import BrokerSourceClient
from broker_feed.standardization.query import FeedQuery


@dataclass
class FeedResult:
    """Final outcome of a feed query."""

    query_id: str
    status: FeedStatus
    context: FeedContext
    started_at: datetime
    completed_at: datetime
    steps_completed: int = 0
    total_steps: int = 0
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == FeedStatus.COMPLETED

    @property
    def duration_ms(self) -> int:
        return int((self.completed_at - self.started_at).total_seconds() * 1000)

    @property
    def step_results(self) -> list[dict[str, Any]]:
        return [r.to_dict() for r in self.context.step_results]


class FeedEngine:
    """
    Runs a sequence of FeedStep objects against a FeedContext.

    Usage::

        engine = FeedEngine(clients=build_source_clients())
        result = await engine.run(parse_query(page="2", source="broker1"))
        body = build_feed_response(result)
    """

    def __init__(self, clients: Mapping[BrokerSource, BrokerSourceClient]) -> None:
        self.clients = clients
        self.logger = structlog.get_logger("feed.engine")

    async def run(self, query: FeedQuery | None = None, now: datetime | None = None) -> FeedResult:
        """
        Execute the default flow for `query`.

        Args:
            query: Parsed query parameters (defaults: page 1, limit 20, both sources).
            now: Activity snapshot moment; sampled here when omitted.
        """
        ctx = FeedContext(query=query or FeedQuery())
        if now is not None:
            ctx.now = now

        log = self.logger.bind(query_id=ctx.query_id)
        log.info("Feed query started", **ctx.query.to_dict())

        result = await self.run_steps(ctx, default_flow(self.clients))

        log.info(
            "Feed query finished",
            status=str(result.status),
            duration_ms=result.duration_ms,
            merged=len(ctx.policies),
            filtered=len(ctx.filtered),
            failed_sources=[str(s) for s in ctx.failed_sources],
            issues=len(ctx.issues),
        )
        return result

    async def run_steps(self, ctx: FeedContext, steps: list[FeedStep]) -> FeedResult:
        """
        Execute an ordered list of steps against a context.

        Can be called directly with a custom step list (tests, demos).
        """
        started_at = utcnow()
        log = self.logger.bind(query_id=ctx.query_id, total_steps=len(steps))
        failure: StepResult | None = None

        for position, step in enumerate(steps, start=1):
            step_log = log.bind(step_name=step.name, step=position)

            if await step.should_skip(ctx):
                skipped_at = utcnow()
                ctx.step_results.append(
                    StepResult(step.name, StepStatus.SKIPPED, started_at=skipped_at, completed_at=skipped_at)
                )
                step_log.debug("Step skipped")
                continue

            outcome = await self._execute(step, ctx, step_log)
            ctx.step_results.append(outcome)

            if outcome.status != StepStatus.COMPLETED:
                step_log.error("Step failed, feed query stopping", error=outcome.error)
                ctx.record_issue(f"Step '{step.name}' failed: {outcome.error}")
                failure = outcome
                break

            step_log.debug("Step completed", duration_ms=outcome.duration_ms, metadata=outcome.metadata)

        return FeedResult(
            query_id=ctx.query_id,
            status=FeedStatus.FAILED if failure else FeedStatus.COMPLETED,
            context=ctx,
            started_at=started_at,
            completed_at=utcnow(),
            steps_completed=sum(1 for r in ctx.step_results if r.status != StepStatus.FAILED),
            total_steps=len(steps),
            error=failure.error if failure else None,
        )

    async def _execute(self, step: FeedStep, ctx: FeedContext, log: structlog.BoundLogger) -> StepResult:
        started_at = utcnow()
        try:
            return await step.execute(ctx)
        except StepExecutionError as exc:
            log.warning("Step raised", error=str(exc), **exc.log_fields())
            error, metadata = str(exc), {}
        except Exception as exc:
            log.exception("Unexpected error in step", error=str(exc))
            error, metadata = f"Unexpected: {exc}", {"traceback": traceback.format_exc()}

        return StepResult(
            step.name,
            StepStatus.FAILED,
            started_at=started_at,
            completed_at=utcnow(),
            error=error,
            metadata=metadata,
        )
