"""
CollectSourcesStep — fetch raw batches from the selected brokers concurrently.

Each broker fetch is isolated: an exception or a failed batch turns into
a SourceOutcome with success=False and contributes no documents, while
the other broker's batch is still used.
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable, Mapping

from broker_feed.core.constants import BROKER_ORDER, BrokerSource
from broker_feed.core.errors import FeedError
from broker_feed.core.logging import get_logger
from broker_feed.feed.context import FeedContext, StepResult
from broker_feed.feed.step import FeedStep
from broker_feed.sources.base import BrokerSourceClient, error_text
from broker_feed.standardization.models import SourceBatch, SourceOutcome

logger = get_logger(__name__)


async def _fetch_one(
    source: BrokerSource,
    client: BrokerSourceClient | None,
) -> tuple[SourceOutcome, list[dict[str, Any]]]:
    if client is None:
        return SourceOutcome(source=source, success=False, error=f"No client configured for {source}"), []

    try:
        batch = await client.fetch()
    except FeedError as exc:
        logger.warning("Broker fetch failed", error=str(exc), **exc.log_fields())
        return SourceOutcome(source=source, success=False, error=str(exc)), []
    except Exception as exc:
        logger.warning("Broker fetch failed", source=str(source), error=str(exc))
        return SourceOutcome(source=source, success=False, error=str(exc) or type(exc).__name__), []

    if not isinstance(batch, SourceBatch) or not batch.success:
        error = error_text(getattr(batch, "error", None), "Broker returned an unsuccessful batch")
        logger.warning("Broker batch unsuccessful", source=str(source), error=error)
        return SourceOutcome(
            source=source,
            success=False,
            document_count=getattr(batch, "document_count", 0) or 0,
            error=error,
        ), []

    return SourceOutcome(
        source=source,
        success=True,
        document_count=batch.document_count,
    ), list(batch.documents)


async def collect_sources(
    clients: Mapping[BrokerSource, BrokerSourceClient],
    selected: Iterable[BrokerSource] = BROKER_ORDER,
) -> tuple[list[SourceOutcome], dict[BrokerSource, list[dict[str, Any]]]]:
    """
    Fetch every selected broker at once and join the results.

    Returns outcomes in broker order and the documents of each
    successful broker.
    """
    chosen = set(selected)
    wanted = [s for s in BROKER_ORDER if s in chosen]
    results = await asyncio.gather(*(_fetch_one(s, clients.get(s)) for s in wanted))

    outcomes = [outcome for outcome, _ in results]
    documents = {
        outcome.source: docs
        for outcome, docs in results
        if outcome.success
    }
    return outcomes, documents


class CollectSourcesStep(FeedStep):
    """Fetch raw broker batches for the sources the query selects."""

    name = "collect_sources"
    description = "Fetch raw policy batches from broker sources"

    def __init__(self, clients: Mapping[BrokerSource, BrokerSourceClient]) -> None:
        self._clients = clients

    async def execute(self, ctx: FeedContext) -> StepResult:
        started_at = self._now()

        outcomes, documents = await collect_sources(self._clients, ctx.query.selected_sources)
        ctx.source_outcomes = outcomes
        ctx.raw_by_source = documents

        for outcome in outcomes:
            if not outcome.success:
                ctx.record_issue(f"Source '{outcome.source}' failed: {outcome.error}")

        return self._success(started_at, metadata={
            "selected": [str(s) for s in ctx.query.selected_sources],
            "succeeded": [str(o.source) for o in outcomes if o.success],
            "failed": [str(o.source) for o in outcomes if not o.success],
            "documents": {str(s): len(d) for s, d in documents.items()},
        })
