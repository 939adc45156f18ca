"""
FeedContext — mutable state object carried through every feed step.

One context per query.  Early steps fill in raw batches and canonical
policies, later steps fill in the filtered view, the page and the
aggregates.  `now` is sampled once when the context is created so every
activity decision in the query uses the same snapshot.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from broker_feed.core.constants import BrokerSource, StepStatus
from broker_feed.standardization.models import (
    ActivePolicyStatistics,
    CanonicalPolicy,
    DataQuality,
    FilterOptions,
    Pagination,
    SourceOutcome,
    Statistics,
)
from broker_feed.standardization.query import FeedQuery


@dataclass
class StepResult:
    """What one feed step did, and when."""

    step_name: str
    status: StepStatus
    started_at: datetime | None = None
    completed_at: datetime | None = None
    error: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> int:
        if self.started_at is None or self.completed_at is None:
            return 0
        return int((self.completed_at - self.started_at).total_seconds() * 1000)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "step": self.step_name,
            "status": str(self.status),
            "duration_ms": self.duration_ms,
        }
        if self.error:
            body["error"] = self.error
        if self.metadata:
            body["metadata"] = self.metadata
        return body


@dataclass
class FeedContext:
    """Carries all state between feed steps."""

    query: FeedQuery = field(default_factory=FeedQuery)
    query_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    now: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # collect_sources
    source_outcomes: list[SourceOutcome] = field(default_factory=list)
    raw_by_source: dict[BrokerSource, list[dict[str, Any]]] = field(default_factory=dict)

    # policies: merged set of every collected source
    # filtered: after query filters (sorted once sort_policies ran)
    # page_items: the requested page of `filtered`
    policies: list[CanonicalPolicy] = field(default_factory=list)
    filtered: list[CanonicalPolicy] = field(default_factory=list)
    page_items: list[CanonicalPolicy] = field(default_factory=list)
    pagination: Pagination | None = None

    statistics: Statistics | None = None
    active_statistics: ActivePolicyStatistics | None = None
    data_quality: DataQuality | None = None
    filter_options: FilterOptions | None = None

    step_results: list[StepResult] = field(default_factory=list)
    # Non-fatal problems (failed sources, dropped records)
    issues: list[str] = field(default_factory=list)

    def record_issue(self, message: str) -> None:
        self.issues.append(message)

    @property
    def failed_sources(self) -> list[BrokerSource]:
        return [o.source for o in self.source_outcomes if not o.success]
