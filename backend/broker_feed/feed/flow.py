"""
Feed flow — the ordered step sequence a standardized-feed query runs.

    collect_sources → normalize_records → apply_filters →
    sort_policies → paginate → compute_statistics
"""

from __future__ import annotations

from typing import Mapping

from broker_feed.core.constants import BrokerSource
from broker_feed.feed.step import FeedStep
from broker_feed.feed.steps import (
    ApplyFiltersStep,
    CollectSourcesStep,
    ComputeStatisticsStep,
    NormalizeRecordsStep,
    PaginateStep,
    SortPoliciesStep,
)
from broker_feed.sources.base import BrokerSourceClient


def default_flow(clients: Mapping[BrokerSource, BrokerSourceClient]) -> list[FeedStep]:
    return [
        CollectSourcesStep(clients),
        NormalizeRecordsStep(),
        ApplyFiltersStep(),
        SortPoliciesStep(),
        PaginateStep(),
        ComputeStatisticsStep(),
    ]
