"""Feed steps, in the order the default flow runs them."""

from broker_feed.feed.steps.collect_sources import CollectSourcesStep, collect_sources
from broker_feed.feed.steps.normalize_records import NormalizeRecordsStep
from broker_feed.feed.steps.apply_filters import ApplyFiltersStep
from broker_feed.feed.steps.sort_policies import SortPoliciesStep
from broker_feed.feed.steps.paginate import PaginateStep
from broker_feed.feed.steps.compute_statistics import ComputeStatisticsStep

__all__ = [
    "CollectSourcesStep",
    "NormalizeRecordsStep",
    "ApplyFiltersStep",
    "SortPoliciesStep",
    "PaginateStep",
    "ComputeStatisticsStep",
    "collect_sources",
]
