"""Shared constants and enums used across the application."""

from enum import StrEnum


class BrokerSource(StrEnum):
    """Upstream broker systems feeding the policy feed."""

    BROKER1 = "broker1"
    BROKER2 = "broker2"


# Canonical reporting order for per-source outcomes and breakdowns
BROKER_ORDER: tuple[BrokerSource, ...] = (BrokerSource.BROKER1, BrokerSource.BROKER2)


class FeedStatus(StrEnum):
    """Overall status of a feed query execution."""

    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class StepStatus(StrEnum):
    """Status of an individual feed step."""

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class SourceMode(StrEnum):
    """How raw broker batches are retrieved."""

    DATABASE = "database"
    HTTP = "http"


# Placeholder strings brokers use for "value not actually known"
NUMERIC_SENTINELS: frozenset[str] = frozenset({"TBC", "Not Known"})
DATE_SENTINEL = "not known"

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

SUCCESS_MESSAGE = "Standardized broker data retrieved successfully"
FAILURE_MESSAGE = "Failed to retrieve standardized broker data"
