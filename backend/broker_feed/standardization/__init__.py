"""
Standardization engine — pure functions that turn two broker schemas
into one canonical policy feed.

Nothing in this package performs I/O; the feed pipeline (broker_feed.feed)
wires it to broker sources and the HTTP layer.
"""

from broker_feed.standardization.coercion import safe_parse_number
from broker_feed.standardization.dates import parse_date
from broker_feed.standardization.mapping import (
    FIELD_MAPPING,
    normalize_batch,
    standardize_broker1_record,
    standardize_broker2_record,
)
from broker_feed.standardization.models import CanonicalPolicy
from broker_feed.standardization.query import FeedQuery, parse_query

__all__ = [
    "FIELD_MAPPING",
    "CanonicalPolicy",
    "FeedQuery",
    "normalize_batch",
    "parse_date",
    "parse_query",
    "safe_parse_number",
    "standardize_broker1_record",
    "standardize_broker2_record",
]
