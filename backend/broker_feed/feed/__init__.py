"""
Feed pipeline — step-based engine that answers a standardized-feed query.

A query runs collect → normalize → filter → sort → paginate → statistics
over a FeedContext, with per-step timing and structured logging.
"""

from broker_feed.feed.context import FeedContext, StepResult
from broker_feed.feed.engine import FeedEngine, FeedResult
from broker_feed.feed.response import build_feed_response, failure_response
from broker_feed.feed.step import FeedStep

__all__ = [
    "FeedContext",
    "FeedEngine",
    "FeedResult",
    "FeedStep",
    "StepResult",
    "build_feed_response",
    "failure_response",
]
