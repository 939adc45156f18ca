"""
Response envelopes for the standardized feed.

build_feed_response() turns a FeedResult into the JSON-ready body the API
returns; a failed query becomes the generic failure envelope.
"""

from __future__ import annotations

from typing import Any

from broker_feed.core.constants import FAILURE_MESSAGE, SUCCESS_MESSAGE
from broker_feed.feed.engine import FeedResult
from broker_feed.standardization.aggregation import active_percentage
from broker_feed.standardization.models import (
    ActivePolicyStatistics,
    DataQuality,
    FilterOptions,
    Pagination,
    Statistics,
)


def failure_response(error: str | None = None) -> dict[str, Any]:
    return {
        "success": False,
        "error": error or "Unknown error",
        "message": FAILURE_MESSAGE,
    }


def build_feed_response(result: FeedResult) -> dict[str, Any]:
    """Success or failure envelope for one feed query."""
    if not result.succeeded:
        return failure_response(result.error)

    ctx = result.context
    statistics = ctx.statistics or Statistics()
    active = ctx.active_statistics or ActivePolicyStatistics()
    data_quality = ctx.data_quality or DataQuality()
    filter_options = ctx.filter_options or FilterOptions()
    pagination = ctx.pagination or Pagination(
        page=ctx.query.page,
        limit=ctx.query.limit,
        total_count=0,
        total_pages=0,
        has_next_page=False,
        has_prev_page=ctx.query.page > 1,
    )

    return {
        "success": True,
        "data": [policy.to_dict() for policy in ctx.page_items],
        "pagination": pagination.to_dict(),
        "statistics": {
            **statistics.to_dict(),
            "activePolicies": active.to_dict(),
        },
        "metadata": {
            "lastUpdated": result.completed_at.isoformat(),
            "totalPoliciesAcrossAllSources": len(ctx.policies),
            "activePoliciesPercentage": active_percentage(
                active.total_active_policies, len(ctx.policies)
            ),
            "dataQuality": data_quality.to_dict(),
            "filterOptions": filter_options.to_dict(),
            "sources": [outcome.to_dict() for outcome in ctx.source_outcomes],
        },
        "message": SUCCESS_MESSAGE,
    }
