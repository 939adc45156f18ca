"""
Aggregation engine — ordering, pagination and summary analytics.

Summary statistics describe the filtered set before pagination; active
policy statistics, data-quality counts and filter options describe the
full merged set, independent of display filters.
"""

from __future__ import annotations

import math
from collections import Counter
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from broker_feed.standardization.activity import has_valid_dates, is_active, policy_duration_days
from broker_feed.standardization.dates import parse_date
from broker_feed.standardization.models import (
    ActivePolicyStatistics,
    CanonicalPolicy,
    DataQuality,
    FilterOptions,
    Pagination,
    Statistics,
    empty_source_counts,
)


# ─── Ordering ─────────────────────────────────────────────

def sort_policies(policies: Sequence[CanonicalPolicy]) -> list[CanonicalPolicy]:
    """
    Most recent start date first.

    Policies with an unparseable start date sort last, keeping their
    relative order (the sort is stable).
    """
    dated = [(parse_date(p.start_date), p) for p in policies]
    valid = [item for item in dated if item[0] is not None]
    undated = [p for start, p in dated if start is None]
    valid.sort(key=lambda item: item[0], reverse=True)
    return [p for _, p in valid] + undated


# ─── Pagination ───────────────────────────────────────────

def paginate(
    policies: Sequence[CanonicalPolicy],
    page: int,
    limit: int,
) -> tuple[list[CanonicalPolicy], Pagination]:
    """Slice one page out of `policies` and describe the page set."""
    total_count = len(policies)
    total_pages = math.ceil(total_count / limit) if limit > 0 else 0
    skip = (page - 1) * limit
    items = list(policies[skip:skip + limit])

    return items, Pagination(
        page=page,
        limit=limit,
        total_count=total_count,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )


# ─── Summary statistics ───────────────────────────────────

def _mean(total: float, count: int) -> float:
    return total / count if count > 0 else 0.0


def _count_sources(policies: Sequence[CanonicalPolicy]) -> dict[str, int]:
    counts = empty_source_counts()
    for policy in policies:
        counts[str(policy.source)] = counts.get(str(policy.source), 0) + 1
    return counts


def summarize(policies: Sequence[CanonicalPolicy]) -> Statistics:
    """Totals, averages and breakdowns over `policies`."""
    count = len(policies)
    total_insured = sum(p.insured_amount for p in policies)
    total_premium = sum(p.premium for p in policies)

    return Statistics(
        total_policies=count,
        total_insured_amount=total_insured,
        average_insured_amount=_mean(total_insured, count),
        total_premium=total_premium,
        average_premium=_mean(total_premium, count),
        policy_type_breakdown=dict(Counter(p.policy_type for p in policies if p.policy_type)),
        client_type_breakdown=dict(Counter(p.client_type for p in policies if p.client_type)),
        source_breakdown=_count_sources(policies),
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def summarize_active(
    policies: Sequence[CanonicalPolicy],
    now: datetime | date,
) -> ActivePolicyStatistics:
    """Statistics over the subset of `policies` active at `now`."""
    active = [p for p in policies if is_active(p, now)]
    durations = [d for d in (policy_duration_days(p) for p in active) if d is not None]
    average_duration = round_half_up(sum(durations) / len(durations)) if durations else 0

    return ActivePolicyStatistics(
        total_active_policies=len(active),
        total_active_customers=len({p.client_ref for p in active if p.client_ref}),
        total_active_insured_amount=sum(p.insured_amount for p in active),
        average_active_policy_duration=average_duration,
        active_policies_by_source=_count_sources(active),
    )


def assess_data_quality(policies: Sequence[CanonicalPolicy]) -> DataQuality:
    valid = sum(1 for p in policies if has_valid_dates(p))
    return DataQuality(
        policies_with_valid_dates=valid,
        policies_with_missing_data=len(policies) - valid,
    )


def active_percentage(active_count: int, total_count: int) -> int:
    """Share of active policies as a whole percentage (0 when there are none)."""
    if total_count <= 0:
        return 0
    return round_half_up(active_count / total_count * 100)


def collect_filter_options(policies: Sequence[CanonicalPolicy]) -> FilterOptions:
    """Sorted distinct non-empty policy and client types."""
    return FilterOptions(
        policy_types=sorted({p.policy_type for p in policies if p.policy_type}),
        client_types=sorted({p.client_type for p in policies if p.client_type}),
    )

