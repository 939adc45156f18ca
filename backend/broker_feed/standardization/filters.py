"""
Filter & search over canonical policies.

Stages run in a fixed order, each consuming the previous stage's output,
so supplied filters combine with AND.  A filter that was not supplied
(None or "") leaves its input untouched.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

from broker_feed.standardization.dates import parse_date
from broker_feed.standardization.models import CanonicalPolicy
from broker_feed.standardization.query import FeedQuery


def filter_by_source(policies: Iterable[CanonicalPolicy], source: str | None) -> list[CanonicalPolicy]:
    if not source:
        return list(policies)
    return [p for p in policies if p.source == source]


def filter_by_policy_type(policies: Iterable[CanonicalPolicy], policy_type: str | None) -> list[CanonicalPolicy]:
    if not policy_type:
        return list(policies)
    wanted = policy_type.lower()
    return [p for p in policies if p.policy_type.lower() == wanted]


def filter_by_client_type(policies: Iterable[CanonicalPolicy], client_type: str | None) -> list[CanonicalPolicy]:
    if not client_type:
        return list(policies)
    wanted = client_type.lower()
    return [p for p in policies if p.client_type.lower() == wanted]


def _matches_search(policy: CanonicalPolicy, term: str) -> bool:
    return any(
        term in value.lower()
        for value in (
            policy.policy_number,
            policy.business_description,
            policy.insurer,
            policy.client_ref,
        )
    )


def search_policies(policies: Iterable[CanonicalPolicy], term: str | None) -> list[CanonicalPolicy]:
    """Case-insensitive substring match on policy number, description, insurer or client ref."""
    if not term:
        return list(policies)
    needle = term.lower()
    return [p for p in policies if _matches_search(p, needle)]


def filter_by_insured_amount(
    policies: Iterable[CanonicalPolicy],
    min_amount: float | None,
    max_amount: float | None,
) -> list[CanonicalPolicy]:
    result = list(policies)
    if min_amount is not None:
        result = [p for p in result if p.insured_amount >= min_amount]
    if max_amount is not None:
        result = [p for p in result if p.insured_amount <= max_amount]
    return result


def filter_by_start_date(
    policies: Iterable[CanonicalPolicy],
    start_from: date | None = None,
    start_to: date | None = None,
) -> list[CanonicalPolicy]:
    """Keep policies whose start date falls in [start_from, start_to]."""
    if start_from is None and start_to is None:
        return list(policies)

    result = []
    for policy in policies:
        start = parse_date(policy.start_date)
        if start is None:
            continue
        if start_from is not None and start < start_from:
            continue
        if start_to is not None and start > start_to:
            continue
        result.append(policy)
    return result


def apply_filters(policies: Iterable[CanonicalPolicy], query: FeedQuery) -> list[CanonicalPolicy]:
    """Run every filter stage of `query` over `policies`."""
    result = filter_by_source(policies, query.source)
    result = filter_by_policy_type(result, query.policy_type)
    result = filter_by_client_type(result, query.client_type)
    result = search_policies(result, query.search)
    result = filter_by_insured_amount(result, query.min_amount, query.max_amount)
    result = filter_by_start_date(result, query.start_from, query.start_to)
    return result
