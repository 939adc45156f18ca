"""
Activity classifier — is a policy in force right now, and for how long does it run?

Activity is fail-closed: a policy whose start or renewal date cannot be
parsed is never active.  Callers sample `now` once per query and pass the
same value for every policy so the whole result set shares one snapshot.
"""

from __future__ import annotations

from datetime import date, datetime

from broker_feed.standardization.dates import parse_date
from broker_feed.standardization.models import CanonicalPolicy


def _as_date(now: datetime | date) -> date:
    return now.date() if isinstance(now, datetime) else now


def is_active(policy: CanonicalPolicy, now: datetime | date) -> bool:
    """Active iff start <= now < renewal, with both dates parseable."""
    start = parse_date(policy.start_date)
    renewal = parse_date(policy.renewal_date)
    if start is None or renewal is None:
        return False
    today = _as_date(now)
    return start <= today < renewal


def policy_duration_days(policy: CanonicalPolicy) -> int | None:
    """Whole days between start and end date, or None if either is unparseable."""
    start = parse_date(policy.start_date)
    end = parse_date(policy.end_date)
    if start is None or end is None:
        return None
    return abs((end - start).days)


def has_valid_dates(policy: CanonicalPolicy) -> bool:
    """Both the start and renewal date parse (the inputs activity depends on)."""
    return parse_date(policy.start_date) is not None and parse_date(policy.renewal_date) is not None
