"""
FeedQuery — caller-supplied query parameters, with lenient parsing.

Malformed parameters are never surfaced as errors: non-numeric page or
limit fall back to the defaults, out-of-range values are clamped, an
unknown source means "both sources", and unparseable amount or date
bounds are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from broker_feed.core.constants import (
    BROKER_ORDER,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    BrokerSource,
)
from broker_feed.standardization.dates import parse_date


@dataclass(frozen=True)
class FeedQuery:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    source: BrokerSource | None = None
    policy_type: str | None = None
    client_type: str | None = None
    search: str | None = None
    min_amount: float | None = None
    max_amount: float | None = None
    start_from: date | None = None
    start_to: date | None = None

    @property
    def selected_sources(self) -> tuple[BrokerSource, ...]:
        """Sources to collect from: the requested one, or all of them."""
        return (self.source,) if self.source else BROKER_ORDER

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "source": str(self.source) if self.source else None,
            "policyType": self.policy_type,
            "clientType": self.client_type,
            "search": self.search,
            "minAmount": self.min_amount,
            "maxAmount": self.max_amount,
            "startFrom": self.start_from.isoformat() if self.start_from else None,
            "startTo": self.start_to.isoformat() if self.start_to else None,
        }


def _parse_int_prefix(value: Any) -> int | None:
    """parseInt-style: leading optional sign and digits, else None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else None

    text = str(value).strip()
    digits = ""
    for idx, char in enumerate(text):
        if char.isdigit() or (idx == 0 and char in "+-"):
            digits += char
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return None


def parse_page(value: Any) -> int:
    parsed = _parse_int_prefix(value)
    if parsed is None:
        return DEFAULT_PAGE
    return max(DEFAULT_PAGE, parsed)


def parse_limit(value: Any, default: int = DEFAULT_LIMIT, maximum: int = MAX_LIMIT) -> int:
    parsed = _parse_int_prefix(value)
    if parsed is None:
        return default
    return min(max(1, parsed), maximum)


def parse_source(value: Any) -> BrokerSource | None:
    if not value:
        return None
    try:
        return BrokerSource(value)
    except ValueError:
        return None


def _text_or_none(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def _amount_or_none(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    return amount if amount == amount and abs(amount) != float("inf") else None


def parse_query(
    *,
    page: Any = None,
    limit: Any = None,
    source: Any = None,
    policy_type: Any = None,
    client_type: Any = None,
    search: Any = None,
    min_amount: Any = None,
    max_amount: Any = None,
    start_from: Any = None,
    start_to: Any = None,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> FeedQuery:
    """Build a FeedQuery from raw (usually query-string) values."""
    return FeedQuery(
        page=parse_page(page),
        limit=parse_limit(limit, default=default_limit, maximum=max_limit),
        source=parse_source(source),
        policy_type=_text_or_none(policy_type),
        client_type=_text_or_none(client_type),
        search=_text_or_none(search),
        min_amount=_amount_or_none(min_amount),
        max_amount=_amount_or_none(max_amount),
        start_from=parse_date(start_from),
        start_to=parse_date(start_to),
    )
