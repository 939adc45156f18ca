"""
Date parsing for broker date strings.

Dates stay as raw strings on canonical policies and are only parsed when
something needs to compare them (activity, sorting, date filters).
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any

from broker_feed.core.constants import DATE_SENTINEL

# (pattern, group order) in priority order; first full match wins
_DATE_FORMATS: tuple[tuple[re.Pattern[str], tuple[str, str, str]], ...] = (
    (re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})"), ("day", "month", "year")),   # DD/MM/YYYY
    (re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})"), ("year", "month", "day")),   # YYYY-MM-DD
    (re.compile(r"([0-9]{2})-([0-9]{2})-([0-9]{4})"), ("day", "month", "year")),   # DD-MM-YYYY
)


def parse_date(value: Any) -> date | None:
    """
    Parse a broker date string into a date.

    Returns None for empty values, the "Not Known" sentinel (any case),
    unrecognised shapes and impossible calendar dates.
    """
    if not value or not isinstance(value, str):
        return None
    if value.lower() == DATE_SENTINEL:
        return None

    for pattern, order in _DATE_FORMATS:
        match = pattern.fullmatch(value)
        if match:
            parts = dict(zip(order, (int(g) for g in match.groups())))
            try:
                return date(parts["year"], parts["month"], parts["day"])
            except ValueError:
                return None

    return None
