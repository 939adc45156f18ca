"""
Numeric coercion for raw broker values.

Both brokers mix real numbers, numeric strings, blanks and placeholder
strings ("TBC", "Not Known") in the same columns.  Every numeric field of
a canonical policy goes through safe_parse_number(), so this is the one
place that absorbs that inconsistency.
"""

from __future__ import annotations

import math
import re
from typing import Any

from broker_feed.core.constants import NUMERIC_SENTINELS

# Leading float literal, as accepted by a lenient parseFloat-style parser
_FLOAT_PREFIX = re.compile(
    r"^[+-]?(?:inf(?:inity)?|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE | re.ASCII,
)


def _parse_float_prefix(text: str) -> float:
    match = _FLOAT_PREFIX.match(text.strip())
    if not match:
        return math.nan
    return float(match.group(0))


def safe_parse_number(value: Any) -> float:
    """
    Coerce an arbitrary raw value into a finite float.

    None, "", "TBC" and "Not Known" give 0.  Strings are parsed from their
    leading numeric prefix ("100.50" -> 100.5, "12abc" -> 12.0).  Other
    values go through float().  Anything non-finite or unparseable gives 0.
    Never raises.
    """
    if value is None or value == "":
        return 0.0
    if isinstance(value, str):
        if value in NUMERIC_SENTINELS:
            return 0.0
        parsed = _parse_float_prefix(value)
    else:
        try:
            parsed = float(value)
        except (TypeError, ValueError, OverflowError):
            return 0.0

    if not math.isfinite(parsed):
        return 0.0
    return parsed
