"""Lenient numeric parsing for model-emitted price and percentage strings."""

import math
import re

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(raw: str) -> float:
    """Parse the leading number of *raw*, ignoring commas and ``%``.

    Trailing garbage after a numeric prefix is ignored (``"150.25."`` gives
    150.25). Returns ``math.nan`` when there is no numeric prefix at all.
    """
    cleaned = raw.replace(",", "").replace("%", "", 1)
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return math.nan
    return float(match.group(1))
