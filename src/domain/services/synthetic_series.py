"""
Synthetic intraday series for the price chart.

The search service only gives a current price and a daily percentage change,
so the chart is a random walk from the implied session open to the current
price. It is a visual approximation, not market data.
"""

import math
import random
from typing import Optional

from src.domain.entities.stock_analysis import SeriesPoint

POINT_COUNT = 30
SESSION_START_MINUTE = 9 * 60 + 30
SESSION_MINUTES = 390
VOLATILITY_RATIO = 0.005
PLACEHOLDER_VALUE = 100.0


def session_label(step: int) -> str:
    """``H:MM`` label of *step* when the session is split into POINT_COUNT steps."""
    minute_of_day = SESSION_START_MINUTE + step * (SESSION_MINUTES / POINT_COUNT)
    hour = int(minute_of_day // 60)
    minute = int(minute_of_day % 60)
    return f"{hour}:{minute:02d}"


def implied_open(current: float, change_percent: float) -> float:
    """Back out the session open from the current price and daily change."""
    if not math.isfinite(change_percent):
        return current
    ratio = 1 + change_percent / 100
    if ratio == 0:
        return current
    return current / ratio


def generate_series(
    current: float,
    change_percent: float,
    rng: Optional[random.Random] = None,
) -> tuple[SeriesPoint, ...]:
    """Build POINT_COUNT points drifting from the implied open to *current*.

    Args:
        current:        Reported price. A non-finite value yields a flat line
                        at PLACEHOLDER_VALUE.
        change_percent: Reported daily change in percent (1.5 means +1.5%).
        rng:            Noise source; pass a seeded ``random.Random`` for
                        reproducible output.

    The last point always equals *current* exactly.
    """
    if not math.isfinite(current):
        return tuple(
            SeriesPoint(time_label=session_label(i), value=PLACEHOLDER_VALUE)
            for i in range(POINT_COUNT)
        )

    rng = rng or random.Random()
    open_price = implied_open(current, change_percent)
    volatility = open_price * VOLATILITY_RATIO
    drift = (current - open_price) / POINT_COUNT

    points: list[SeriesPoint] = []
    value = open_price
    for i in range(POINT_COUNT):
        noise = (rng.random() - 0.5) * volatility
        value += drift + noise
        points.append(SeriesPoint(time_label=session_label(i), value=round(value, 2)))

    points[-1] = SeriesPoint(time_label=points[-1].time_label, value=current)
    return tuple(points)
