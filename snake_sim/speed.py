"""Difficulty-driven tick pacing."""

import math

from .constants import LOG_BASE, MIN_TICK_INTERVAL
from .models import Difficulty


def tick_interval(score: int, difficulty: Difficulty) -> float:
    """Seconds between fixed ticks: ``1 - log_600(score + base_rate)``, floored.

    Without the floor the interval reaches zero once ``score + base_rate`` hits
    600 (score 400 on hard) and turns negative after that.
    """
    period = math.log(score + difficulty.base_rate, LOG_BASE)
    return max(MIN_TICK_INTERVAL, 1.0 - period)
