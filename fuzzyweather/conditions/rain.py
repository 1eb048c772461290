"""Rain renderer."""

import random
from collections.abc import Sequence
from datetime import datetime

from fuzzyweather.conditions.base import Chooser
from fuzzyweather.conditions.precip import expectation_text, window_text
from fuzzyweather.models.common import zone
from fuzzyweather.models.condition import Condition
from fuzzyweather.models.forecast import ForecastPoint

HEADLINES = (
    "Don't forget your umbrella {day}!",
    "Remember the umbrella {day}.",
    "Prepare for some wet weather {day}.",
    "It's going to be wet {day}.",
    "You'll need the umbrella {day}.",
)


def headline(choose: Chooser = random.choice) -> str:
    return choose(HEADLINES)


def daily_text(condition: Condition, point: ForecastPoint, timezone: str) -> str:
    return expectation_text(point, zone(timezone))


def hourly_text(
    hourly: Sequence[ForecastPoint],
    timezone: str,
    daily: ForecastPoint | None = None,
    now: datetime | None = None,
) -> str:
    return window_text(hourly, zone(timezone), ("rain",), "Rain")
