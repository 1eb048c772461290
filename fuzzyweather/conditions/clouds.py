"""Cloud cover renderer."""

import random
from collections.abc import Sequence
from datetime import datetime

from fuzzyweather.conditions.base import Chooser
from fuzzyweather.models.condition import Condition
from fuzzyweather.models.forecast import ForecastPoint
from fuzzyweather.phrasing import percent

HEADLINES = (
    "It's going to be a gray day {day}.",
    "Don't expect much sun {day}.",
    "Clouds will be hanging around {day}.",
)


def headline(choose: Chooser = random.choice) -> str:
    return choose(HEADLINES)


def daily_text(condition: Condition, point: ForecastPoint, timezone: str) -> str:
    return f"Skies {{day}} will be mostly cloudy, with about {percent(point.cloud_cover)} percent cloud cover."


def hourly_text(
    hourly: Sequence[ForecastPoint],
    timezone: str,
    daily: ForecastPoint | None = None,
    now: datetime | None = None,
) -> str:
    return ""
