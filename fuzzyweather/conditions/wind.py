"""Wind renderer."""

import random
from collections.abc import Sequence
from datetime import datetime

from fuzzyweather.conditions.base import Chooser
from fuzzyweather.models.condition import Condition
from fuzzyweather.models.forecast import ForecastPoint
from fuzzyweather.phrasing import whole

HEADLINES = (
    "Hold on to your hat {day}.",
    "It's going to be a windy one {day}.",
    "Expect a blustery day {day}.",
)


def headline(choose: Chooser = random.choice) -> str:
    return choose(HEADLINES)


def daily_text(condition: Condition, point: ForecastPoint, timezone: str) -> str:
    return f"Winds {{day}} will be up around {whole(point.wind_speed)} miles per hour."


def hourly_text(
    hourly: Sequence[ForecastPoint],
    timezone: str,
    daily: ForecastPoint | None = None,
    now: datetime | None = None,
) -> str:
    return ""
