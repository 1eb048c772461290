"""Cold renderer, also used for cold and windy days."""

import random
from collections.abc import Sequence
from datetime import datetime

from fuzzyweather.conditions.base import Chooser
from fuzzyweather.models.condition import Condition, Topic
from fuzzyweather.models.forecast import ForecastPoint
from fuzzyweather.phrasing import whole

HEADLINES = (
    "Bundle up {day}, it's going to be cold.",
    "You'll want a warm coat {day}.",
    "It's going to be chilly {day}.",
)


def headline(choose: Chooser = random.choice) -> str:
    return choose(HEADLINES)


def daily_text(condition: Condition, point: ForecastPoint, timezone: str) -> str:
    low = whole(point.temperature_min)
    feels = whole(point.apparent_temperature_min)
    text = f"Temperatures {{day}} will drop to {low} degrees"
    if feels < low:
        text += f", and it will feel more like {feels}"
    text += "."
    if condition.topic == Topic.COLD_WIND:
        text += (
            f" Winds around {whole(point.wind_speed)} miles per hour"
            " will make it feel even colder."
        )
    return text


def hourly_text(
    hourly: Sequence[ForecastPoint],
    timezone: str,
    daily: ForecastPoint | None = None,
    now: datetime | None = None,
) -> str:
    return ""
