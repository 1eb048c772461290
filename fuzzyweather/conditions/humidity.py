"""Humidity renderer."""

import random
from collections.abc import Sequence
from datetime import datetime

from fuzzyweather.conditions.base import Chooser
from fuzzyweather.models.condition import Condition
from fuzzyweather.models.forecast import ForecastPoint
from fuzzyweather.phrasing import percent, whole

HEADLINES = (
    "It's going to be muggy {day}.",
    "Expect a sticky day {day}.",
    "The air will be thick {day}.",
)


def headline(choose: Chooser = random.choice) -> str:
    return choose(HEADLINES)


def daily_text(condition: Condition, point: ForecastPoint, timezone: str) -> str:
    return (
        f"Humidity {{day}} will be around {percent(point.humidity)} percent"
        f" with a dew point of {whole(point.dew_point)}."
    )


def hourly_text(
    hourly: Sequence[ForecastPoint],
    timezone: str,
    daily: ForecastPoint | None = None,
    now: datetime | None = None,
) -> str:
    return ""
