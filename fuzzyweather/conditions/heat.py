"""Heat renderer, also used for hot and humid days."""

import random
from collections.abc import Sequence
from datetime import datetime

from fuzzyweather.conditions.base import Chooser
from fuzzyweather.models.condition import Condition, Topic
from fuzzyweather.models.forecast import ForecastPoint
from fuzzyweather.phrasing import percent, whole

HEADLINES = (
    "It's going to be a hot one {day}.",
    "Get ready for some heat {day}.",
    "Stay cool {day}, it's going to be a scorcher.",
    "Find some shade {day}.",
)


def headline(choose: Chooser = random.choice) -> str:
    return choose(HEADLINES)


def daily_text(condition: Condition, point: ForecastPoint, timezone: str) -> str:
    high = whole(point.temperature_max)
    feels = whole(point.apparent_temperature_max)
    text = f"Temperatures {{day}} will climb to {high} degrees"
    if feels > high:
        text += f", and it will feel more like {feels}"
    text += "."
    if condition.topic == Topic.HEAT_HUMID:
        text += f" The humidity will be up around {percent(point.humidity)} percent, so it'll be sticky too."
    return text


def hourly_text(
    hourly: Sequence[ForecastPoint],
    timezone: str,
    daily: ForecastPoint | None = None,
    now: datetime | None = None,
) -> str:
    return ""
