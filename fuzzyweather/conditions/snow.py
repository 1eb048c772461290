"""Snow and sleet renderer."""

import random
from collections.abc import Sequence
from datetime import datetime

from fuzzyweather.conditions.base import Chooser
from fuzzyweather.conditions.precip import expectation_text, window_text
from fuzzyweather.models.common import zone
from fuzzyweather.models.condition import Condition
from fuzzyweather.models.forecast import ForecastPoint
from fuzzyweather.phrasing import whole

HEADLINES = (
    "Bundle up, there's snow in the forecast {day}.",
    "It's going to be a snowy one {day}.",
    "Watch out for slick roads {day}.",
    "Get the shovel ready {day}.",
)


def headline(choose: Chooser = random.choice) -> str:
    return choose(HEADLINES)


def daily_text(condition: Condition, point: ForecastPoint, timezone: str) -> str:
    text = expectation_text(point, zone(timezone))
    if text and point.precip_accumulation >= 1:
        text += f" It could add up to about {whole(point.precip_accumulation)} inches."
    return text


def hourly_text(
    hourly: Sequence[ForecastPoint],
    timezone: str,
    daily: ForecastPoint | None = None,
    now: datetime | None = None,
) -> str:
    noun = "Sleet" if daily is not None and daily.precip_type == "sleet" else "Snow"
    return window_text(hourly, zone(timezone), ("snow", "sleet"), noun)
