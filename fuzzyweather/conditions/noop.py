"""Renderer for topics that have nothing to say."""

from collections.abc import Sequence
from datetime import datetime

from fuzzyweather.conditions.base import Chooser
from fuzzyweather.models.condition import Condition
from fuzzyweather.models.forecast import ForecastPoint


def headline(choose: Chooser | None = None) -> str:
    return ""


def daily_text(condition: Condition, point: ForecastPoint, timezone: str) -> str:
    return ""


def hourly_text(
    hourly: Sequence[ForecastPoint],
    timezone: str,
    daily: ForecastPoint | None = None,
    now: datetime | None = None,
) -> str:
    return ""
