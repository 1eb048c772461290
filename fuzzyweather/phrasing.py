"""Small text helpers shared by the renderers and the report assembler."""

import math
from datetime import date, tzinfo

from fuzzyweather.models.common import local_datetime

WEEKDAYS = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def whole(value: float) -> int:
    """Round half up, so 72.5 reads as 73 rather than banker's 72."""
    return math.floor(value + 0.5)


def percent(fraction: float) -> int:
    return whole(fraction * 100)


def clock_hour(epoch: float, tz: tzinfo) -> str:
    """12-hour clock hour with no leading zero, e.g. "2 pm", "12 am"."""
    hour = local_datetime(epoch, tz).hour
    suffix = "am" if hour < 12 else "pm"
    return f"{hour % 12 or 12} {suffix}"


def day_phrase(target: date, today: date) -> str:
    if target == today:
        return "today"
    if (target - today).days == 1:
        return "tomorrow"
    return WEEKDAYS[target.weekday()]


def render(template: str, day: str) -> str:
    """Fill ``{day}`` and its sentence-initial form ``{Day}``."""
    return template.replace("{Day}", day[:1].upper() + day[1:]).replace("{day}", day)


def join_sentences(pieces: list[str]) -> str:
    return " ".join(p.strip() for p in pieces if p and p.strip()).replace("\n", " ")
