"""Temperature renderer.

Unlike the other renderers this one is not picked by the classifier: every
daily summary and hour-by-hour report includes temperature text.
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from fuzzyweather.models.common import local_datetime, zone
from fuzzyweather.models.condition import Condition
from fuzzyweather.models.forecast import ForecastPoint
from fuzzyweather.phrasing import clock_hour, whole

logger = logging.getLogger(__name__)

WORK_DAY_END_HOUR = 17
# A high closer than this is not worth announcing as still to come.
PEAK_LEAD_HOURS = 2


def daily_text(
    condition: Condition | None, point: ForecastPoint, timezone: str
) -> str:
    return (
        f"The low {{day}} is {whole(point.temperature_min)} degrees"
        f" with a high of {whole(point.temperature_max)}."
    )


def hourly_text(
    hourly: Sequence[ForecastPoint],
    timezone: str,
    daily: ForecastPoint | None = None,
    now: datetime | None = None,
    work_day_end_hour: int = WORK_DAY_END_HOUR,
) -> str:
    """Narrate how the temperature moves across an hourly window.

    The first point is treated as the current hour unless ``now`` says the
    window has not started yet.
    """
    if not hourly:
        return ""

    tz = zone(timezone)
    first = hourly[0]
    ref = now.timestamp() if now is not None else first.time
    current = whole(first.temperature)

    if first.time > ref:
        opening = f"{{Day}} starts out around {current} degrees"
    else:
        opening = f"It's currently {current} degrees"

    peak = max(hourly, key=lambda p: p.temperature)
    hours_to_peak = (peak.time - ref) / 3600

    if hours_to_peak > PEAK_LEAD_HOURS:
        text = (
            f"{opening}, with a high of about {whole(peak.temperature)} degrees"
            f" around {clock_hour(peak.time, tz)}."
        )
    else:
        later = [p for p in hourly if p.time > peak.time]
        low = min(later, key=lambda p: p.temperature) if later else None
        if low is None or whole(low.temperature) >= current:
            text = f"{opening}."
        else:
            if hours_to_peak > 0 and whole(peak.temperature) > current:
                opening += f", topping out near {whole(peak.temperature)} soon before"
            else:
                opening += " and"
            text = (
                f"{opening} heading down to about {whole(low.temperature)} degrees"
                f" at {clock_hour(low.time, tz)}."
            )

    day_end = local_datetime(first.time, tz).replace(
        hour=work_day_end_hour, minute=0, second=0, microsecond=0
    ).timestamp()
    if ref < day_end and first.time <= day_end <= hourly[-1].time:
        nearest = min(hourly, key=lambda p: abs(p.time - day_end))
        text += f" It should be about {whole(nearest.temperature)} at the end of the work day."

    logger.debug("Hourly temperature text: %s", text)
    return text
