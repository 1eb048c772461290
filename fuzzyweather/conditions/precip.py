"""Precipitation phrasing shared by the rain and snow renderers."""

from collections.abc import Sequence
from datetime import tzinfo

from fuzzyweather.models.forecast import ForecastPoint
from fuzzyweather.phrasing import clock_hour, percent

# Hourly probability at which precipitation is called likely.
LIKELY_PROBABILITY = 0.5


def intensity_text(intensity: float, precip_type: str) -> str:
    """Qualitative description of an intensity (inches per hour)."""
    if intensity > 0.7:
        text = "extremely heavy"
    elif intensity > 0.2:
        text = "heavy"
    elif intensity > 0.07:
        text = "moderate"
    elif intensity > 0.01:
        text = "light"
    elif intensity > 0:
        if precip_type == "snow":
            text = "a light dusting of"
        elif precip_type == "rain":
            text = "drizzling"
        else:
            text = "very light"
    else:
        text = "no"
    return f"{text} {precip_type}"


def expectation_text(point: ForecastPoint, tz: tzinfo) -> str:
    """Expected intensity, chance and peak hour for a daily record."""
    if point.precip_probability < 0.1 or not point.precip_type:
        return ""

    text = (
        f"You should expect {intensity_text(point.precip_intensity_max, point.precip_type)}."
        f" There is a {percent(point.precip_probability)} percent chance"
    )
    if point.precip_intensity_max_time is not None:
        text += f" peaking at around {clock_hour(point.precip_intensity_max_time, tz)}"
    return text + "."


def likely_window(
    hourly: Sequence[ForecastPoint], precip_types: tuple[str, ...]
) -> tuple[ForecastPoint, ForecastPoint] | None:
    """First and last hour of the first run of likely precipitation."""
    start = end = None
    for p in hourly:
        likely = p.precip_type in precip_types and p.precip_probability >= LIKELY_PROBABILITY
        if likely:
            if start is None:
                start = p
            end = p
        elif start is not None:
            break
    if start is None or end is None:
        return None
    return start, end


def window_text(
    hourly: Sequence[ForecastPoint], tz: tzinfo, precip_types: tuple[str, ...], noun: str
) -> str:
    window = likely_window(hourly, precip_types)
    if window is None:
        return ""
    start, end = window
    if start is end:
        return f"{noun} is likely around {clock_hour(start.time, tz)}."
    # the last likely hour still counts, so it ends an hour later
    return (
        f"{noun} looks likely from around {clock_hour(start.time, tz)}"
        f" until {clock_hour(end.time + 3600, tz)}."
    )
