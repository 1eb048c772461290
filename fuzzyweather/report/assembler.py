"""Report assembler: daily summary, hour-by-hour detail and current conditions."""

import logging
import random
from collections.abc import Sequence
from datetime import date, datetime, timedelta, tzinfo

from fuzzyweather.conditions import temp
from fuzzyweather.conditions.base import Chooser
from fuzzyweather.conditions.classifier import daily_conditions
from fuzzyweather.conditions.registry import get_renderer
from fuzzyweather.config.schema import ThresholdConfig
from fuzzyweather.models.common import local_date, zone
from fuzzyweather.models.forecast import Forecast, ForecastPoint
from fuzzyweather.models.report import ReportSection, WeatherReport
from fuzzyweather.phrasing import day_phrase, join_sentences, render
from fuzzyweather.report.currently import current_conditions

logger = logging.getLogger(__name__)

# How far into the hourly data to look for tomorrow's hours.
HOURLY_HORIZON = 49
# After this local hour "today" becomes "the rest of today".
REST_OF_DAY_HOUR = 10


def assemble_report(
    forecast: Forecast,
    requested: date,
    now: datetime,
    thresholds: ThresholdConfig,
    choose: Chooser = random.choice,
) -> WeatherReport:
    """Build all three sections of the report for ``requested``."""
    today = now.astimezone(zone(forecast.timezone)).date()
    return WeatherReport(
        date=requested,
        currently=current_conditions(forecast, requested, today, thresholds),
        daily_summary=daily_summary(forecast, requested, now, thresholds, choose),
        detail=hour_by_hour(forecast, requested, now, thresholds),
    )


def daily_summary(
    forecast: Forecast,
    requested: date,
    now: datetime,
    thresholds: ThresholdConfig,
    choose: Chooser = random.choice,
) -> ReportSection | None:
    tz = zone(forecast.timezone)
    local_now = now.astimezone(tz)
    point = daily_point(forecast.daily, requested, tz)
    if point is None:
        logger.warning("No daily forecast for %s", requested)
        return None

    logger.debug("Getting daily summary for %s", requested)
    day = day_phrase(requested, local_now.date())
    text: list[str] = []
    conditions: dict[str, str] = {}

    for i, condition in enumerate(daily_conditions(point, thresholds, tz)):
        renderer = get_renderer(condition.topic)
        try:
            headline = renderer.headline(choose) if i == 0 else ""
            condition_text = render(
                renderer.daily_text(condition, point, forecast.timezone), day
            )
        except Exception:
            logger.exception("Cannot get text for condition %s", condition.topic)
            continue
        if condition_text:
            conditions[condition.topic] = condition_text
        piece = join_sentences([render(headline, day), condition_text])
        if piece:
            text.append(piece)

    if not text:
        if day == "today" and local_now.hour > REST_OF_DAY_HOUR:
            text.append("The rest of today will be pretty quiet weather wise.")
        else:
            text.append(render("{Day} will be pretty quiet weather wise.", day))

    text.append(render(temp.daily_text(None, point, forecast.timezone), day))
    return ReportSection(data=point, conditions=conditions, forecast=join_sentences(text))


def hour_by_hour(
    forecast: Forecast,
    requested: date,
    now: datetime,
    thresholds: ThresholdConfig,
) -> ReportSection | None:
    """Hour-by-hour narrative, only available for today and tomorrow."""
    tz = zone(forecast.timezone)
    today = now.astimezone(tz).date()
    hourly = day_window(forecast.hourly, requested, today, tz)
    if not hourly:
        return None

    logger.debug("Getting hour-by-hour summary for %s", requested)
    day = day_phrase(requested, today)
    point = daily_point(forecast.daily, requested, tz)
    text = [
        temp.hourly_text(
            hourly, forecast.timezone, point, now,
            work_day_end_hour=thresholds.work_day_end_hour,
        )
    ]
    conditions: dict[str, str] = {}

    if point is not None:
        for condition in daily_conditions(point, thresholds, tz):
            renderer = get_renderer(condition.topic)
            try:
                text.append(renderer.hourly_text(hourly, forecast.timezone, point, now))
                condition_text = renderer.daily_text(condition, point, forecast.timezone)
            except Exception:
                logger.exception("Cannot get hourly text for condition %s", condition.topic)
                continue
            if condition_text:
                conditions[condition.topic] = render(condition_text, day)

    return ReportSection(
        data=hourly, conditions=conditions, forecast=render(join_sentences(text), day)
    )


def daily_point(
    daily: Sequence[ForecastPoint], day: date, tz: tzinfo
) -> ForecastPoint | None:
    for point in daily:
        if local_date(point.time, tz) == day:
            return point
    return None


def day_window(
    hourly: Sequence[ForecastPoint], requested: date, today: date, tz: tzinfo
) -> tuple[ForecastPoint, ...]:
    """The contiguous hourly points for today or tomorrow; empty otherwise.

    Today's window starts at the first (current) hour and runs until the
    date rolls over. Tomorrow's is found within the first 49 hours.
    """
    if requested == today:
        end = len(hourly)
        for i, point in enumerate(hourly):
            if local_date(point.time, tz) != requested:
                end = i
                break
        return tuple(hourly[:end])

    if requested == today + timedelta(days=1):
        start = end = None
        horizon = hourly[:HOURLY_HORIZON]
        for i, point in enumerate(horizon):
            same_day = local_date(point.time, tz) == requested
            if start is None and same_day:
                start = i
            elif start is not None and not same_day:
                end = i
                break
        if start is None:
            return ()
        return tuple(horizon[start:end])

    return ()
