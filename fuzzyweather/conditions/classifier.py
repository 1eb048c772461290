"""Daily condition classifier: picks the one condition worth talking about."""

import logging
from datetime import tzinfo

from fuzzyweather.config.schema import ThresholdConfig
from fuzzyweather.models.common import local_date
from fuzzyweather.models.condition import Condition, Topic
from fuzzyweather.models.forecast import ForecastPoint

logger = logging.getLogger(__name__)

# Extra margin applied to apparent temperatures against the monthly average.
APPARENT_MARGIN = 5.0
# Humidity is only worth mentioning on its own near its break points.
HUMIDITY_BREAK_FACTOR = 0.90


def daily_conditions(
    point: ForecastPoint, thresholds: ThresholdConfig, tz: tzinfo
) -> list[Condition]:
    """Decide which conditions a daily forecast should report on.

    The rules form a priority chain: the first one that matches wins, so at
    most one condition comes back today. The result is still sorted by
    ``level`` (most severe first) so callers never depend on that.

    Args:
        point: A daily forecast record.
        thresholds: Break points and monthly averages for the location.
        tz: Zone used to pick the calendar month of the record.

    Returns:
        Conditions sorted by level, descending.
    """
    avg = thresholds.month_average(local_date(point.time, tz).month)
    conditions: list[Condition] = []

    humid = (
        point.dew_point > thresholds.dew_point_break
        or point.humidity > thresholds.humidity_break
    )
    windy = point.wind_speed > thresholds.wind_break

    # 1. Rain
    if (
        point.precip_type == "rain"
        and point.precip_probability > 0.1
        and point.precip_intensity_max > 0.01
    ):
        conditions.append(Condition(
            topic=Topic.RAIN,
            probability=point.precip_probability,
            level=point.precip_intensity_max * 20,
        ))

    # 2. Snow
    elif (
        point.precip_type == "snow"
        and point.precip_probability > 0.1
        and point.precip_intensity_max > 0.005
    ):
        level = 1 - point.visibility
        if level < 1:
            # visibility isn't telling us much, go by accumulation instead
            level = point.precip_accumulation
        conditions.append(Condition(
            topic=Topic.SNOW, probability=point.precip_probability, level=level
        ))

    # 3. Sleet, reported as snow
    elif (
        point.precip_type == "sleet"
        and point.precip_probability > 0.1
        and point.precip_intensity_max > 0.05
    ):
        conditions.append(Condition(
            topic=Topic.SNOW,
            probability=point.precip_probability,
            level=point.precip_accumulation * 10,
        ))

    # 4. Heat, possibly humid
    elif (
        point.temperature_max > avg.high
        or point.apparent_temperature_max > avg.high + APPARENT_MARGIN
    ):
        level = max(
            point.temperature_max - avg.high,
            point.apparent_temperature_max - avg.high,
        )
        if humid:
            level += (
                (point.dew_point - thresholds.dew_point_break)
                + (point.humidity - thresholds.humidity_break)
            ) / 2
        conditions.append(Condition(
            topic=Topic.HEAT_HUMID if humid else Topic.HEAT,
            probability=1.0,
            level=level,
        ))

    # 5. Humidity
    elif (
        point.dew_point > thresholds.dew_point_break * HUMIDITY_BREAK_FACTOR
        and point.humidity > thresholds.humidity_break * HUMIDITY_BREAK_FACTOR
    ):
        conditions.append(Condition(
            topic=Topic.HUMIDITY,
            probability=1.0,
            level=(point.dew_point - thresholds.dew_point_break)
            + (point.humidity - thresholds.humidity_break),
        ))

    # 6. Cold, possibly windy
    elif (
        point.temperature_min < avg.low
        or point.apparent_temperature_min < avg.low - APPARENT_MARGIN
    ):
        level = max(
            avg.low - point.temperature_min,
            avg.low - point.apparent_temperature_min,
        )
        if windy:
            level += (point.wind_speed - thresholds.wind_break) / 5
        conditions.append(Condition(
            topic=Topic.COLD_WIND if windy else Topic.COLD,
            probability=1.0,
            level=level,
        ))

    # 7. Clouds
    elif point.cloud_cover > thresholds.cloud_break:
        conditions.append(Condition(
            topic=Topic.CLOUDS,
            probability=1.0,
            level=(point.cloud_cover - thresholds.cloud_break) * 50,
        ))

    # 8. Wind
    elif windy:
        conditions.append(Condition(
            topic=Topic.WIND,
            probability=1.0,
            level=(point.wind_speed - thresholds.wind_break) / 2,
        ))

    conditions.sort(key=lambda c: c.level, reverse=True)
    logger.debug("Daily conditions for %d: %s", point.time, conditions)
    return conditions
