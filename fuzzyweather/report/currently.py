"""Current conditions: what it's like outside right now."""

import logging
from datetime import date

from fuzzyweather.config.schema import ThresholdConfig
from fuzzyweather.models.common import local_date, zone
from fuzzyweather.models.forecast import Alert, Forecast, ForecastPoint
from fuzzyweather.models.report import ReportSection
from fuzzyweather.phrasing import clock_hour, join_sentences, percent, whole

logger = logging.getLogger(__name__)

RAIN_NOW_PROBABILITY = 0.8
FEELS_LIKE_MARGIN = 5.0
SPECIAL_STATEMENT = "special weather statement"
ADDITIONAL_INFO_MARKER = "For additional info"


def current_conditions(
    forecast: Forecast, requested: date, today: date, thresholds: ThresholdConfig
) -> ReportSection | None:
    """Build the "right now" report, or None when ``requested`` isn't today."""
    if requested != today:
        return None

    logger.debug("Getting current conditions for %s", requested)

    tz = zone(forecast.timezone)
    now = forecast.currently
    avg = thresholds.month_average(local_date(now.time, tz).month)
    text: list[str] = []
    conditions: dict[str, str] = {}

    if now.precip_probability > RAIN_NOW_PROBABILITY and now.precip_type:
        precip_text = f"There is {_intensity_now(now)} {now.precip_type} right now"
        text.append(precip_text)
        conditions[now.precip_type] = precip_text
    elif now.cloud_cover <= 0.1:
        text.append("It's sunny right now")
    elif now.cloud_cover < 0.4:
        text.append("It's mostly sunny right now")
    elif now.cloud_cover < thresholds.cloud_break:
        text.append("There are some clouds right now")
    else:
        cloud_text = "It's cloudy right now"
        text.append(cloud_text)
        conditions["clouds"] = cloud_text

    temp = f"and it's currently {whole(now.temperature)} degrees"
    if abs(now.apparent_temperature - now.temperature) > FEELS_LIKE_MARGIN:
        temp += f", but it feels like {whole(now.apparent_temperature)}"
    text.append(temp + ".")

    # Flags only, these have no renderer behind them.
    if (
        now.temperature > avg.high
        or now.apparent_temperature > avg.high + FEELS_LIKE_MARGIN
    ):
        conditions["heat"] = temp
    elif (
        now.temperature < avg.low
        or now.apparent_temperature < avg.low - FEELS_LIKE_MARGIN
    ):
        conditions["cold"] = temp

    if (
        now.dew_point >= thresholds.dew_point_break
        and now.humidity >= thresholds.humidity_break
    ):
        humid_text = f"It'll feel sticky as well with {percent(now.humidity)} percent humidity."
        text.append(humid_text)
        conditions["humidity"] = humid_text

    if now.wind_speed > thresholds.wind_break:
        wind_text = f"And the wind is up around {whole(now.wind_speed)} miles per hour."
        text.append(wind_text)
        conditions["wind"] = wind_text

    alerts = alert_texts(forecast.alerts, now.time, forecast.timezone)
    if len(alerts) > 1:
        text.append("There are multiple weather alerts:")
    elif alerts:
        text.append("There is a weather alert:")
    text.extend(alerts)

    section = ReportSection(data=now, conditions=conditions, forecast=join_sentences(text))
    logger.debug(section.forecast)
    return section


def alert_texts(alerts: tuple[Alert, ...], at: int, timezone: str) -> list[str]:
    """One sentence per distinct alert title active at ``at``."""
    tz = zone(timezone)
    seen: set[str] = set()
    texts: list[str] = []
    for alert in alerts:
        if not alert.is_active(at) or alert.title in seen:
            continue
        seen.add(alert.title)
        until = clock_hour(alert.expires, tz)
        if alert.title.lower() == SPECIAL_STATEMENT:
            description = alert.description.split(ADDITIONAL_INFO_MARKER, 1)[0].strip()
            texts.append(f"until {until}: {description}")
        else:
            texts.append(f"{alert.title} until {until}.")
    return texts


def _intensity_now(point: ForecastPoint) -> str:
    if point.precip_intensity > 0.7:
        return "extremely heavy"
    if point.precip_intensity > 0.2:
        return "heavy"
    if point.precip_intensity > 0.07:
        return "moderate"
    if point.precip_intensity > 0.01:
        return "light"
    return "very light" if point.precip_type == "snow" else "drizzling"
