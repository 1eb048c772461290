"""Convert a raw provider payload into immutable forecast records."""

import logging

from fuzzyweather.errors import InvalidForecastDataError
from fuzzyweather.models.forecast import Alert, Forecast, ForecastPoint, PointKind

logger = logging.getLogger(__name__)

# provider key -> ForecastPoint field
_FIELDS = {
    "summary": "summary",
    "temperature": "temperature",
    "apparentTemperature": "apparent_temperature",
    "temperatureMin": "temperature_min",
    "temperatureMax": "temperature_max",
    "temperatureMaxTime": "temperature_max_time",
    "apparentTemperatureMin": "apparent_temperature_min",
    "apparentTemperatureMax": "apparent_temperature_max",
    "precipType": "precip_type",
    "precipIntensity": "precip_intensity",
    "precipIntensityMax": "precip_intensity_max",
    "precipIntensityMaxTime": "precip_intensity_max_time",
    "precipProbability": "precip_probability",
    "precipAccumulation": "precip_accumulation",
    "humidity": "humidity",
    "dewPoint": "dew_point",
    "windSpeed": "wind_speed",
    "cloudCover": "cloud_cover",
    "visibility": "visibility",
}


def parse_point(raw: dict, kind: PointKind) -> ForecastPoint:
    values = {attr: raw[key] for key, attr in _FIELDS.items() if raw.get(key) is not None}
    return ForecastPoint(time=int(raw["time"]), kind=kind, **values)


def parse_alert(raw: dict) -> Alert:
    return Alert(
        title=raw.get("title", ""),
        description=raw.get("description", ""),
        time=int(raw["time"]),
        expires=int(raw["expires"]),
    )


def parse_forecast(raw: dict) -> Forecast:
    """Build a Forecast from the provider's JSON payload.

    Field values are taken as given; only structural problems (missing
    sections or timestamps) are reported.
    """
    try:
        return Forecast(
            timezone=raw["timezone"],
            currently=parse_point(raw["currently"], PointKind.CURRENT),
            hourly=tuple(
                parse_point(p, PointKind.HOURLY)
                for p in raw.get("hourly", {}).get("data", [])
            ),
            daily=tuple(
                parse_point(p, PointKind.DAILY)
                for p in raw.get("daily", {}).get("data", [])
            ),
            alerts=tuple(parse_alert(a) for a in raw.get("alerts", [])),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.error("Malformed forecast payload: %r", e)
        raise InvalidForecastDataError("The API did not return valid data.") from e
