"""Forecast data models parsed from the provider payload."""

from dataclasses import dataclass
from enum import StrEnum


class PointKind(StrEnum):
    CURRENT = "currently"
    HOURLY = "hourly"
    DAILY = "daily"


@dataclass(frozen=True)
class ForecastPoint:
    """One currently/hourly/daily record. Times are epoch seconds."""

    time: int
    kind: PointKind
    summary: str = ""
    temperature: float | None = None
    apparent_temperature: float | None = None
    temperature_min: float | None = None
    temperature_max: float | None = None
    temperature_max_time: int | None = None
    apparent_temperature_min: float | None = None
    apparent_temperature_max: float | None = None
    precip_type: str | None = None
    precip_intensity: float = 0.0
    precip_intensity_max: float = 0.0
    precip_intensity_max_time: int | None = None
    precip_probability: float = 0.0
    precip_accumulation: float = 0.0
    humidity: float = 0.0
    dew_point: float = 0.0
    wind_speed: float = 0.0
    cloud_cover: float = 0.0
    visibility: float = 10.0


@dataclass(frozen=True)
class Alert:
    title: str
    description: str
    time: int
    expires: int

    def is_active(self, at: int) -> bool:
        return self.time <= at < self.expires


@dataclass(frozen=True)
class Forecast:
    timezone: str
    currently: ForecastPoint
    hourly: tuple[ForecastPoint, ...] = ()
    daily: tuple[ForecastPoint, ...] = ()
    alerts: tuple[Alert, ...] = ()
