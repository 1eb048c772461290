"""Shared test fixtures."""

import math
from datetime import datetime, timedelta
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
import yaml

from fuzzyweather.config.schema import FuzzyWeatherConfig, ThresholdConfig

TZ = "America/New_York"
START = "2018-07-01T07:01:00"
HOURLY_POINTS = 49
DAILY_POINTS = 8


def _temperature(hour: float, min_temp: float, max_temp: float, peak: int, curve: str) -> float:
    """Temperature at ``hour`` hours after the first local midnight.

    "normal" is a 24-hour cosine that tops out at ``peak``. "down" falls in a
    straight line from ``peak`` to the low at 11 pm (and mirrors that before
    the peak), then stays at the low.
    """
    span = max_temp - min_temp
    if curve == "down":
        return max_temp - span * min(1.0, abs(hour - peak) / (23 - peak))
    return min_temp + span * (1 + math.cos(2 * math.pi * (hour - peak) / 24)) / 2


def generate_payload(
    min_temp: float = 55,
    max_temp: float = 85,
    day_peak_hour: int = 14,
    day_curve: str = "normal",
    heat_index_percent: float = 0.0,
    start: str | datetime = START,
    timezone: str = TZ,
) -> dict:
    """A Dark Sky style payload starting at ``start`` (local wall time).

    Hourly data covers 49 hours from the top of the start hour; daily data
    covers 8 days from the start date's midnight. All other weather is calm.
    """
    tz = ZoneInfo(timezone)
    if isinstance(start, str):
        start = datetime.fromisoformat(start)
    start = start.replace(tzinfo=tz)
    midnight = start.replace(hour=0, minute=0, second=0, microsecond=0)
    first_hour = start.replace(minute=0, second=0, microsecond=0)

    calm = {
        "summary": "Clear.",
        "precipIntensity": 0,
        "precipProbability": 0,
        "humidity": 0.5,
        "dewPoint": 50,
        "windSpeed": 5,
        "cloudCover": 0.2,
        "visibility": 10,
    }

    hourly = []
    for i in range(HOURLY_POINTS):
        t = first_hour + timedelta(hours=i)
        hour = (t - midnight).total_seconds() / 3600
        temp = _temperature(hour, min_temp, max_temp, day_peak_hour, day_curve)
        hourly.append({
            **calm,
            "time": int(t.timestamp()),
            "temperature": temp,
            "apparentTemperature": temp * (1 + heat_index_percent),
        })

    daily = []
    for d in range(DAILY_POINTS):
        day = midnight + timedelta(days=d)
        daily.append({
            **calm,
            "time": int(day.timestamp()),
            "temperatureMin": min_temp,
            "temperatureMax": max_temp,
            "temperatureMaxTime": int((day + timedelta(hours=day_peak_hour)).timestamp()),
            "apparentTemperatureMin": min_temp * (1 + heat_index_percent),
            "apparentTemperatureMax": max_temp * (1 + heat_index_percent),
            "precipIntensityMax": 0,
            "precipIntensityMaxTime": int((day + timedelta(hours=15)).timestamp()),
        })

    return {
        "latitude": 38.9,
        "longitude": -77.03,
        "timezone": timezone,
        "currently": {**hourly[0], "time": int(start.timestamp())},
        "hourly": {"data": hourly},
        "daily": {"data": daily},
        "alerts": [],
    }


def local_epoch(iso: str, timezone: str = TZ) -> int:
    return int(datetime.fromisoformat(iso).replace(tzinfo=ZoneInfo(timezone)).timestamp())


@pytest.fixture
def make_payload():
    """Factory for synthetic forecast payloads with a controllable temperature curve."""
    return generate_payload


@pytest.fixture
def epoch():
    """Epoch seconds for a local wall time in the test zone."""
    return local_epoch


@pytest.fixture
def now() -> datetime:
    """2018-07-01 07:01 in the test zone, matching the default payload start."""
    return datetime.fromisoformat(START).replace(tzinfo=ZoneInfo(TZ))


@pytest.fixture
def thresholds() -> ThresholdConfig:
    return ThresholdConfig()


@pytest.fixture
def config() -> FuzzyWeatherConfig:
    return FuzzyWeatherConfig(
        api_key="test-key",
        location={"lat": 38.9, "lng": -77.03, "timezone": TZ},
        provider={"base_url": "https://test-darksky.example.com"},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api_key": "yaml-key",
        "location": {"lat": 38.9, "lng": -77.03, "timezone": TZ},
        "thresholds": {"wind_break": 20},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
