"""Classified weather conditions."""

from dataclasses import dataclass
from enum import StrEnum


class Topic(StrEnum):
    RAIN = "rain"
    SNOW = "snow"
    HEAT = "heat"
    HEAT_HUMID = "heat-humid"
    HUMIDITY = "humidity"
    COLD = "cold"
    COLD_WIND = "cold-wind"
    CLOUDS = "clouds"
    WIND = "wind"


@dataclass(frozen=True)
class Condition:
    topic: str
    probability: float
    level: float
