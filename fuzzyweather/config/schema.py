"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

from fuzzyweather.config.defaults import DC_AVG_TEMPS

DARKSKY_BASE_URL = "https://api.darksky.net"


class MonthlyAverage(BaseModel):
    model_config = {"extra": "forbid"}

    high: float
    low: float


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    lat: float | None = None
    lng: float | None = None
    timezone: str | None = None  # None = host local zone


class ThresholdConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    avg_temps: list[MonthlyAverage] = Field(
        default_factory=lambda: [MonthlyAverage(**m) for m in DC_AVG_TEMPS]
    )
    dew_point_break: float = 69.0
    humidity_break: float = Field(default=0.70, ge=0.0, le=1.0)
    wind_break: float = Field(default=15.0, ge=0.0)
    cloud_break: float = Field(default=0.65, ge=0.0, le=1.0)
    work_day_end_hour: int = Field(default=17, ge=0, le=23)

    @field_validator("avg_temps")
    @classmethod
    def _one_per_month(cls, v: list[MonthlyAverage]) -> list[MonthlyAverage]:
        if len(v) != 12:
            raise ValueError(f"avg_temps needs one entry per month, got {len(v)}")
        return v

    def month_average(self, month: int) -> MonthlyAverage:
        """Averages for a calendar month (1 = January)."""
        return self.avg_temps[month - 1]


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = DARKSKY_BASE_URL
    timeout: float | None = Field(default=None, gt=0.0)  # None = no timeout


class FuzzyWeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str | None = None
    location: LocationConfig = LocationConfig()
    thresholds: ThresholdConfig = ThresholdConfig()
    provider: ProviderConfig = ProviderConfig()
    max_lookahead_days: int = Field(default=7, ge=0, le=7)
