"""Report models returned to callers."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any


@dataclass(frozen=True)
class ReportSection:
    data: Any
    conditions: dict[str, str] = field(default_factory=dict)
    forecast: str | None = None


@dataclass(frozen=True)
class WeatherReport:
    date: date
    currently: ReportSection | None
    daily_summary: ReportSection | None
    detail: ReportSection | None
