"""Interface shared by the per-topic condition renderers."""

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Protocol

from fuzzyweather.models.condition import Condition
from fuzzyweather.models.forecast import ForecastPoint

Chooser = Callable[[Sequence[str]], str]


class Renderer(Protocol):
    """A renderer turns one condition topic into sentences.

    Text may carry ``{day}``/``{Day}`` placeholders; the caller fills them.
    """

    def headline(self, choose: Chooser = ...) -> str: ...

    def daily_text(
        self, condition: Condition, point: ForecastPoint, timezone: str
    ) -> str: ...

    def hourly_text(
        self,
        hourly: Sequence[ForecastPoint],
        timezone: str,
        daily: ForecastPoint | None = None,
        now: datetime | None = None,
    ) -> str: ...
