"""Report pipeline: validate the request, fetch the forecast, assemble the report."""

import logging
import math
import random
from collections.abc import Callable
from datetime import date, datetime, tzinfo

from dateutil import parser as date_parser

from fuzzyweather.conditions.base import Chooser
from fuzzyweather.config.schema import FuzzyWeatherConfig
from fuzzyweather.errors import ConfigurationError, RequestedDateError
from fuzzyweather.ingest.darksky_client import DarkSkyClient
from fuzzyweather.ingest.forecast_parser import parse_forecast
from fuzzyweather.models.common import utc_now, zone
from fuzzyweather.models.report import WeatherReport
from fuzzyweather.report.assembler import assemble_report

logger = logging.getLogger(__name__)

DateLike = date | datetime | str | int | float | None


class FuzzyWeather:
    """Entry point: one configured location, one report per call.

    The configuration is read-only after construction, so an instance can
    serve several callers.
    """

    def __init__(
        self,
        config: FuzzyWeatherConfig,
        client: DarkSkyClient | None = None,
        clock: Callable[[], datetime] = utc_now,
        choose: Chooser = random.choice,
    ):
        self.config = config
        self.client = client
        self.clock = clock
        self.choose = choose
        logger.debug("Setting up fuzzy-weather for %s", config.location)

    def get_weather_for_date(self, requested: DateLike = None) -> WeatherReport:
        """Get the weather report for a date (default: today).

        Raises:
            ConfigurationError: API key or coordinates missing.
            RequestedDateError: date unparseable, in the past or too far out.
            ForecastFetchError, ForecastAPIError, InvalidForecastDataError:
                the forecast could not be fetched or read.
        """
        logger.debug("Getting weather for %s", requested)
        self._check_config()

        now = self.clock()
        configured = self.config.location.timezone
        if configured is not None:
            # Bad requests fail before the API call when the zone is known.
            self._resolve_date(requested, now, zone(configured))
        else:
            parse_requested_date(requested, now, zone(None))

        location = self.config.location
        raw = self._get_client().get_forecast(location.lat, location.lng)
        forecast = parse_forecast(raw)

        # "Today" is always the forecast location's today.
        requested_date = self._resolve_date(requested, now, zone(forecast.timezone))
        return assemble_report(
            forecast, requested_date, now, self.config.thresholds, self.choose
        )

    def _resolve_date(self, requested: DateLike, now: datetime, tz: tzinfo) -> date:
        requested_date = parse_requested_date(requested, now, tz)
        check_date_range(
            requested_date, now.astimezone(tz).date(), self.config.max_lookahead_days
        )
        return requested_date

    def _check_config(self) -> None:
        if not self.config.api_key:
            raise ConfigurationError("No API key for Dark Sky provided")
        location = self.config.location
        if not _is_coordinate(location.lat) or not _is_coordinate(location.lng):
            logger.debug("lat/lng? %s %s", location.lat, location.lng)
            raise ConfigurationError(
                "Latitude and longitude must be provided and be numeric"
            )

    def _get_client(self) -> DarkSkyClient:
        if self.client is None:
            assert self.config.api_key is not None
            self.client = DarkSkyClient(
                api_key=self.config.api_key,
                base_url=self.config.provider.base_url,
                timeout=self.config.provider.timeout,
            )
        return self.client


def parse_requested_date(value: DateLike, now: datetime, tz: tzinfo) -> date:
    """Turn a date-like value into a calendar date in ``tz``.

    Numbers are epoch milliseconds; strings go through dateutil.
    """
    if value is None or value == "":
        return now.astimezone(tz).date()

    try:
        if isinstance(value, bool):
            raise TypeError(value)
        if isinstance(value, (int, float)):
            value = datetime.fromtimestamp(value / 1000, tz)
        elif isinstance(value, str):
            value = date_parser.parse(value)

        if isinstance(value, datetime):
            return value.astimezone(tz).date() if value.tzinfo else value.date()
        if isinstance(value, date):
            return value
        raise TypeError(value)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise RequestedDateError(
            "Please provide a valid date to check the weather for!"
        ) from e


def check_date_range(requested: date, today: date, max_days: int) -> None:
    if requested < today:
        raise RequestedDateError(
            f"Unable to get weather forecast for date in the past ({requested.isoformat()})"
        )
    if (requested - today).days > max_days:
        raise RequestedDateError(
            f"Only able to get weather for dates within {max_days} days of now "
            f"({requested.isoformat()})"
        )


def _is_coordinate(value: float | None) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )
