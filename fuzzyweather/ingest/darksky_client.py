"""Dark Sky compatible forecast API client."""

import logging

import httpx

from fuzzyweather.config.schema import DARKSKY_BASE_URL
from fuzzyweather.errors import (
    ForecastAPIError,
    ForecastFetchError,
    InvalidForecastDataError,
)

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "fuzzy-weather/0.1.0"


class DarkSkyClient:
    """Single-shot GET of the forecast for one location.

    No retries and, unless one is given, no timeout: callers that want
    either wrap ``get_forecast``.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DARKSKY_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def get_forecast(self, lat: float, lng: float) -> dict:
        """Fetch the raw forecast payload for a coordinate pair."""
        url = f"{self.base_url}/forecast/{self.api_key}/{lat},{lng}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("Error from forecast API call: %s", e)
            raise ForecastFetchError(f"Unable to reach the weather API: {e}") from e

        if resp.status_code > 299:
            logger.error(
                "Non-200 status code from weather API: %d %s",
                resp.status_code, resp.text,
            )
            raise ForecastAPIError(resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Invalid JSON data from weather API: %s", resp.text)
            raise InvalidForecastDataError("The API did not return valid data.") from e
        if not isinstance(data, dict):
            raise InvalidForecastDataError("The API did not return valid data.")
        return data
