"""Exceptions raised when a weather report cannot be produced."""


class FuzzyWeatherError(Exception):
    """Base exception for all fuzzy-weather errors."""


class ConfigurationError(FuzzyWeatherError):
    """Raised when the API key or coordinates are missing or invalid."""


class RequestedDateError(FuzzyWeatherError):
    """Raised when the requested date is unparseable or out of range."""


class ForecastFetchError(FuzzyWeatherError):
    """Raised when the forecast provider cannot be reached."""


class ForecastAPIError(FuzzyWeatherError):
    """Raised when the provider answers with a non-success status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(
            "There was a problem getting weather data: "
            f"received non-200 status code ({status_code})"
        )


class InvalidForecastDataError(FuzzyWeatherError):
    """Raised when the provider body is not a usable forecast."""
