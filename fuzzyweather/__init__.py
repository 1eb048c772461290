"""fuzzy-weather: plain-English weather summaries from Dark Sky style forecasts."""

from fuzzyweather.pipeline.report_pipeline import FuzzyWeather

__all__ = ["FuzzyWeather"]

__version__ = "0.1.0"
