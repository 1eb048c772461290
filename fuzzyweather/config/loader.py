"""YAML config loader with environment fallback for the API key."""

import os
from pathlib import Path

import yaml

from fuzzyweather.config.schema import FuzzyWeatherConfig

API_KEY_ENV = "DARKSKY_API_KEY"


def load_config(path: str | Path | None = None) -> FuzzyWeatherConfig:
    """Load and validate config from a YAML file.

    A missing path or empty file yields the defaults. If no api_key is set
    in the YAML, DARKSKY_API_KEY from the environment is used.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if not raw.get("api_key") and os.environ.get(API_KEY_ENV):
        raw["api_key"] = os.environ[API_KEY_ENV]

    return FuzzyWeatherConfig(**raw)
