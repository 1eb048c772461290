"""Tests for YAML config loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from fuzzyweather.config.loader import API_KEY_ENV, load_config


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.api_key == "yaml-key"
        assert config.location.lat == 38.9
        assert config.thresholds.wind_break == 20
        assert config.thresholds.dew_point_break == 69

    def test_empty_yaml_uses_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV, raising=False)
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.api_key is None
        assert len(config.thresholds.avg_temps) == 12

    def test_no_path_uses_defaults(self, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV, raising=False)
        config = load_config()
        assert config.location.lat is None

    def test_api_key_from_environment(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "env-key")
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path).api_key == "env-key"

    def test_yaml_key_wins_over_environment(self, config_yaml_path: Path, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "env-key")
        assert load_config(config_yaml_path).api_key == "yaml-key"

    def test_invalid_yaml_values(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("thresholds:\n  humidity_break: 70\n")
        with pytest.raises(ValidationError):
            load_config(path)
