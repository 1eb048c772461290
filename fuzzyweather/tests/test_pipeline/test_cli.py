"""Tests for CLI commands."""

import json
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import httpx
import respx
import yaml

from fuzzyweather.cli import main
from fuzzyweather.config.loader import API_KEY_ENV


def _write_config(tmp_path: Path, **data) -> Path:
    path = tmp_path / "test.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        shown = json.loads(captured.out)
        assert shown["thresholds"]["wind_break"] == 20
        assert "api_key" not in shown

    def test_invalid_config(self, tmp_path: Path, capsys):
        path = _write_config(tmp_path, thresholds={"cloud_break": 5})
        assert main(["--config", str(path), "config", "show"]) == 1
        assert "invalid config" in capsys.readouterr().out

    def test_report_without_api_key(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV, raising=False)
        path = _write_config(tmp_path, location={"lat": 38.9, "lng": -77.03})
        assert main(["--config", str(path), "report"]) == 1
        assert "No API key" in capsys.readouterr().out

    def test_report_bad_date(self, config_yaml_path: Path, capsys):
        assert main(["--config", str(config_yaml_path), "report", "--date", "someday"]) == 1
        assert "valid date" in capsys.readouterr().out

    @respx.mock
    def test_report(self, tmp_path: Path, capsys, make_payload):
        tz = "America/New_York"
        path = _write_config(
            tmp_path,
            api_key="cli-key",
            location={"lat": 38.9, "lng": -77.03, "timezone": tz},
            provider={"base_url": "https://test-darksky.example.com"},
        )
        payload = make_payload(start=datetime.now(ZoneInfo(tz)).replace(tzinfo=None))
        respx.get("https://test-darksky.example.com/forecast/cli-key/38.9,-77.03").mock(
            return_value=httpx.Response(200, json=payload)
        )

        assert main(["--config", str(path), "report", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["currently"]["forecast"].endswith("degrees.")
        assert "The low today is 55 degrees" in data["daily_summary"]["forecast"]
