"""Tests for report output formatters."""

import json
from datetime import date

from fuzzyweather.models.condition import Topic
from fuzzyweather.models.report import ReportSection, WeatherReport
from fuzzyweather.report.formatters import format_report_json, format_report_text


def _report() -> WeatherReport:
    return WeatherReport(
        date=date(2018, 7, 1),
        currently=ReportSection(
            data=None,
            conditions={"clouds": "It's cloudy right now"},
            forecast="It's cloudy right now and it's currently 72 degrees.",
        ),
        daily_summary=ReportSection(
            data=None,
            conditions={Topic.RAIN: "You should expect light rain."},
            forecast="It's going to be wet today. You should expect light rain.",
        ),
        detail=None,
    )


class TestFormatters:
    def test_text_skips_missing_sections(self):
        text = format_report_text(_report())
        assert text == (
            "It's cloudy right now and it's currently 72 degrees.\n\n"
            "It's going to be wet today. You should expect light rain."
        )

    def test_json(self):
        data = json.loads(format_report_json(_report()))
        assert data["date"] == "2018-07-01"
        assert data["detail"] is None
        assert data["currently"]["conditions"] == {"clouds": "It's cloudy right now"}
        assert data["daily_summary"]["conditions"] == {"rain": "You should expect light rain."}
