"""Output formatters for weather reports."""

import json

from fuzzyweather.models.report import ReportSection, WeatherReport


def format_report_text(report: WeatherReport) -> str:
    """Plain text, one paragraph per available section."""
    lines = []
    for section in (report.currently, report.daily_summary, report.detail):
        if section is not None and section.forecast:
            lines.append(section.forecast)
    return "\n\n".join(lines)


def format_report_json(report: WeatherReport) -> str:
    """JSON for programmatic consumption (forecast text and conditions only)."""
    data = {
        "date": report.date.isoformat(),
        "currently": _section_dict(report.currently),
        "daily_summary": _section_dict(report.daily_summary),
        "detail": _section_dict(report.detail),
    }
    return json.dumps(data, indent=2)


def _section_dict(section: ReportSection | None) -> dict | None:
    if section is None:
        return None
    return {
        "forecast": section.forecast,
        "conditions": {str(k): v for k, v in section.conditions.items()},
    }
