"""CLI entry point for fuzzy-weather."""

import argparse
import logging

from pydantic import ValidationError

from fuzzyweather.config.loader import load_config
from fuzzyweather.errors import FuzzyWeatherError
from fuzzyweather.pipeline.report_pipeline import FuzzyWeather
from fuzzyweather.report.formatters import format_report_json, format_report_text

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fuzzy-weather",
        description="Plain-English weather forecasts",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # report
    report_p = sub.add_parser("report", help="Print the forecast for a date")
    report_p.add_argument(
        "--date", default=None, help="Date to report on (default: today)"
    )
    report_p.add_argument(
        "--json", action="store_true", help="Print JSON instead of text"
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, ValidationError) as e:
        print(f"Error: invalid config: {e}")
        return 1

    if args.command == "report":
        return _cmd_report(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_report(config, args) -> int:
    weather = FuzzyWeather(config)
    try:
        report = weather.get_weather_for_date(args.date)
    except FuzzyWeatherError as e:
        logger.debug("Report failed", exc_info=True)
        print(f"Error: {e}")
        return 1
    if args.json:
        print(format_report_json(report))
    else:
        print(format_report_text(report))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2, exclude={"api_key"}))
        return 0
    print("Use: config show")
    return 1
