"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from weather_manager import __version__
from weather_manager.config import get_settings
from weather_manager.datasources.weather import (
    fetch_forecast,
    fetch_forecast_for,
    fetch_historical,
    fetch_historical_for,
)
from weather_manager.errors import RequestError, WeatherManagerError
from weather_manager.export import export_csv, export_json
from weather_manager.locations import LocationRegistry, format_location
from weather_manager.logging_config import setup_logging
from weather_manager.menu import VariableMenu
from weather_manager.schemas import Location
from weather_manager.services.http import close_session
from weather_manager.variables import VariableStore, format_variable

DEMO_HISTORY_DATE = date(2024, 9, 10)


def _parse_assignment(text: str) -> tuple[str, float]:
    """Parse ``NAME=VALUE`` for ``export --set``."""
    name, sep, raw_value = text.partition("=")
    name = name.strip()
    if not sep or not name:
        msg = f"expected NAME=VALUE, got {text!r}"
        raise argparse.ArgumentTypeError(msg)
    try:
        value = float(raw_value)
    except ValueError:
        msg = f"value for {name!r} is not a number: {raw_value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if not math.isfinite(value):
        msg = f"value for {name!r} must be finite: {raw_value!r}"
        raise argparse.ArgumentTypeError(msg)
    return name, value


def _add_coordinate_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=None, help="Latitude (default: settings)")
    parser.add_argument("--lon", type=float, default=None, help="Longitude (default: settings)")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-manager",
        description="Manage locations and weather variables, fetch Open-Meteo data, export",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    demo_parser = subparsers.add_parser(
        "demo", help="Add a location and a variable, fetch weather, export"
    )
    demo_parser.add_argument("--csv", type=Path, default=None, help="CSV output path")
    demo_parser.add_argument("--json", type=Path, default=None, help="JSON output path")

    forecast_parser = subparsers.add_parser("forecast", help="Fetch the raw weather forecast")
    _add_coordinate_args(forecast_parser)

    history_parser = subparsers.add_parser("history", help="Fetch raw historical weather")
    _add_coordinate_args(history_parser)
    history_parser.add_argument(
        "--date",
        type=date.fromisoformat,
        required=True,
        help="Day to fetch (YYYY-MM-DD)",
    )

    export_parser = subparsers.add_parser("export", help="Export variables to CSV and/or JSON")
    export_parser.add_argument(
        "--set",
        dest="assignments",
        metavar="NAME=VALUE",
        type=_parse_assignment,
        action="append",
        default=[],
        help="Variable to export (repeatable)",
    )
    export_parser.add_argument("--csv", type=Path, default=None, help="CSV output path")
    export_parser.add_argument("--json", type=Path, default=None, help="JSON output path")

    subparsers.add_parser("variables", help="Interactive variable manager")

    return parser


def _coordinates(args: argparse.Namespace) -> tuple[float, float]:
    settings = get_settings()
    lat = args.lat if args.lat is not None else settings.lat
    lon = args.lon if args.lon is not None else settings.lon
    return lat, lon


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Forecast endpoint: {settings.forecast_url}")
    print(f"History endpoint: {settings.history_url}")
    print(f"HTTP timeout: {settings.http_timeout}s")
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    """Handle the 'demo' command.

    Fetch failures are reported and the demo carries on, so the export step
    always runs.
    """
    settings = get_settings()
    locations = LocationRegistry()
    variables = VariableStore()

    city = Location(name="CityA", latitude=settings.lat, longitude=settings.lon)
    locations.add(city)
    _print_locations(locations)

    variables.define("Temperature", 75.0)
    _print_variables(variables)

    try:
        print(f"Weather Data: {fetch_forecast_for(city)}")
    except RequestError as e:
        print(f"Error: {e}", file=sys.stderr)

    try:
        print(f"Historical Data: {fetch_historical_for(city, DEMO_HISTORY_DATE)}")
    except RequestError as e:
        print(f"Error: {e}", file=sys.stderr)

    record = variables.as_dict()
    csv_path = export_csv(args.csv or settings.csv_path, record)
    json_path = export_json(args.json or settings.json_path, record)
    print(f"Exported to {csv_path} and {json_path}")
    return 0


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    lat, lon = _coordinates(args)
    print(f"Weather Data: {fetch_forecast(lat, lon)}")
    return 0


def cmd_history(args: argparse.Namespace) -> int:
    """Handle the 'history' command."""
    lat, lon = _coordinates(args)
    print(f"Historical Data: {fetch_historical(lat, lon, args.date)}")
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Handle the 'export' command."""
    if args.csv is None and args.json is None:
        print("Nothing to export: pass --csv and/or --json.", file=sys.stderr)
        return 1

    variables = VariableStore()
    for name, value in args.assignments:
        variables.define(name, value)
    record = variables.as_dict()

    if args.csv is not None:
        print(f"Wrote {export_csv(args.csv, record)}")
    if args.json is not None:
        print(f"Wrote {export_json(args.json, record)}")
    return 0


def cmd_variables(_args: argparse.Namespace) -> int:
    """Handle the 'variables' command: run the interactive menu."""
    VariableMenu(VariableStore()).run()
    return 0


def _print_locations(locations: LocationRegistry) -> None:
    view = locations.list()
    if not view:
        print("No locations defined.")
        return
    for loc in view:
        print(format_location(loc))


def _print_variables(variables: VariableStore) -> None:
    items = variables.list()
    if not items:
        print("No weather variables defined.")
        return
    for name, value in items:
        print(format_variable(name, value))


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1
    setup_logging(logging.DEBUG if args.debug or settings.debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "demo": cmd_demo,
        "forecast": cmd_forecast,
        "history": cmd_history,
        "export": cmd_export,
        "variables": cmd_variables,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except WeatherManagerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        close_session()


if __name__ == "__main__":
    sys.exit(main())
