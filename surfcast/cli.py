"""CLI entry point for the surf forecast engine."""

import argparse
import asyncio
import json
import logging

from surfcast.config.loader import get_config_value, load_config
from surfcast.config.registry import SpotRegistry
from surfcast.errors import SurfcastError
from surfcast.pipeline.service import SurfService
from surfcast.reporting.formatters import (
    format_forecast_text,
    format_json,
    format_realtime_text,
    format_water_quality_text,
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="surfcast",
        description="Great Lakes surf forecasts and buoy conditions",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("spots", help="List known spots")

    for name, help_text in (
        ("forecast", "Hourly forecast for a spot"),
        ("realtime", "Latest buoy reading for a spot"),
        ("water-quality", "Beach water quality status for a spot"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--spot", default=None, help="Spot name (default: home spot)")
        p.add_argument("--json", action="store_true", help="Print JSON")

    cond_p = sub.add_parser("conditions", help="Forecast and realtime together")
    cond_p.add_argument("--spot", default=None, help="Spot name (default: home spot)")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. api.forecast_timeout")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "spots":
        return _cmd_spots(config)
    elif args.command == "config":
        return _cmd_config(config, args)

    service = SurfService(config)
    try:
        if args.command == "forecast":
            forecast = asyncio.run(service.get_forecast(args.spot))
            print(format_json(forecast) if args.json else format_forecast_text(forecast))
        elif args.command == "realtime":
            reading = asyncio.run(service.get_realtime(args.spot))
            print(format_json(reading) if args.json else format_realtime_text(reading))
        elif args.command == "water-quality":
            wq = asyncio.run(service.get_water_quality(args.spot))
            print(format_json(wq) if args.json else format_water_quality_text(wq))
        elif args.command == "conditions":
            print(json.dumps(asyncio.run(service.get_conditions(args.spot)), indent=2))
        else:
            parser.print_help()
            return 1
    except SurfcastError as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"Something went wrong: {e}")
        return 1
    return 0


def _cmd_spots(config) -> int:
    registry = SpotRegistry.from_config(config)
    for name in registry.names():
        spot = registry.get(name)
        marker = "*" if spot is registry.default else " "
        source = "buoy" if spot.has_buoy else "station"
        print(f"{marker} {name} ({spot.orientation.value}-facing, {source})")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    if args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        return 0
    print("Usage: surfcast config {show|get}")
    return 1
