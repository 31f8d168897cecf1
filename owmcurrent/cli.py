"""Command line entry point to fetch the current weather for one location."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from owmcurrent import settings
from owmcurrent.entities import WeatherObservation
from owmcurrent.errors import WeatherClientError
from owmcurrent.providers.base import RequestConfig
from owmcurrent.providers.current import CurrentWeatherClient


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="owm-current",
        description="Fetch the current weather from OpenWeatherMap and print it as JSON",
    )
    lookup = parser.add_mutually_exclusive_group(required=True)
    lookup.add_argument("--city", type=str, help="Location name, e.g. 'London,uk'")
    lookup.add_argument("--lat", type=float, help="Latitude (requires --lon)")
    lookup.add_argument("--id", type=int, dest="location_id", help="Location identifier")
    lookup.add_argument("--zip", type=str, help="Postal code (requires --country)")
    parser.add_argument("--lon", type=float, help="Longitude")
    parser.add_argument("--country", type=str, help="Country code for --zip")
    parser.add_argument("--units", default="metric", help="standard, metric or imperial (default: metric)")
    parser.add_argument("--lang", default="EN", help="Response language code (default: EN)")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    return parser


def fetch(client: CurrentWeatherClient, options: argparse.Namespace) -> WeatherObservation:
    if options.city is not None:
        return client.by_name(options.city)
    if options.lat is not None:
        return client.by_coordinates(options.lat, options.lon)
    if options.location_id is not None:
        return client.by_id(options.location_id)
    return client.by_zip(options.zip, options.country)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    options = parser.parse_args(argv)
    if options.lat is not None and options.lon is None:
        parser.error("--lat requires --lon")
    if options.lon is not None and options.lat is None:
        parser.error("--lon is only valid together with --lat")
    if options.zip is not None and not options.country:
        parser.error("--zip requires --country")

    try:
        level = "DEBUG" if options.verbose else settings.log_level()
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

        client = CurrentWeatherClient(
            options.units,
            options.lang,
            request_config=RequestConfig(timeout=options.timeout),
        )
        observation = fetch(client, options)
    except (WeatherClientError, ValueError) as exc:
        logger.debug("Lookup failed", exc_info=exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(observation.as_dict(), ensure_ascii=False))
    return 0


__all__ = ["build_parser", "fetch", "main"]
