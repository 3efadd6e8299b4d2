# connects input (place -> query) to the service and prints the weather screen.

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .client import OpenWeatherClient
from .config import ConfigError, Settings, load_tz
from .location import StaticLocationResolver
from .models import Place
from .screen import render
from .service import fetch_weather


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weatherday", description="Current weather and a 5 day forecast")
    parser.add_argument("--city", help="city name (default: WEATHER_CITY or Cupertino)")
    parser.add_argument("--region", help="state or region (default: WEATHER_REGION or CA)")
    parser.add_argument("--night", action="store_true", help="render with the night theme")
    parser.add_argument("--tz", help="IANA time zone used to bucket forecast days (default: WEATHER_TZ or UTC)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
        tz = load_tz(args.tz) if args.tz else settings.tz
    except ConfigError as exc:
        print(f"weatherday: {exc}", file=sys.stderr)
        return 2

    place = Place(
        city=args.city or settings.place.city,
        region=args.region if args.region is not None else settings.place.region,
    )
    client = OpenWeatherClient(settings.api_key, units=settings.units, country=settings.country)

    # only the first resolved place triggers a fetch
    place = StaticLocationResolver(place).resolve()

    report = fetch_weather(client, place, tz=tz)
    print(render(report, night=args.night))
    return 0


if __name__ == "__main__":
    sys.exit(main())
