"""
Smoke run against the live API.

Reads the key from OPENWEATHER_API_KEY (a .env file in the working
directory is loaded first), builds one request, prints its URL with the
key redacted and then the JSON response::

    python -m openweather_requests air --lat 39.742043 --lon -104.991531
    python -m openweather_requests weather --city Denver --country us
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

import structlog
from dotenv import load_dotenv

from . import __version__
from .client import OpenWeatherClient
from .config import API_KEY_ENV_VAR
from .errors import OpenWeatherError
from .models import ClientConfig
from .request import BaseRequest
from .transport import redact

logger = structlog.get_logger()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openweather-requests",
        description="Send one OpenWeather request and print the JSON response",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--url-only", action="store_true", help="Print the URL without sending it")

    subparsers = parser.add_subparsers(dest="family", required=True)

    weather = subparsers.add_parser("weather", help="Current weather")
    weather.add_argument("--city", default="Denver")
    weather.add_argument("--country", default="us")
    weather.add_argument("--units", default="metric", choices=["metric", "standard", "imperial"])

    uv = subparsers.add_parser("uv", help="Current UV index")
    uv.add_argument("--lat", type=float, default=39.742043)
    uv.add_argument("--lon", type=float, default=-104.991531)

    air = subparsers.add_parser("air", help="Ozone for the current moment")
    air.add_argument("--lat", type=float, default=39.742043)
    air.add_argument("--lon", type=float, default=-104.991531)

    return parser


def build_request(client: OpenWeatherClient, args: argparse.Namespace) -> BaseRequest:
    if args.family == "weather":
        return client.weather.current().city(args.city, args.country).units(args.units)
    if args.family == "uv":
        return client.uv.current().coords(args.lat, args.lon)
    return client.air.ozone().coords(args.lat, args.lon)


async def run(args: argparse.Namespace) -> int:
    config = ClientConfig.from_env()

    async with OpenWeatherClient(config) as client:
        request = build_request(client, args)
        print(redact(request.url()))
        if args.url_only:
            return 0
        if not config.api_key:
            logger.error("openweather_missing_key", env_var=API_KEY_ENV_VAR)
            return 2
        try:
            data = await request.execute()
        except OpenWeatherError as e:
            logger.error("openweather_smoke_failed", category=e.failure_category, error=str(e))
            return 1
    print(json.dumps(data, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = create_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
