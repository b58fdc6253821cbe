"""
Centralized configuration for the OpenWeather request builders.

All API URLs, paths and constants in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import os

# -----------------------------------------------------------------------------
# API Base URL
# -----------------------------------------------------------------------------

OPENWEATHER_BASE_URL = os.environ.get(
    "OPENWEATHER_BASE_URL",
    "https://api.openweathermap.org",
)

# Name of the environment variable holding the API key
API_KEY_ENV_VAR = "OPENWEATHER_API_KEY"

# -----------------------------------------------------------------------------
# Endpoint Paths
# -----------------------------------------------------------------------------

WEATHER_CURRENT_PATH = "/data/2.5/weather"
WEATHER_FORECAST5_PATH = "/data/2.5/forecast"
WEATHER_FORECAST16_PATH = "/data/2.5/forecast/daily"

UV_CURRENT_PATH = "/data/2.5/uvi"
UV_FORECAST_PATH = "/data/2.5/uvi/forecast"
UV_HISTORY_PATH = "/data/2.5/uvi/history"

AIR_POLLUTION_PATH = "/pollution/v1/{pollutant}/{lat},{lon}/{datetime}.json"

# -----------------------------------------------------------------------------
# HTTP Configuration
# -----------------------------------------------------------------------------

HTTP_TIMEOUT_SECONDS = float(os.environ.get("OPENWEATHER_HTTP_TIMEOUT", "30.0"))

# Format used for air pollution timestamps when a datetime object is given
AIR_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# -----------------------------------------------------------------------------
# Package Metadata
# -----------------------------------------------------------------------------

PACKAGE_NAME = "openweather-requests"
PACKAGE_VERSION = "0.3.0"
USER_AGENT = f"{PACKAGE_NAME}/{PACKAGE_VERSION}"
