"""
OpenWeather Weather Domain

Current weather and forecast endpoints.
https://openweathermap.org/current
https://openweathermap.org/forecast5
https://openweathermap.org/forecast16
"""

from __future__ import annotations

from ..config import (
    WEATHER_CURRENT_PATH,
    WEATHER_FORECAST16_PATH,
    WEATHER_FORECAST5_PATH,
)
from ..endpoints import Endpoint, NamedEnum


class WeatherRequestType(NamedEnum):
    """Weather endpoints supported by the builders."""

    CURRENT = "current"
    FORECAST5 = "forecast"  # 5 day / 3 hour
    FORECAST = "forecast"  # alias of FORECAST5
    FORECAST16 = "forecast16"  # 16 day / daily


class TemperatureUnit(NamedEnum):
    METRIC = "metric"
    STANDARD = "standard"  # kelvin
    IMPERIAL = "imperial"


# Every weather endpoint takes the same parameters
_WEATHER_QUERY_PARAMS: dict[str, str] = {
    "city_id": "id",
    "city": "q",
    "zip_code": "zip",
    "lat": "lat",
    "lon": "lon",
    "limit": "cnt",
    "units": "units",
    "language": "lang",
}


WEATHER_ENDPOINTS: dict[WeatherRequestType, Endpoint] = {
    WeatherRequestType.CURRENT: Endpoint(
        request_type=WeatherRequestType.CURRENT,
        path=WEATHER_CURRENT_PATH,
        description="Current weather for one location.",
        query_params=_WEATHER_QUERY_PARAMS,
        fixed_params={"mode": "json"},
    ),
    WeatherRequestType.FORECAST5: Endpoint(
        request_type=WeatherRequestType.FORECAST5,
        path=WEATHER_FORECAST5_PATH,
        description="5 day forecast in 3 hour steps.",
        query_params=_WEATHER_QUERY_PARAMS,
        fixed_params={"mode": "json"},
    ),
    WeatherRequestType.FORECAST16: Endpoint(
        request_type=WeatherRequestType.FORECAST16,
        path=WEATHER_FORECAST16_PATH,
        description="Daily forecast for up to 16 days.",
        query_params=_WEATHER_QUERY_PARAMS,
        fixed_params={"mode": "json"},
    ),
}
