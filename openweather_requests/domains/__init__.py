"""
Family Endpoint Tables

Each domain module holds the RequestType enum and the endpoint table of one
OpenWeather API family. Adding or removing a family touches one file here
and its builder module.
"""

from .air import AIR_ENDPOINTS, AirRequestType
from .uv import UV_ENDPOINTS, UVRequestType
from .weather import WEATHER_ENDPOINTS, TemperatureUnit, WeatherRequestType

__all__ = [
    "AIR_ENDPOINTS",
    "AirRequestType",
    "UV_ENDPOINTS",
    "UVRequestType",
    "WEATHER_ENDPOINTS",
    "TemperatureUnit",
    "WeatherRequestType",
]
