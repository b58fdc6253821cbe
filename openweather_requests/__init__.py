"""Fluent request builders for the OpenWeather weather, UV index and air pollution APIs."""

from . import air, uv, weather
from .air import AirClient, AirRequest
from .client import OpenWeatherClient
from .config import (
    API_KEY_ENV_VAR,
    HTTP_TIMEOUT_SECONDS,
    OPENWEATHER_BASE_URL,
    PACKAGE_VERSION,
)
from .domains import (
    AIR_ENDPOINTS,
    UV_ENDPOINTS,
    WEATHER_ENDPOINTS,
    AirRequestType,
    TemperatureUnit,
    UVRequestType,
    WeatherRequestType,
)
from .endpoints import Endpoint, NamedEnum
from .errors import (
    InvalidRequest,
    InvalidRequestOptions,
    InvalidRequestType,
    OpenWeatherError,
    ResponseDecodeError,
    TransportFailure,
    UpstreamFailure,
)
from .models import (
    AirOptions,
    CityLocation,
    ClientConfig,
    Coordinates,
    TimePeriod,
    UVOptions,
    WeatherOptions,
    ZipLocation,
)
from .request import BaseRequest, FamilyClient
from .transport import Transport
from .uv import UVClient, UVRequest
from .weather import WeatherClient, WeatherRequest

__version__ = PACKAGE_VERSION

__all__ = [
    # Family modules
    "weather",
    "uv",
    "air",
    # Builders and clients
    "BaseRequest",
    "FamilyClient",
    "WeatherRequest",
    "WeatherClient",
    "UVRequest",
    "UVClient",
    "AirRequest",
    "AirClient",
    "OpenWeatherClient",
    "Transport",
    # Endpoints
    "Endpoint",
    "NamedEnum",
    "WeatherRequestType",
    "TemperatureUnit",
    "UVRequestType",
    "AirRequestType",
    "WEATHER_ENDPOINTS",
    "UV_ENDPOINTS",
    "AIR_ENDPOINTS",
    # Config
    "API_KEY_ENV_VAR",
    "HTTP_TIMEOUT_SECONDS",
    "OPENWEATHER_BASE_URL",
    # Models
    "ClientConfig",
    "WeatherOptions",
    "UVOptions",
    "AirOptions",
    "Coordinates",
    "CityLocation",
    "ZipLocation",
    "TimePeriod",
    # Errors
    "OpenWeatherError",
    "InvalidRequestType",
    "InvalidRequestOptions",
    "InvalidRequest",
    "TransportFailure",
    "UpstreamFailure",
    "ResponseDecodeError",
    "__version__",
]
