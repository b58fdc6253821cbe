"""
OpenWeather UV Index Domain

https://openweathermap.org/api/uvi

This domain provides:
- Current UV index
- UV index forecast (limit = number of days)
- Historical UV index over a start/end UNIX time period
"""

from __future__ import annotations

from ..config import UV_CURRENT_PATH, UV_FORECAST_PATH, UV_HISTORY_PATH
from ..endpoints import Endpoint, NamedEnum


class UVRequestType(NamedEnum):
    """UV index endpoints supported by the builders."""

    CURRENT = "current"
    FORECAST = "forecast"
    HISTORY = "history"


UV_ENDPOINTS: dict[UVRequestType, Endpoint] = {
    UVRequestType.CURRENT: Endpoint(
        request_type=UVRequestType.CURRENT,
        path=UV_CURRENT_PATH,
        description="Current UV index for coordinates.",
        query_params={"lat": "lat", "lon": "lon"},
    ),
    UVRequestType.FORECAST: Endpoint(
        request_type=UVRequestType.FORECAST,
        path=UV_FORECAST_PATH,
        description="UV index forecast for coordinates.",
        query_params={"lat": "lat", "lon": "lon", "limit": "limit"},
    ),
    UVRequestType.HISTORY: Endpoint(
        request_type=UVRequestType.HISTORY,
        path=UV_HISTORY_PATH,
        description="Historical UV index for coordinates over a time period.",
        query_params={
            "lat": "lat",
            "lon": "lon",
            "limit": "limit",
            "start": "start",
            "end": "end",
        },
    ),
}
