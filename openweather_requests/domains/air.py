"""
OpenWeather Air Pollution Domain (beta API)

https://openweathermap.org/api/pollution/o3
https://openweathermap.org/api/pollution/co
https://openweathermap.org/api/pollution/so2
https://openweathermap.org/api/pollution/no2

All four pollutants share one path template; the pollutant name, the
coordinates and the timestamp are path parameters. Responses are JSON only.
"""

from __future__ import annotations

from ..config import AIR_POLLUTION_PATH
from ..endpoints import Endpoint, NamedEnum


class AirRequestType(NamedEnum):
    """Pollutants measured by the air pollution API."""

    O3 = "o3"  # ozone
    CO = "co"  # carbon monoxide
    SO2 = "so2"  # sulfur dioxide
    NO2 = "no2"  # nitrogen dioxide


def _pollutant_endpoint(pollutant: AirRequestType, description: str) -> Endpoint:
    return Endpoint(
        request_type=pollutant,
        path=AIR_POLLUTION_PATH,
        description=description,
        path_params=["pollutant", "lat", "lon", "datetime"],
        key_param="appid",
    )


AIR_ENDPOINTS: dict[AirRequestType, Endpoint] = {
    AirRequestType.O3: _pollutant_endpoint(AirRequestType.O3, "Ozone data."),
    AirRequestType.CO: _pollutant_endpoint(AirRequestType.CO, "Carbon monoxide data."),
    AirRequestType.SO2: _pollutant_endpoint(AirRequestType.SO2, "Sulfur dioxide data."),
    AirRequestType.NO2: _pollutant_endpoint(AirRequestType.NO2, "Nitrogen dioxide data."),
}
