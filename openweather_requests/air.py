"""
OpenWeather air pollution requests (beta API).

The pollutant, the coordinates and the timestamp are all part of the path::

    /pollution/v1/o3/{lat},{lon}/{datetime}.json?appid=...

``datetime`` defaults to the moment the request was built. It may be an
ISO-8601 string, passed through as is, or a ``datetime`` rendered in UTC.
"""

from __future__ import annotations

from datetime import datetime as dt
from datetime import timezone
from typing import Any

from .config import AIR_DATETIME_FORMAT
from .domains.air import AIR_ENDPOINTS, AirRequestType
from .errors import InvalidRequestType
from .models import AirOptions
from .request import _UNSET, BaseRequest, FamilyClient, format_number


def format_datetime(value: str | dt | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(AIR_DATETIME_FORMAT)


class AirRequest(BaseRequest):
    family = "air"
    request_type_enum = AirRequestType
    endpoints = AIR_ENDPOINTS
    options_model = AirOptions

    @classmethod
    def _default_client(cls) -> FamilyClient[Any]:
        return default_client

    def _apply_options(self, options: AirOptions) -> None:
        if options.datetime is None:
            self._datetime: str | dt | None = format_datetime(dt.now(timezone.utc))
        else:
            self._datetime = options.datetime

    def datetime(self, time: str | dt | None = _UNSET) -> Any:
        """Get or set the measurement timestamp."""
        if time is _UNSET:
            return self._datetime
        self._datetime = time
        return self

    def _fields(self) -> dict[str, Any]:
        try:
            pollutant: str | None = AirRequestType.parse(self._type).value
        except InvalidRequestType:
            pollutant = None
        return {
            "pollutant": pollutant,
            "lat": format_number(self._lat),
            "lon": format_number(self._lon),
            "datetime": format_datetime(self._datetime),
        }

    def _missing_fields(self) -> list[str]:
        # Location and timestamp are path params, checked by the endpoint
        return []


class AirClient(FamilyClient[AirRequest]):
    """Air pollution family client with its own default key."""

    request_class = AirRequest

    def ozone(self) -> AirRequest:
        return self._typed(AirRequestType.O3)

    def carbon_monoxide(self) -> AirRequest:
        return self._typed(AirRequestType.CO)

    def sulfur_dioxide(self) -> AirRequest:
        return self._typed(AirRequestType.SO2)

    def nitrogen_dioxide(self) -> AirRequest:
        return self._typed(AirRequestType.NO2)


# -----------------------------------------------------------------------------
# Module-level Default Client
# -----------------------------------------------------------------------------

default_client: AirClient = AirClient()


def default_key(appid: str | None = _UNSET) -> str | None:
    """Get the default air pollution key, or set it and return the new value."""
    return default_client.default_key(appid)


def ozone() -> AirRequest:
    return default_client.ozone()


def carbon_monoxide() -> AirRequest:
    return default_client.carbon_monoxide()


def sulfur_dioxide() -> AirRequest:
    return default_client.sulfur_dioxide()


def nitrogen_dioxide() -> AirRequest:
    return default_client.nitrogen_dioxide()
