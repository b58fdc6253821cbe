"""
OpenWeather UV index requests.

Three endpoints share the coordinates: CURRENT, FORECAST (``limit`` days)
and HISTORY (``limit`` plus a start/end UNIX time period). Setting a field
the active type does not use is accepted; the field is simply not sent.
"""

from __future__ import annotations

from typing import Any

from .domains.uv import UV_ENDPOINTS, UVRequestType
from .models import TimePeriod, UVOptions
from .request import _UNSET, BaseRequest, FamilyClient, format_number


class UVRequest(BaseRequest):
    family = "uv"
    request_type_enum = UVRequestType
    endpoints = UV_ENDPOINTS
    options_model = UVOptions

    @classmethod
    def _default_client(cls) -> FamilyClient[Any]:
        return default_client

    def _apply_options(self, options: UVOptions) -> None:
        self._limit = options.limit
        self._start = options.start
        self._end = options.end

    def limit(self, count: int | None = _UNSET) -> Any:
        """Get or set the number of returned days (FORECAST and HISTORY)."""
        if count is _UNSET:
            return self._limit
        self._limit = count
        return self

    def time_period(self, start: str | int | None = _UNSET, end: str | int | None = _UNSET) -> Any:
        """Get ``{"start", "end"}`` or set both UNIX timestamps (HISTORY only)."""
        if start is _UNSET and end is _UNSET:
            return TimePeriod(start=self._start, end=self._end)
        if start is _UNSET or end is _UNSET:
            raise TypeError("time_period() takes both start and end")
        self._start = start
        self._end = end
        return self

    def _fields(self) -> dict[str, Any]:
        return {
            "lat": format_number(self._lat),
            "lon": format_number(self._lon),
            "limit": format_number(self._limit),
            "start": format_number(self._start),
            "end": format_number(self._end),
        }

    def _missing_fields(self) -> list[str]:
        errors = super()._missing_fields()
        if self._type == UVRequestType.HISTORY and (self._start is None or self._end is None):
            errors.append("Missing time period: history requests need start and end")
        return errors


class UVClient(FamilyClient[UVRequest]):
    """UV index family client with its own default key."""

    request_class = UVRequest

    def current(self) -> UVRequest:
        return self._typed(UVRequestType.CURRENT)

    def forecast(self) -> UVRequest:
        return self._typed(UVRequestType.FORECAST)

    def history(self) -> UVRequest:
        return self._typed(UVRequestType.HISTORY)


# -----------------------------------------------------------------------------
# Module-level Default Client
# -----------------------------------------------------------------------------

default_client: UVClient = UVClient()


def default_key(appid: str | None = _UNSET) -> str | None:
    """Get the default UV key, or set it and return the new value."""
    return default_client.default_key(appid)


def current() -> UVRequest:
    return default_client.current()


def forecast() -> UVRequest:
    return default_client.forecast()


def history() -> UVRequest:
    return default_client.history()
