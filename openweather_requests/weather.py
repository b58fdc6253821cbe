"""
OpenWeather current weather and forecast requests.

Example::

    from openweather_requests import weather
    from openweather_requests.domains import TemperatureUnit

    weather.default_key("my-api-key")
    data = await (
        weather.current()
        .city("Austin", "us")
        .units(TemperatureUnit.IMPERIAL)
        .execute()
    )

A request can be located by city id, city name, zip code or coordinates.
When more than one is set, the one set last is sent.
"""

from __future__ import annotations

from typing import Any

from .domains.weather import WEATHER_ENDPOINTS, TemperatureUnit, WeatherRequestType
from .models import CityLocation, WeatherOptions, ZipLocation
from .request import _UNSET, BaseRequest, FamilyClient, format_number


def _with_country(value: str | None, country: str | None) -> str | None:
    if value is None:
        return None
    return f"{value},{country}" if country else str(value)


class WeatherRequest(BaseRequest):
    """Builder for the /data/2.5/weather and /data/2.5/forecast endpoints."""

    family = "weather"
    request_type_enum = WeatherRequestType
    endpoints = WEATHER_ENDPOINTS
    options_model = WeatherOptions

    @classmethod
    def _default_client(cls) -> FamilyClient[Any]:
        return default_client

    def _apply_options(self, options: WeatherOptions) -> None:
        self._city_id = options.city_id
        self._city = options.city
        self._city_country = options.country
        self._zip = options.zip_code
        self._zip_country = options.country
        self._limit = options.limit
        self._units = options.units
        self._language = options.language

        self._location: str | None = None
        if options.lat is not None and options.lon is not None:
            self._location = "coords"
        for kind, value in (("city_id", self._city_id), ("city", self._city), ("zip_code", self._zip)):
            if value is not None:
                self._location = kind

    def _mark_location(self, kind: str) -> None:
        self._location = kind

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def city_id(self, city_id: str | int | None = _UNSET) -> Any:
        """Get or set the OpenWeather city id."""
        if city_id is _UNSET:
            return self._city_id
        self._city_id = city_id
        self._mark_location("city_id")
        return self

    def city(self, name: str | None = _UNSET, country: str | None = _UNSET) -> Any:
        """
        Get ``{"city", "country"}`` or set the city name.

        Setting the name alone keeps the previously set country.
        """
        if name is _UNSET:
            return CityLocation(city=self._city, country=self._city_country)
        self._city = name
        if country is not _UNSET:
            self._city_country = country
        self._mark_location("city")
        return self

    def zip_code(self, code: str | int | None = _UNSET, country: str | None = _UNSET) -> Any:
        """
        Get ``{"zip", "country"}`` or set the zip code.

        Setting the code alone keeps the previously set country.
        """
        if code is _UNSET:
            return ZipLocation(zip=self._zip, country=self._zip_country)
        self._zip = code
        if country is not _UNSET:
            self._zip_country = country
        self._mark_location("zip_code")
        return self

    def limit(self, count: int | None = _UNSET) -> Any:
        """Get or set the number of results (``cnt``)."""
        if count is _UNSET:
            return self._limit
        self._limit = count
        return self

    def units(self, unit: TemperatureUnit | None = _UNSET) -> Any:
        """Get or set the temperature unit."""
        if unit is _UNSET:
            return self._units
        self._units = unit
        return self

    def language(self, code: str | None = _UNSET) -> Any:
        """Get or set the ISO language code of descriptions."""
        if code is _UNSET:
            return self._language
        self._language = code
        return self

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def _fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "limit": format_number(self._limit),
            "units": None if self._units is None else TemperatureUnit.parse(self._units).value,
            "language": self._language,
        }

        if self._location == "city_id":
            fields["city_id"] = format_number(self._city_id)
        elif self._location == "city":
            fields["city"] = _with_country(self._city, self._city_country)
        elif self._location == "zip_code":
            fields["zip_code"] = _with_country(self._zip, self._zip_country)
        elif self._location == "coords" and self._lat is not None and self._lon is not None:
            fields["lat"] = format_number(self._lat)
            fields["lon"] = format_number(self._lon)
        return fields

    def _missing_fields(self) -> list[str]:
        fields = self._fields()
        if all(fields.get(name) is None for name in ("city_id", "city", "zip_code", "lat")):
            return ["Missing location: set city_id, city, zip_code or coords"]
        return []


class WeatherClient(FamilyClient[WeatherRequest]):
    """Weather family client with its own default key."""

    request_class = WeatherRequest

    def current(self) -> WeatherRequest:
        return self._typed(WeatherRequestType.CURRENT)

    def forecast(self) -> WeatherRequest:
        """5 day / 3 hour forecast."""
        return self._typed(WeatherRequestType.FORECAST5)

    def daily_forecast(self) -> WeatherRequest:
        """Daily forecast, up to 16 days."""
        return self._typed(WeatherRequestType.FORECAST16)


# -----------------------------------------------------------------------------
# Module-level Default Client
# -----------------------------------------------------------------------------

#: Backs the module-level factories and the process-wide default key.
default_client: WeatherClient = WeatherClient()


def default_key(appid: str | None = _UNSET) -> str | None:
    """Get the default weather key, or set it and return the new value."""
    return default_client.default_key(appid)


def current() -> WeatherRequest:
    return default_client.current()


def forecast() -> WeatherRequest:
    return default_client.forecast()


def daily_forecast() -> WeatherRequest:
    return default_client.daily_forecast()
