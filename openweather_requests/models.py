"""
Request Parameter Models

Pydantic records for the flat configuration used to seed a request, the
client configuration, and TypedDict shapes for composite accessor values.
"""

from __future__ import annotations

import os
from datetime import datetime as dt
from typing import Any, TypedDict

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .config import API_KEY_ENV_VAR, HTTP_TIMEOUT_SECONDS, OPENWEATHER_BASE_URL
from .domains import AirRequestType, TemperatureUnit, UVRequestType, WeatherRequestType


# -----------------------------------------------------------------------------
# TypedDict Definitions for Composite Accessors
# -----------------------------------------------------------------------------


class Coordinates(TypedDict):
    lat: float | None
    lon: float | None


class CityLocation(TypedDict):
    city: str | None
    country: str | None


class ZipLocation(TypedDict):
    zip: str | None
    country: str | None


class TimePeriod(TypedDict):
    """UNIX timestamps bounding a UV history request."""

    start: str | None
    end: str | None


# -----------------------------------------------------------------------------
# Client Configuration
# -----------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """
    Configuration owned by one family client.

    api_key is the client's default key: requests built without an explicit
    key fall back to it. strict turns on eager validation before execute().
    """

    model_config = ConfigDict(extra="forbid")

    api_key: str | None = None
    base_url: str = OPENWEATHER_BASE_URL
    timeout: float = Field(default=HTTP_TIMEOUT_SECONDS, gt=0)
    strict: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """Build a config with the API key read from the environment."""
        values: dict[str, Any] = {"api_key": os.environ.get(API_KEY_ENV_VAR)}
        values.update(overrides)
        return cls(**values)


# -----------------------------------------------------------------------------
# Request Options
# -----------------------------------------------------------------------------


class _RequestOptions(BaseModel):
    """Fields shared by every family."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    appid: str | None = Field(default=None, validation_alias=AliasChoices("appid", "key"))
    lat: int | float | None = None
    lon: int | float | None = None


class WeatherOptions(_RequestOptions):
    """
    Seed values for a WeatherRequest.

    Location forms (city_id, city, zip_code, lat/lon) are all optional; when
    several are given the last one in this field order wins.
    """

    type: WeatherRequestType | None = None
    city_id: str | None = Field(default=None, validation_alias=AliasChoices("city_id", "cityId", "id"))
    city: str | None = None
    zip_code: str | None = Field(default=None, validation_alias=AliasChoices("zip_code", "zip"))
    country: str | None = None
    limit: int | None = Field(default=None, ge=1, validation_alias=AliasChoices("limit", "cnt"))
    units: TemperatureUnit | None = None
    language: str | None = Field(default=None, validation_alias=AliasChoices("language", "lang"))

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        return None if value is None else WeatherRequestType.parse(value)

    @field_validator("units", mode="before")
    @classmethod
    def _parse_units(cls, value: Any) -> Any:
        return None if value is None else TemperatureUnit.parse(value)

    @field_validator("city_id", "zip_code", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class UVOptions(_RequestOptions):
    """Seed values for a UVRequest. start/end only apply to HISTORY."""

    type: UVRequestType | None = None
    limit: int | None = Field(default=None, ge=1, validation_alias=AliasChoices("limit", "cnt"))
    start: str | None = None
    end: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        return None if value is None else UVRequestType.parse(value)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class AirOptions(_RequestOptions):
    """Seed values for an AirRequest. datetime defaults to construction time."""

    type: AirRequestType | None = None
    datetime: str | dt | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        return None if value is None else AirRequestType.parse(value)
