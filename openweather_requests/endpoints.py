"""
Endpoint definitions for the OpenWeather request builders.

This module contains:
- Core types: NamedEnum, Endpoint
- The URL generator shared by every family (Endpoint.build_url)

Family-specific endpoint tables live in the domains/ package.
To add a new family: create domains/newfamily.py with its RequestType enum
and NEWFAMILY_ENDPOINTS table, then a builder module next to weather.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from .errors import InvalidRequestType

logger = structlog.get_logger()


class NamedEnum(str, Enum):
    """
    Closed enumeration whose members serialize to their lowercase value.

    Subclassed by every RequestType and by TemperatureUnit.
    """

    @classmethod
    def get_name(cls, value: Any) -> str:
        """Return the serialized name of a member; anything else is rejected."""
        if isinstance(value, cls):
            return value.value
        raise InvalidRequestType(f"Unknown {cls.__name__}: {value!r}")

    @classmethod
    def parse(cls, value: Any) -> NamedEnum:
        """
        Convert a boundary value into a member.

        Accepts a member, its serialized value ("imperial") or its member
        name ("IMPERIAL"). Members of another enum are rejected. Used for values
        arriving from untyped config.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and not isinstance(value, NamedEnum):
            for member in cls:
                if value.lower() == member.value:
                    return member
            member = cls.__members__.get(value.upper())
            if member is not None:
                return member
        raise InvalidRequestType(f"Unknown {cls.__name__}: {value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Endpoint:
    """
    Definition of one OpenWeather endpoint.

    - request_type: the enum member selecting this endpoint
    - path: URL path (may contain {param} placeholders)
    - path_params: fields substituted into the path
    - query_params: field name -> query-string key, emitted only when set
    - fixed_params: emitted on every request (e.g. mode=json)
    - key_param: query-string key carrying the API key
    """

    request_type: NamedEnum
    path: str
    description: str
    query_params: dict[str, str] = field(default_factory=dict)
    path_params: list[str] | None = None
    fixed_params: dict[str, str] | None = None
    key_param: str = "APPID"

    @property
    def fields(self) -> set[str]:
        """All fields this endpoint serializes."""
        return set(self.path_params or []) | set(self.query_params)

    def accepts(self, name: str) -> bool:
        return name in self.fields

    def validate_fields(self, fields: dict[str, Any]) -> list[str]:
        """
        Validate populated fields against this endpoint.

        Returns list of validation errors. Empty list = valid.
        """
        errors: list[str] = []

        for name, value in fields.items():
            if value is not None and not self.accepts(name):
                errors.append(
                    f"'{name}' is set but ignored by the "
                    f"{self.request_type.value} endpoint"
                )

        # A path with holes is never a valid URL
        for name in self.path_params or []:
            if fields.get(name) is None or not str(fields[name]).strip():
                errors.append(f"Missing required path parameter: '{name}'")

        return errors

    def build_url(self, base_url: str, appid: str | None, fields: dict[str, Any]) -> str:
        """
        Build the absolute request URL.

        ``fields`` maps field names to already-serialized values; ``None``
        means unset. Unset fields and fields this endpoint does not accept
        are left out of the query string.
        """
        path = self.path
        for name in self.path_params or []:
            value = fields.get(name)
            path = path.replace(
                f"{{{name}}}", quote("" if value is None else str(value), safe=":,")
            )

        params: dict[str, str] = dict(self.fixed_params or {})
        params[self.key_param] = appid or ""

        for name, key in self.query_params.items():
            value = fields.get(name)
            if value is not None:
                params[key] = str(value)

        for name, value in fields.items():
            if value is not None and not self.accepts(name):
                logger.debug(
                    "openweather_field_ignored",
                    field=name,
                    request_type=self.request_type.value,
                )

        return str(httpx.URL(base_url.rstrip("/") + path, params=params))
