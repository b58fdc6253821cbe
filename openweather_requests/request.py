"""
Request Builder Base

Shared machinery for the per-family builders (weather, uv, air):

- BaseRequest: chainable accessors, URL generation, eager validation and
  execution through the owning client's transport.
- FamilyClient: owns a ClientConfig, a Transport and the default key that
  new requests fall back to.

Accessor contract: calling an accessor with no arguments returns the current
value; calling it with arguments stores them and returns the request, so
calls chain. ``None`` is a storable value, the ``_UNSET`` sentinel marks a
missing argument.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from .endpoints import Endpoint, NamedEnum
from .errors import InvalidRequest, InvalidRequestOptions, InvalidRequestType
from .models import ClientConfig, Coordinates
from .transport import Callback, Transport, execute

_UNSET: Any = object()


def format_number(value: Any) -> str | None:
    """Render a numeric field in decimal; strings pass through untouched."""
    if value is None:
        return None
    if isinstance(value, float):
        # Positional notation, never 1e-05
        return format(Decimal(repr(value)), "f")
    return str(value)


class BaseRequest:
    """
    Mutable, chainable request for one OpenWeather family.

    Subclasses declare the family's enum, endpoint table and options model,
    then add their own accessors and ``_fields()``.
    """

    family: ClassVar[str] = ""
    request_type_enum: ClassVar[type[NamedEnum]]
    endpoints: ClassVar[Mapping[Any, Endpoint]]
    options_model: ClassVar[type[BaseModel]]

    def __init__(
        self,
        config: Mapping[str, Any] | BaseModel | None = None,
        *,
        client: FamilyClient[Any] | None = None,
    ) -> None:
        self._client = client if client is not None else self._default_client()
        options = self._load_options(config)

        # An explicit key always wins; the default key is read once, here
        self._appid: str | None = options.appid or self._client.default_key()
        self._type: Any = options.type
        self._lat: Any = options.lat
        self._lon: Any = options.lon
        self._apply_options(options)

    @classmethod
    def _default_client(cls) -> FamilyClient[Any]:
        raise NotImplementedError

    def _load_options(self, config: Mapping[str, Any] | BaseModel | None) -> Any:
        if isinstance(config, self.options_model):
            return config
        if isinstance(config, BaseModel):
            raise InvalidRequestOptions(
                f"Invalid {self.family} request options: expected "
                f"{self.options_model.__name__}, got {type(config).__name__}"
            )
        if not isinstance(config, Mapping):
            return self.options_model()
        try:
            return self.options_model.model_validate(dict(config))
        except ValidationError as e:
            raise InvalidRequestOptions(
                f"Invalid {self.family} request options: {e}", cause=e
            ) from e

    def _apply_options(self, options: Any) -> None:
        """Copy family-specific option fields onto the request."""

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def appid(self, appid: str | None = _UNSET) -> Any:
        """Get or set the API key."""
        if appid is _UNSET:
            return self._appid
        self._appid = appid
        return self

    def request_type(self, request_type: Any = _UNSET) -> Any:
        """Get or set the RequestType selecting the endpoint."""
        if request_type is _UNSET:
            return self._type
        self._type = request_type
        return self

    def coords(self, lat: float | None = _UNSET, lon: float | None = _UNSET) -> Any:
        """Get the coordinates as ``{"lat", "lon"}`` or set both."""
        if lat is _UNSET and lon is _UNSET:
            return Coordinates(lat=self._lat, lon=self._lon)
        if lat is _UNSET or lon is _UNSET:
            raise TypeError("coords() takes both lat and lon")
        self._lat = lat
        self._lon = lon
        self._mark_location("coords")
        return self

    def _mark_location(self, kind: str) -> None:
        """Record which location form was set last."""

    # -------------------------------------------------------------------------
    # URL generation
    # -------------------------------------------------------------------------

    def _endpoint(self) -> Endpoint:
        return self.endpoints[self.request_type_enum.parse(self._type)]

    def _fields(self) -> dict[str, Any]:
        """Populated fields, serialized, keyed by field name."""
        raise NotImplementedError

    def url(self) -> str:
        """
        Build the absolute request URL.

        Raises:
            InvalidRequestType: The request type is unset or unknown.
        """
        endpoint = self._endpoint()
        return endpoint.build_url(self._client.config.base_url, self._appid, self._fields())

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _missing_fields(self) -> list[str]:
        if self._lat is None or self._lon is None:
            return ["Missing location: coords(lat, lon) is required"]
        return []

    def validate(self) -> BaseRequest:
        """
        Eagerly check the request before it is sent.

        Catches a missing key, an unknown type, a missing location and fields
        the active type would silently drop.

        Raises:
            InvalidRequest: With every problem found.
        """
        errors: list[str] = []
        if not self._appid:
            errors.append("Missing API key")

        try:
            endpoint: Endpoint | None = self._endpoint()
        except InvalidRequestType as e:
            errors.append(str(e))
            endpoint = None

        if endpoint is not None:
            errors.extend(endpoint.validate_fields(self._fields()))
        errors.extend(self._missing_fields())

        if errors:
            raise InvalidRequest(self.family, errors)
        return self

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    async def execute(self, callback: Callback | None = None) -> Any:
        """
        Send the request and return the parsed JSON body.

        With ``callback``, failures are reported as ``callback(error, None)``
        and success as ``callback(None, data)`` instead of raising.
        URL construction errors are always raised.
        """
        if self._client.config.strict:
            self.validate()
        url = self.url()
        return await execute(self._client.transport, url, callback)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self._type!r}, appid={'set' if self._appid else None})"


RequestT = TypeVar("RequestT", bound=BaseRequest)


class FamilyClient(Generic[RequestT]):
    """
    Client for one OpenWeather family.

    Owns the default key new requests fall back to. Changing it later does
    not touch requests already built.
    """

    request_class: ClassVar[type[BaseRequest]]

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.transport = transport or Transport(timeout=self.config.timeout)
        self._default_key = self.config.api_key

    def default_key(self, appid: str | None = _UNSET) -> str | None:
        """Get the default key, or set it and return the new value."""
        if appid is not _UNSET:
            self._default_key = appid
        return self._default_key

    def request(self, config: Mapping[str, Any] | BaseModel | None = None) -> RequestT:
        """Build a request bound to this client."""
        return self.request_class(config, client=self)  # type: ignore[return-value]

    def _typed(self, request_type: NamedEnum) -> RequestT:
        return self.request().request_type(request_type)  # type: ignore[no-any-return]

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> FamilyClient[RequestT]:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
