"""
OpenWeather Client

Bundles the three family clients behind one config and one transport, so a
single object owns the API key and the HTTP connection pool::

    async with OpenWeatherClient(ClientConfig.from_env()) as ow:
        now = await ow.weather.current().city("Madrid", "es").execute()
        uvi = await ow.uv.current().coords(40.4, -3.7).execute()

Each family keeps its own default key; ``default_key(value)`` on the bundle
sets all three.
"""

from __future__ import annotations

from .air import AirClient
from .models import ClientConfig
from .request import _UNSET
from .transport import Transport
from .uv import UVClient
from .weather import WeatherClient


class OpenWeatherClient:
    """Weather, UV index and air pollution clients sharing one transport."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.transport = transport or Transport(timeout=self.config.timeout)
        self.weather = WeatherClient(self.config, transport=self.transport)
        self.uv = UVClient(self.config, transport=self.transport)
        self.air = AirClient(self.config, transport=self.transport)

    def default_key(self, appid: str | None = _UNSET) -> str | None:
        """Get the weather default key, or set it on every family."""
        if appid is _UNSET:
            return self.weather.default_key()
        for family in (self.weather, self.uv, self.air):
            family.default_key(appid)
        return appid

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> OpenWeatherClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
