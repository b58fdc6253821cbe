"""
Execution Adapter

Issues a single GET for a built URL and hands back the parsed JSON body.
Failures are translated into the OpenWeatherError taxonomy:

    httpx.RequestError     -> TransportFailure
    non-2xx status         -> UpstreamFailure (status passed through)
    body is not JSON       -> ResponseDecodeError (bad UTF-8 included)

There is no retry and no caching: every call is one network round trip.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

import httpx
import structlog

from .config import HTTP_TIMEOUT_SECONDS, USER_AGENT
from .errors import OpenWeatherError, ResponseDecodeError, TransportFailure, UpstreamFailure

logger = structlog.get_logger()

#: Signature of the legacy callback form: ``callback(error, data)``
Callback = Callable[[OpenWeatherError | None, Any], None]

_KEY_PATTERN = re.compile(r"(?i)(appid=)[^&]*")


def redact(url: str) -> str:
    """Hide the API key in a URL before it is logged."""
    return _KEY_PATTERN.sub(r"\1***", url)


class Transport:
    """Thin async GET-with-JSON collaborator shared by the family clients."""

    def __init__(
        self,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={"User-Agent": USER_AGENT},
            )
        return self._client

    async def close(self) -> None:
        """Clean up HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_json(self, url: str) -> Any:
        """
        GET ``url`` and return the decoded JSON body.

        Raises:
            TransportFailure: The request never produced a response.
            UpstreamFailure: The response status was not 2xx.
            ResponseDecodeError: The body was not valid JSON.
        """
        logger.debug("openweather_request", url=redact(url))
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "openweather_http_error",
                status=e.response.status_code,
                url=redact(url),
                body=e.response.text[:500],
            )
            raise UpstreamFailure(
                f"OpenWeather API error: {e.response.status_code}",
                status_code=e.response.status_code,
                cause=e,
            ) from e
        except httpx.RequestError as e:
            logger.error("openweather_request_error", url=redact(url), error=str(e))
            raise TransportFailure(
                f"Failed to connect to OpenWeather API: {e}", cause=e
            ) from e

        try:
            return response.json()
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            logger.error("openweather_decode_error", url=redact(url), error=str(e))
            raise ResponseDecodeError(
                f"OpenWeather returned a non-JSON body: {e}", cause=e
            ) from e


async def execute(
    transport: Transport, url: str, callback: Callback | None = None
) -> Any:
    """
    Run one GET through ``transport``.

    Without a callback the parsed body is returned and failures raise.
    With a callback, ``callback(None, data)`` or ``callback(error, None)``
    is invoked instead of raising; the data (or None) is still returned.
    """
    if callback is None:
        return await transport.get_json(url)

    try:
        data = await transport.get_json(url)
    except OpenWeatherError as e:
        callback(e, None)
        return None
    callback(None, data)
    return data
