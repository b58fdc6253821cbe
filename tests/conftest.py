"""
Shared test fixtures for the OpenWeather request builders.

Provides mock transports, clients wired to them, and URL helpers.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, unquote, urlsplit

import httpx
import pytest

from openweather_requests import air, uv, weather
from openweather_requests.client import OpenWeatherClient
from openweather_requests.models import ClientConfig
from openweather_requests.transport import Transport


# -----------------------------------------------------------------------------
# Mock HTTP Transports
# -----------------------------------------------------------------------------


class MockTransport(httpx.AsyncBaseTransport):
    """
    Mock transport that returns predefined responses.

    Useful for testing HTTP interactions without hitting the real API.
    """

    def __init__(self, responses: dict[str, tuple[int, Any]]):
        """
        Initialize mock transport with predefined responses.

        Args:
            responses: Dict mapping URL paths to (status_code, response_data) tuples.
                A ``str`` response_data is sent as a text body, ``bytes`` as is.
        """
        self.responses = responses
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Handle an async request by returning a predefined response."""
        self.requests.append(request)

        # Match by path
        path = request.url.path
        if path in self.responses:
            status, data = self.responses[path]
            if isinstance(data, bytes):
                return httpx.Response(status, content=data)
            if isinstance(data, str):
                return httpx.Response(status, text=data)
            return httpx.Response(status, json=data)

        return httpx.Response(404, json={"cod": "404", "message": "Not found"})


class FailingTransport(httpx.AsyncBaseTransport):
    """Transport whose every request fails before a response exists."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raise httpx.ConnectError("connection refused", request=request)


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


MOCK_CURRENT_WEATHER = {
    "coord": {"lon": -97.74, "lat": 30.27},
    "weather": [{"id": 800, "main": "Clear", "description": "cielo claro"}],
    "main": {"temp": 88.3, "pressure": 1015, "humidity": 40},
    "name": "Austin",
    "cod": 200,
}

MOCK_UV_CURRENT = {"lat": 26.3, "lon": -98.1, "date_iso": "2020-06-01T12:00:00Z", "value": 10.4}

MOCK_OZONE = {
    "time": "2020-01-01T00:00:00Z",
    "location": {"latitude": 1.0, "longitude": 2.0},
    "data": 0.00768,
}


def query_of(url: str) -> dict[str, str]:
    """Decoded query string of ``url`` as a flat dict."""
    parsed = parse_qs(urlsplit(url).query, keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}


def path_of(url: str) -> str:
    return unquote(urlsplit(url).path)


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_default_keys():
    """Module-level default keys are process-wide; clear them around each test."""
    for family in (weather, uv, air):
        family.default_key(None)
    yield
    for family in (weather, uv, air):
        family.default_key(None)


@pytest.fixture
def mock_transport() -> MockTransport:
    """Create a mock transport with common responses."""
    return MockTransport({
        "/data/2.5/weather": (200, MOCK_CURRENT_WEATHER),
        "/data/2.5/uvi": (200, MOCK_UV_CURRENT),
        "/pollution/v1/o3/1,2/2020-01-01T00:00:00Z.json": (200, MOCK_OZONE),
        "/data/2.5/forecast": (401, {"cod": 401, "message": "Invalid API key"}),
        "/data/2.5/uvi/forecast": (200, "<html>not json</html>"),
    })


@pytest.fixture
def client(mock_transport: MockTransport) -> OpenWeatherClient:
    """Create a client whose requests go to the mock transport."""
    return OpenWeatherClient(
        ClientConfig(api_key="test-key"),
        transport=Transport(transport=mock_transport),
    )
