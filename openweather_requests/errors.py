"""
OpenWeather Failure Types

Every failure raised by the request builders is an instance of these types.
"""

from __future__ import annotations


class OpenWeatherError(Exception):
    """Base class for all request builder failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidRequestType(OpenWeatherError, TypeError):
    """
    A RequestType or TemperatureUnit lookup was given a value outside its enum.

    - Fatality: Fatal. Always a programming error.
    - Raised synchronously, never retried.
    """

    failure_category = "invalid_request_type"


class InvalidRequestOptions(OpenWeatherError, ValueError):
    """
    The configuration mapping used to seed a request was rejected.

    Raised at construction time for unknown keys or ill-typed values.
    """

    failure_category = "invalid_request_options"


class InvalidRequest(OpenWeatherError):
    """
    A request failed eager validation.

    Only raised by ``validate()`` or by ``execute()`` on a strict client.
    Without it, misuse produces a URL that OpenWeather itself rejects.
    """

    failure_category = "invalid_request"

    def __init__(self, family: str, errors: list[str]) -> None:
        self.family = family
        self.errors = errors
        super().__init__(f"Invalid {family} request: " + "; ".join(errors))


class TransportFailure(OpenWeatherError):
    """
    Communication with OpenWeather failed at the transport layer.

    Connection errors, timeouts and protocol errors end up here.
    """

    failure_category = "transport_failure"


class UpstreamFailure(OpenWeatherError):
    """
    OpenWeather answered with a non-success HTTP status.

    The status code is passed through uninterpreted.
    """

    failure_category = "upstream_failure"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code


class ResponseDecodeError(OpenWeatherError):
    """The response body could not be parsed as JSON."""

    failure_category = "response_decode_error"
