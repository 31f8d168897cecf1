"""Errors raised by the current weather client."""
from __future__ import annotations

from typing import Optional


class WeatherClientError(RuntimeError):
    """Base client error."""


class InvalidUnit(WeatherClientError, ValueError):
    """Raised when a measurement unit is not in the supported table."""


class InvalidLanguage(WeatherClientError, ValueError):
    """Raised when a language code is not in the supported table."""


class MissingCredential(WeatherClientError):
    """Raised when no API key can be resolved."""


class NetworkError(WeatherClientError):
    """Raised when the HTTP request could not be completed."""


class DecodeError(WeatherClientError):
    """Raised when a response body is not the expected JSON document."""


class ApiError(WeatherClientError):
    """Raised when the API answers with an error status."""

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        cod: Optional[int] = None,
    ) -> None:
        detail = f"HTTP {status_code}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)
        self.status_code = status_code
        self.message = message
        self.cod = cod


class Unimplemented(WeatherClientError, NotImplementedError):
    """Raised by lookups the endpoint wrapper does not provide."""


__all__ = [
    "ApiError",
    "DecodeError",
    "InvalidLanguage",
    "InvalidUnit",
    "MissingCredential",
    "NetworkError",
    "Unimplemented",
    "WeatherClientError",
]
