"""Client for the OpenWeatherMap current weather API."""
from __future__ import annotations

from .entities import Clouds, Coordinates, Main, Sys, Weather, WeatherObservation, Wind
from .errors import (
    ApiError,
    DecodeError,
    InvalidLanguage,
    InvalidUnit,
    MissingCredential,
    NetworkError,
    Unimplemented,
    WeatherClientError,
)
from .providers import ClientConfig, CurrentWeatherClient, RequestConfig
from .settings import resolve_api_key
from .units import Unit, validate_language, validate_unit

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ClientConfig",
    "Clouds",
    "Coordinates",
    "CurrentWeatherClient",
    "DecodeError",
    "InvalidLanguage",
    "InvalidUnit",
    "Main",
    "MissingCredential",
    "NetworkError",
    "RequestConfig",
    "Sys",
    "Unimplemented",
    "Unit",
    "Weather",
    "WeatherClientError",
    "WeatherObservation",
    "Wind",
    "resolve_api_key",
    "validate_language",
    "validate_unit",
]
