"""Process-wide settings for the current weather client."""
from __future__ import annotations

import os
from typing import Optional

from owmcurrent.errors import MissingCredential

API_KEY_ENV = "OWM_API_KEY"
BASE_URL_ENV = "OWM_BASE_URL"
LOG_LEVEL_ENV = "OWM_LOG_LEVEL"

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_LOG_LEVEL = "WARNING"


def env(name: str, default: Optional[str] = None) -> str:
    """Fetch environment variables while allowing explicit defaults.

    A variable that is set but blank counts as unset.
    """

    value = (os.environ.get(name) or "").strip()
    if value:
        return value
    if default is None:
        raise MissingCredential(f"Environment variable {name} is required")
    return default


def resolve_api_key() -> str:
    return env(API_KEY_ENV)


def base_url() -> str:
    return env(BASE_URL_ENV, DEFAULT_BASE_URL)


def log_level() -> str:
    return env(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


__all__ = [
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "DEFAULT_BASE_URL",
    "LOG_LEVEL_ENV",
    "base_url",
    "env",
    "log_level",
    "resolve_api_key",
]
