"""OpenWeatherMap current weather client."""
from __future__ import annotations

from dataclasses import dataclass, replace
from numbers import Real
from typing import Any, Dict, Optional, Union

import requests

from owmcurrent import settings
from owmcurrent.entities import Coordinates, WeatherObservation
from owmcurrent.errors import Unimplemented
from owmcurrent.providers.base import HTTPProvider, RequestConfig
from owmcurrent.units import Unit, resolve_language, resolve_unit


@dataclass(frozen=True)
class ClientConfig:
    """Validated client configuration.

    ``unit`` holds the ``units`` parameter value and ``language`` the lower
    case ``lang`` parameter value.
    """

    unit: str
    language: str
    api_key: str


class CurrentWeatherClient(HTTPProvider):
    """Integration with the current weather endpoint.

    Each lookup sends one request and returns a new
    :class:`~owmcurrent.entities.WeatherObservation`; the client itself only
    holds configuration, so independent lookups may run concurrently.
    """

    def __init__(
        self,
        unit: Union[str, Unit],
        language: str,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        resolved_unit = resolve_unit(unit)
        resolved_language = resolve_language(language)
        key = api_key.strip() if api_key and api_key.strip() else settings.resolve_api_key()
        super().__init__(session=session, request_config=request_config)
        self.config = ClientConfig(unit=resolved_unit, language=resolved_language, api_key=key)
        self.base_url = base_url or settings.base_url()

    @property
    def unit(self) -> str:
        return self.config.unit

    @property
    def language(self) -> str:
        return self.config.language

    @property
    def api_key(self) -> str:
        return self.config.api_key

    def set_language(self, language: str) -> None:
        """Switch the response language; other settings are kept."""
        self.config = replace(self.config, language=resolve_language(language))

    # Public API ---------------------------------------------------------
    def by_name(self, location: str) -> WeatherObservation:
        """Return the current weather for a location name such as ``"London,uk"``."""
        if not isinstance(location, str) or not location.strip():
            raise ValueError("location name must be a non-empty string")
        return self._fetch({"q": location})

    def by_coordinates(
        self,
        latitude: Union[float, Coordinates],
        longitude: Optional[float] = None,
    ) -> WeatherObservation:
        if isinstance(latitude, Coordinates):
            latitude, longitude = latitude.latitude, latitude.longitude
        if not _is_number(latitude) or not _is_number(longitude):
            raise ValueError("latitude and longitude must be numbers")
        if not -90 <= latitude <= 90:
            raise ValueError(f"latitude out of range: {latitude}")
        if not -180 <= longitude <= 180:
            raise ValueError(f"longitude out of range: {longitude}")
        return self._fetch({"lat": f"{latitude:f}", "lon": f"{longitude:f}"})

    def by_id(self, location_id: int) -> WeatherObservation:
        if isinstance(location_id, bool) or not isinstance(location_id, int):
            raise ValueError(f"location id must be an integer, got {location_id!r}")
        return self._fetch({"id": location_id})

    def by_zip(self, zip_code: Union[str, int], country_code: str) -> WeatherObservation:
        zip_text = str(zip_code).strip() if zip_code is not None else ""
        if not zip_text:
            raise ValueError("zip code must not be empty")
        if not isinstance(country_code, str) or not country_code.strip():
            raise ValueError("country code must be a non-empty string")
        return self._fetch({"zip": f"{zip_text},{country_code.strip()}"})

    def by_area(self, *args: Any, **kwargs: Any) -> WeatherObservation:
        raise Unimplemented("lookup by area is not supported by the current weather endpoint")

    # Helpers ------------------------------------------------------------
    def url_for(self, query: Dict[str, Any]) -> str:
        """Return the request URL for ``query`` with credentials, unit and language."""
        params: Dict[str, Any] = {"appid": self.config.api_key}
        params.update(query)
        params["units"] = self.config.unit
        params["lang"] = self.config.language
        return self.build_url(self.base_url, params)

    def _fetch(self, query: Dict[str, Any]) -> WeatherObservation:
        data = self._get_json(self.url_for(query))
        return WeatherObservation.from_dict(data)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


__all__ = ["ClientConfig", "CurrentWeatherClient"]
