from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

import requests
from requests import Response

from owmcurrent.errors import ApiError, DecodeError, NetworkError


_REDACTED_PARAMS = ("appid",)


@dataclass(frozen=True)
class RequestConfig:
    # None leaves the request without a timeout.
    timeout: Optional[float] = None


class HTTPProvider:
    """Base class that sends a single GET and returns the decoded JSON body."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def build_url(self, base_url: str, params: Mapping[str, Any]) -> str:
        prepared = requests.Request("GET", base_url, params=dict(params)).prepare()
        return prepared.url

    def _get_json(self, url: str) -> Any:
        self._log.debug("GET %s", _redact(url))
        try:
            response = self.session.get(url, timeout=self.request_config.timeout)
        except requests.RequestException as exc:
            self._log.debug("Request failed", exc_info=exc)
            raise NetworkError(f"request failed: {exc}") from exc
        with response:
            self._handle_response(response)
            data = self._json(response)
        self._check_envelope(response.status_code, data)
        return data

    def _handle_response(self, response: Response) -> Response:
        if response.status_code < 400:
            return response
        try:
            envelope = response.json()
        except ValueError:
            envelope = None
        message, cod = _envelope_fields(envelope)
        self._log.debug("Provider returned %s: %s", response.status_code, message)
        raise ApiError(response.status_code, message=message, cod=cod)

    def _check_envelope(self, status_code: int, data: Any) -> None:
        # Some errors arrive with HTTP 200 and the real status in "cod".
        message, cod = _envelope_fields(data)
        if cod is not None and cod >= 400:
            self._log.debug("Provider returned cod %s: %s", cod, message)
            raise ApiError(status_code, message=message, cod=cod)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.debug("Failed to decode JSON", exc_info=exc)
            raise DecodeError("invalid json") from exc


def _envelope_fields(envelope: Any) -> Tuple[Optional[str], Optional[int]]:
    if not isinstance(envelope, dict):
        return None, None
    message = str(envelope.get("message") or "") or None
    try:
        cod = int(envelope.get("cod"))
    except (TypeError, ValueError):
        cod = None
    return message, cod


def _redact(url: str) -> str:
    base, _, query = url.partition("?")
    if not query:
        return url
    pairs = []
    for pair in query.split("&"):
        name, sep, _value = pair.partition("=")
        pairs.append(f"{name}{sep}***" if name in _REDACTED_PARAMS else pair)
    return f"{base}?{'&'.join(pairs)}"


__all__ = ["HTTPProvider", "RequestConfig"]
