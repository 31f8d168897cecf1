from __future__ import annotations

import copy

import pytest

from requests_mock import Mocker

CAIRNS = {
    "coord": {"lon": 145.77, "lat": -16.92},
    "weather": [
        {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04n"},
    ],
    "base": "stations",
    "main": {
        "temp": 23.5,
        "feels_like": 24.1,
        "temp_min": 22.0,
        "temp_max": 25.0,
        "pressure": 1011,
        "humidity": 78,
    },
    "visibility": 10000,
    "wind": {"speed": 4.6, "deg": 140},
    "clouds": {"all": 75},
    "rain": {"1h": 0.25},
    "dt": 1485790200,
    "sys": {
        "type": 1,
        "id": 8166,
        "message": 0.0023,
        "country": "AU",
        "sunrise": 1485720272,
        "sunset": 1485766550,
    },
    "timezone": 36000,
    "id": 2172797,
    "name": "Cairns",
    "cod": 200,
}


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture(autouse=True)
def owm_env(monkeypatch):
    monkeypatch.setenv("OWM_API_KEY", "test-key")
    monkeypatch.delenv("OWM_BASE_URL", raising=False)
    monkeypatch.delenv("OWM_LOG_LEVEL", raising=False)
    yield


@pytest.fixture
def cairns_payload() -> dict:
    return copy.deepcopy(CAIRNS)
