from __future__ import annotations

from datetime import datetime, timezone

import pytest

from owmcurrent.entities import Main, Weather, WeatherObservation
from owmcurrent.errors import DecodeError


def test_decode_full_payload(cairns_payload):
    observation = WeatherObservation.from_dict(cairns_payload)

    assert observation.base == "stations"
    assert observation.coord.latitude == -16.92
    assert observation.sys.sunrise == 1485720272
    assert observation.weather == (Weather(id=803, main="Clouds", description="broken clouds", icon="04n"),)
    assert observation.main.pressure == 1011.0
    assert observation.main.humidity == 78
    assert observation.visibility == 10000
    assert observation.timezone == 36000
    assert observation.snow == {}


def test_encode_then_decode_is_identity(cairns_payload):
    observation = WeatherObservation.from_dict(cairns_payload)

    assert WeatherObservation.from_dict(observation.as_dict()) == observation


def test_encoding_matches_input_for_present_keys(cairns_payload):
    encoded = WeatherObservation.from_dict(cairns_payload).as_dict()

    assert encoded["name"] == cairns_payload["name"]
    assert encoded["rain"] == cairns_payload["rain"]
    assert encoded["weather"] == cairns_payload["weather"]
    assert encoded["main"]["temp"] == cairns_payload["main"]["temp"]
    assert "snow" not in encoded


def test_missing_keys_decode_to_zero_values():
    observation = WeatherObservation.from_dict({"id": 2172797, "name": "Cairns", "main": {"temp": 23.5}, "cod": 200})

    assert observation.name == "Cairns"
    assert observation.main == Main(temp=23.5)
    assert observation.weather == ()
    assert observation.wind.speed == 0.0
    assert observation.sys.country == ""
    assert observation.rain == {}


def test_null_sections_are_treated_as_missing():
    observation = WeatherObservation.from_dict({"main": None, "weather": None, "name": None})

    assert observation.main == Main()
    assert observation.weather == ()
    assert observation.name == ""


def test_snow_volumes():
    observation = WeatherObservation.from_dict({"snow": {"1h": 1, "3h": 2.5}})

    assert observation.snow == {"1h": 1.0, "3h": 2.5}


@pytest.mark.parametrize("cod, expected", [(200, 200), ("404", 404), (None, 0), (200.0, 200)])
def test_response_code_normalised(cod, expected):
    assert WeatherObservation.from_dict({"cod": cod}).cod == expected


@pytest.mark.parametrize(
    "payload",
    [
        "not an object",
        {"cod": "ok"},
        {"dt": 1.5},
        {"main": {"humidity": True}},
        {"coord": "0,0"},
        {"weather": ["Clouds"]},
        {"snow": [1]},
    ],
)
def test_shape_mismatch(payload):
    with pytest.raises(DecodeError):
        WeatherObservation.from_dict(payload)


def test_observed_at_is_utc():
    observation = WeatherObservation.from_dict({"dt": 1485790200})

    assert observation.observed_at == datetime(2017, 1, 30, 15, 30, tzinfo=timezone.utc)


def test_observation_cannot_be_modified(cairns_payload):
    observation = WeatherObservation.from_dict(cairns_payload)

    with pytest.raises(TypeError):
        observation.rain["1h"] = 9.0
    with pytest.raises(AttributeError):
        observation.weather.append(Weather())
    with pytest.raises(AttributeError):
        observation.name = "Paris"
    assert observation.rain == {"1h": 0.25}


def test_observation_is_hashable(cairns_payload):
    first = WeatherObservation.from_dict(cairns_payload)
    second = WeatherObservation.from_dict(cairns_payload)

    assert hash(first) == hash(second)
    assert len({first, second, WeatherObservation()}) == 2
