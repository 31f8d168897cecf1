from __future__ import annotations

import pytest

from owmcurrent.errors import InvalidLanguage, InvalidUnit
from owmcurrent.providers.current import CurrentWeatherClient
from owmcurrent.units import (
    DATA_UNITS,
    LANG_CODES,
    Unit,
    resolve_language,
    resolve_unit,
    validate_language,
    validate_unit,
)


@pytest.mark.parametrize("code", sorted(DATA_UNITS))
def test_every_unit_code_constructs(code):
    for spelling in (code, code.lower(), code.capitalize()):
        client = CurrentWeatherClient(spelling, "EN")
        assert client.unit == DATA_UNITS[code].value


@pytest.mark.parametrize("code", ["kelvin", "celsius", "", "  ", "metrics", "X", None, 3])
def test_unknown_unit_rejected(code):
    assert validate_unit(code) is False
    with pytest.raises(InvalidUnit):
        CurrentWeatherClient(code, "EN")


def test_unit_symbols_map_to_names():
    assert resolve_unit("c") == "metric"
    assert resolve_unit("F") == "imperial"
    assert resolve_unit("k") == "standard"
    assert resolve_unit(Unit.IMPERIAL) == "imperial"


@pytest.mark.parametrize("code", sorted(LANG_CODES))
def test_every_language_accepted(code):
    client = CurrentWeatherClient("metric", code)
    assert client.language == code.lower()

    client = CurrentWeatherClient("metric", "EN")
    client.set_language(code.lower())
    assert client.language == code.lower()


@pytest.mark.parametrize("code", ["english", "xx", "", "zh-cn", None, "EN_US"])
def test_unknown_language_rejected(code):
    assert validate_language(code) is False
    with pytest.raises(InvalidLanguage):
        CurrentWeatherClient("metric", code)

    client = CurrentWeatherClient("metric", "EN")
    with pytest.raises(InvalidLanguage):
        client.set_language(code)


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        resolve_unit("rankine")
    with pytest.raises(ValueError):
        resolve_language("klingon")
