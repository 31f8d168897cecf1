"""Supported measurement units and response languages."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from owmcurrent.errors import InvalidLanguage, InvalidUnit


class Unit(str, Enum):
    """Measurement scales accepted by the ``units`` query parameter."""

    STANDARD = "standard"
    METRIC = "metric"
    IMPERIAL = "imperial"


# Accepted spellings, upper case, mapped to the unit they select.
DATA_UNITS: Dict[str, Unit] = {
    "K": Unit.STANDARD,
    "STANDARD": Unit.STANDARD,
    "C": Unit.METRIC,
    "METRIC": Unit.METRIC,
    "F": Unit.IMPERIAL,
    "IMPERIAL": Unit.IMPERIAL,
}

LANG_CODES: Dict[str, str] = {
    "AF": "Afrikaans",
    "AL": "Albanian",
    "AR": "Arabic",
    "AZ": "Azerbaijani",
    "BG": "Bulgarian",
    "CA": "Catalan",
    "CZ": "Czech",
    "DA": "Danish",
    "DE": "German",
    "EL": "Greek",
    "EN": "English",
    "ES": "Spanish",
    "EU": "Basque",
    "FA": "Persian (Farsi)",
    "FI": "Finnish",
    "FR": "French",
    "GL": "Galician",
    "HE": "Hebrew",
    "HI": "Hindi",
    "HR": "Croatian",
    "HU": "Hungarian",
    "ID": "Indonesian",
    "IT": "Italian",
    "JA": "Japanese",
    "KR": "Korean",
    "LA": "Latvian",
    "LT": "Lithuanian",
    "MK": "Macedonian",
    "NL": "Dutch",
    "NO": "Norwegian",
    "PL": "Polish",
    "PT": "Portuguese",
    "PT_BR": "Português Brasil",
    "RO": "Romanian",
    "RU": "Russian",
    "SE": "Swedish",
    "SK": "Slovak",
    "SL": "Slovenian",
    "SP": "Spanish",
    "SR": "Serbian",
    "SV": "Swedish",
    "TH": "Thai",
    "TR": "Turkish",
    "UA": "Ukrainian",
    "UK": "Ukrainian",
    "VI": "Vietnamese",
    "ZH_CN": "Chinese Simplified",
    "ZH_TW": "Chinese Traditional",
    "ZU": "Zulu",
}


def _normalize(code: Optional[object]) -> str:
    if not isinstance(code, str):
        return ""
    return code.strip().upper()


def validate_unit(code: Optional[object]) -> bool:
    return _normalize(code) in DATA_UNITS


def validate_language(code: Optional[object]) -> bool:
    return _normalize(code) in LANG_CODES


def resolve_unit(code: Optional[object]) -> str:
    """Return the ``units`` parameter value for ``code``.

    Unit names and their symbols (``K``, ``C``, ``F``) are both accepted,
    in any case.
    """
    if isinstance(code, Unit):
        return code.value
    if not validate_unit(code):
        raise InvalidUnit(f"unsupported unit: {code!r}")
    return DATA_UNITS[_normalize(code)].value


def resolve_language(code: Optional[object]) -> str:
    """Return the ``lang`` parameter value for ``code`` (lower case)."""
    if not validate_language(code):
        raise InvalidLanguage(f"unsupported language: {code!r}")
    return _normalize(code).lower()


__all__ = [
    "DATA_UNITS",
    "LANG_CODES",
    "Unit",
    "resolve_language",
    "resolve_unit",
    "validate_language",
    "validate_unit",
]
