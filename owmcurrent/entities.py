from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from owmcurrent.errors import DecodeError


def _empty_volumes() -> Mapping[str, float]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Coordinates:
    longitude: float = 0.0
    latitude: float = 0.0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Coordinates":
        return cls(
            longitude=_as_float(payload, "lon"),
            latitude=_as_float(payload, "lat"),
        )

    def as_dict(self) -> Dict[str, float]:
        return {"lon": self.longitude, "lat": self.latitude}


@dataclass(frozen=True)
class Sys:
    """Station and sun metadata from the ``sys`` block."""

    type: int = 0
    id: int = 0
    message: float = 0.0
    country: str = ""
    sunrise: int = 0
    sunset: int = 0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Sys":
        return cls(
            type=_as_int(payload, "type"),
            id=_as_int(payload, "id"),
            message=_as_float(payload, "message"),
            country=_as_str(payload, "country"),
            sunrise=_as_int(payload, "sunrise"),
            sunset=_as_int(payload, "sunset"),
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Weather:
    """A single weather condition descriptor."""

    id: int = 0
    main: str = ""
    description: str = ""
    icon: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Weather":
        return cls(
            id=_as_int(payload, "id"),
            main=_as_str(payload, "main"),
            description=_as_str(payload, "description"),
            icon=_as_str(payload, "icon"),
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Main:
    """Atmospheric metrics.

    Temperatures follow the unit the client was configured with: Kelvin for
    ``standard``, Celsius for ``metric`` and Fahrenheit for ``imperial``.
    Pressures are in hPa and humidity in percent.
    """

    temp: float = 0.0
    feels_like: float = 0.0
    temp_min: float = 0.0
    temp_max: float = 0.0
    pressure: float = 0.0
    sea_level: float = 0.0
    grnd_level: float = 0.0
    humidity: int = 0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Main":
        return cls(
            temp=_as_float(payload, "temp"),
            feels_like=_as_float(payload, "feels_like"),
            temp_min=_as_float(payload, "temp_min"),
            temp_max=_as_float(payload, "temp_max"),
            pressure=_as_float(payload, "pressure"),
            sea_level=_as_float(payload, "sea_level"),
            grnd_level=_as_float(payload, "grnd_level"),
            humidity=_as_int(payload, "humidity"),
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Wind:
    speed: float = 0.0
    deg: float = 0.0
    gust: float = 0.0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Wind":
        return cls(
            speed=_as_float(payload, "speed"),
            deg=_as_float(payload, "deg"),
            gust=_as_float(payload, "gust"),
        )

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class Clouds:
    all: int = 0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Clouds":
        return cls(all=_as_int(payload, "all"))

    def as_dict(self) -> Dict[str, int]:
        return {"all": self.all}


@dataclass(frozen=True)
class WeatherObservation:
    """A point-in-time reading for one location.

    Keys missing from the response decode to zero values. A key that is
    present with the wrong JSON type raises :class:`DecodeError`.
    ``weather`` is a tuple and the ``rain``/``snow`` volumes are read-only
    mappings, so an observation cannot be changed after decoding.
    """

    coord: Coordinates = field(default_factory=Coordinates)
    sys: Sys = field(default_factory=Sys)
    base: str = ""
    weather: Tuple[Weather, ...] = ()
    main: Main = field(default_factory=Main)
    wind: Wind = field(default_factory=Wind)
    clouds: Clouds = field(default_factory=Clouds)
    rain: Mapping[str, float] = field(default_factory=_empty_volumes)
    snow: Mapping[str, float] = field(default_factory=_empty_volumes)
    visibility: int = 0
    timezone: int = 0
    dt: int = 0
    id: int = 0
    name: str = ""
    cod: int = 0

    @classmethod
    def from_dict(cls, payload: Any) -> "WeatherObservation":
        if not isinstance(payload, Mapping):
            raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")
        return cls(
            coord=Coordinates.from_dict(_section(payload, "coord")),
            sys=Sys.from_dict(_section(payload, "sys")),
            base=_as_str(payload, "base"),
            weather=tuple(Weather.from_dict(item) for item in _sections(payload, "weather")),
            main=Main.from_dict(_section(payload, "main")),
            wind=Wind.from_dict(_section(payload, "wind")),
            clouds=Clouds.from_dict(_section(payload, "clouds")),
            rain=_volumes(payload, "rain"),
            snow=_volumes(payload, "snow"),
            visibility=_as_int(payload, "visibility"),
            timezone=_as_int(payload, "timezone"),
            dt=_as_int(payload, "dt"),
            id=_as_int(payload, "id"),
            name=_as_str(payload, "name"),
            cod=_as_code(payload.get("cod")),
        )

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "coord": self.coord.as_dict(),
            "sys": self.sys.as_dict(),
            "base": self.base,
            "weather": [item.as_dict() for item in self.weather],
            "main": self.main.as_dict(),
            "wind": self.wind.as_dict(),
            "clouds": self.clouds.as_dict(),
            "visibility": self.visibility,
            "timezone": self.timezone,
            "dt": self.dt,
            "id": self.id,
            "name": self.name,
            "cod": self.cod,
        }
        if self.rain:
            payload["rain"] = dict(self.rain)
        if self.snow:
            payload["snow"] = dict(self.snow)
        return payload

    def __hash__(self) -> int:
        return hash(
            (
                self.coord,
                self.sys,
                self.base,
                self.weather,
                self.main,
                self.wind,
                self.clouds,
                tuple(sorted(self.rain.items())),
                tuple(sorted(self.snow.items())),
                self.visibility,
                self.timezone,
                self.dt,
                self.id,
                self.name,
                self.cod,
            )
        )

    @property
    def observed_at(self) -> datetime:
        return datetime.fromtimestamp(self.dt, tz=timezone.utc)


# decoding helpers -------------------------------------------------------
def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DecodeError(f"{key!r} must be an object")
    return value


def _sections(payload: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, Mapping) for item in value):
        raise DecodeError(f"{key!r} must be a list of objects")
    return value


def _volumes(payload: Mapping[str, Any], key: str) -> Mapping[str, float]:
    section = _section(payload, key)
    return MappingProxyType({str(window): _as_float(section, window) for window in section})


def _as_float(payload: Mapping[str, Any], key: str) -> float:
    value = payload.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{key!r} must be a number, got {value!r}")
    return float(value)


def _as_int(payload: Mapping[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{key!r} must be an integer, got {value!r}")
    return value


def _as_str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"{key!r} must be a string, got {value!r}")
    return value


def _as_code(value: Optional[object]) -> int:
    # Error envelopes send "cod" as a string ("404").
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise DecodeError(f"'cod' must be numeric, got {value!r}") from exc
    return _as_int({"cod": value}, "cod")


__all__ = [
    "Clouds",
    "Coordinates",
    "Main",
    "Sys",
    "Weather",
    "WeatherObservation",
    "Wind",
]
