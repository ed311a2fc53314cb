"""Domain entities and the upstream response shapes they are decoded from."""
from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, List, Protocol, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import DecodeError


T = TypeVar("T", bound="DecodableSchema")


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class Coordinate(BaseModel):
    """Latitude/longitude pair returned by the geocoding service."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class GeocodeResponse(BaseModel):
    results: List[Coordinate] = Field(default_factory=list)


class DecodableSchema(Protocol):
    """A response shape that :meth:`WeatherService.fetch` can decode into."""

    @classmethod
    def decode(cls: Type[T], payload: Any) -> T:
        ...


class EnvelopedPayload(BaseModel):
    """Base for upstream payloads nested under a single top level key.

    Open-Meteo wraps each dataset in its own key (``current_weather``,
    ``daily``); subclasses name that key in ``envelope`` and declare the
    inner fields using the upstream names as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    envelope: ClassVar[str]

    @classmethod
    def decode(cls, payload: Any):
        if not isinstance(payload, dict) or cls.envelope not in payload:
            raise DecodeError(f"response is missing {cls.envelope!r}")
        try:
            return cls.model_validate(payload[cls.envelope])
        except ValidationError as exc:
            raise DecodeError(f"malformed {cls.envelope!r} payload: {exc}") from exc

    def as_payload(self) -> Dict[str, Any]:
        return {self.envelope: self.model_dump(by_alias=True)}


class CurrentWeather(EnvelopedPayload):
    envelope: ClassVar[str] = "current_weather"

    temperature: float
    wind_speed: float = Field(alias="windspeed")


class Forecast(EnvelopedPayload):
    envelope: ClassVar[str] = "daily"

    dates: List[str] = Field(alias="time")
    max_temps: List[float] = Field(alias="temperature_2m_max")
    min_temps: List[float] = Field(alias="temperature_2m_min")

    @model_validator(mode="after")
    def _check_lengths(self) -> "Forecast":
        if not len(self.dates) == len(self.max_temps) == len(self.min_temps):
            raise ValueError("dates, max and min temperatures must have the same length")
        return self


class PreferenceDocument(BaseModel):
    """The persisted preference record: tracked cities and unit system."""

    cities: List[str] = Field(default_factory=list)
    units: Units = Units.METRIC

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


__all__ = [
    "Units",
    "Coordinate",
    "GeocodeResponse",
    "DecodableSchema",
    "EnvelopedPayload",
    "CurrentWeather",
    "Forecast",
    "PreferenceDocument",
]
