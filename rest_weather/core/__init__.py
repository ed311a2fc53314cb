"""Weather lookups by city name and the persisted user preferences."""
from __future__ import annotations

from .entities import Coordinate, CurrentWeather, Forecast, PreferenceDocument, Units
from .errors import ErrorCategory, ErrorKind, WeatherAppError
from .geocode import GeocodeResolver
from .http import RequestConfig, RequestExecutor, validate_url
from .preferences import PreferenceService
from .storage import JsonFilePreferenceStore, PreferenceStore
from .weather import WeatherService

__all__ = [
    "Coordinate",
    "CurrentWeather",
    "Forecast",
    "PreferenceDocument",
    "Units",
    "ErrorCategory",
    "ErrorKind",
    "WeatherAppError",
    "GeocodeResolver",
    "RequestConfig",
    "RequestExecutor",
    "validate_url",
    "PreferenceService",
    "JsonFilePreferenceStore",
    "PreferenceStore",
    "WeatherService",
]
