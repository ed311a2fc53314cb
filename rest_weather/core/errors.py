"""Error taxonomy shared by the weather and preference services.

Every failure raised by :mod:`rest_weather.core` is a :class:`WeatherAppError`
carrying an :class:`ErrorKind`, so the HTTP layer can match on ``exc.kind``
(or ``exc.kind.category``) instead of on message text.
"""
from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    UPSTREAM = "upstream"
    STORAGE = "storage"


class ErrorKind(str, Enum):
    CITY_REQUIRED = "city_required"
    INVALID_URL = "invalid_url"
    INVALID_UNIT = "invalid_unit"
    NO_RESULTS_FOR_CITY = "no_results_for_city"
    REQUEST_BUILD = "request_build"
    TRANSPORT = "transport"
    DECODE = "decode"
    STORAGE_OPEN = "storage_open"
    STORAGE_DECODE = "storage_decode"
    STORAGE_WRITE = "storage_write"

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]


_CATEGORIES = {
    ErrorKind.CITY_REQUIRED: ErrorCategory.VALIDATION,
    ErrorKind.INVALID_URL: ErrorCategory.VALIDATION,
    ErrorKind.INVALID_UNIT: ErrorCategory.VALIDATION,
    ErrorKind.NO_RESULTS_FOR_CITY: ErrorCategory.UPSTREAM,
    ErrorKind.REQUEST_BUILD: ErrorCategory.UPSTREAM,
    ErrorKind.TRANSPORT: ErrorCategory.UPSTREAM,
    ErrorKind.DECODE: ErrorCategory.UPSTREAM,
    ErrorKind.STORAGE_OPEN: ErrorCategory.STORAGE,
    ErrorKind.STORAGE_DECODE: ErrorCategory.STORAGE,
    ErrorKind.STORAGE_WRITE: ErrorCategory.STORAGE,
}


class WeatherAppError(RuntimeError):
    """Base error."""

    kind: ErrorKind


class ValidationError(WeatherAppError):
    """Raised when caller supplied input is rejected."""


class UpstreamError(WeatherAppError):
    """Raised when the geocoding or weather service cannot be used."""


class StorageError(WeatherAppError):
    """Raised when the preference document cannot be read or written."""


class CityRequired(ValidationError):
    kind = ErrorKind.CITY_REQUIRED

    def __init__(self, message: str = "city is required") -> None:
        super().__init__(message)


class InvalidURL(ValidationError):
    kind = ErrorKind.INVALID_URL


class InvalidUnit(ValidationError):
    kind = ErrorKind.INVALID_UNIT


class NoResultsForCity(UpstreamError):
    kind = ErrorKind.NO_RESULTS_FOR_CITY


class RequestBuildError(UpstreamError):
    kind = ErrorKind.REQUEST_BUILD


class TransportError(UpstreamError):
    kind = ErrorKind.TRANSPORT


class DecodeError(UpstreamError):
    kind = ErrorKind.DECODE


class StorageOpenError(StorageError):
    kind = ErrorKind.STORAGE_OPEN


class StorageDecodeError(StorageError):
    kind = ErrorKind.STORAGE_DECODE


class StorageWriteError(StorageError):
    kind = ErrorKind.STORAGE_WRITE


__all__ = [
    "ErrorCategory",
    "ErrorKind",
    "WeatherAppError",
    "ValidationError",
    "UpstreamError",
    "StorageError",
    "CityRequired",
    "InvalidURL",
    "InvalidUnit",
    "NoResultsForCity",
    "RequestBuildError",
    "TransportError",
    "DecodeError",
    "StorageOpenError",
    "StorageDecodeError",
    "StorageWriteError",
]
