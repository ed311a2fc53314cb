"""Translate core errors into HTTP responses."""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from rest_weather.core.errors import ErrorCategory, ErrorKind, WeatherAppError


logger = logging.getLogger(__name__)

_CATEGORY_STATUS = {
    ErrorCategory.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.UPSTREAM: status.HTTP_502_BAD_GATEWAY,
    ErrorCategory.STORAGE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    if kind is ErrorKind.NO_RESULTS_FOR_CITY:
        return status.HTTP_404_NOT_FOUND
    return _CATEGORY_STATUS[kind.category]


def weather_exception_handler(exc, context):
    if isinstance(exc, WeatherAppError):
        view = context.get("view")
        logger.error("%s failed: %s", view.__class__.__name__ if view else "request", exc)
        return Response({"detail": str(exc), "kind": exc.kind.value}, status=status_for(exc.kind))
    return exception_handler(exc, context)
