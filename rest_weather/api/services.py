"""Process wide service instances built from Django settings."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings

from rest_weather.core.http import RequestConfig, RequestExecutor
from rest_weather.core.preferences import PreferenceService
from rest_weather.core.storage import JsonFilePreferenceStore
from rest_weather.core.weather import WeatherService


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    executor = RequestExecutor(request_config=RequestConfig(timeout=settings.WEATHER_REQUEST_TIMEOUT))
    return WeatherService(
        executor=executor,
        geocode_url=settings.WEATHER_GEOCODE_API_URL,
        current_weather_url=settings.WEATHER_CURRENT_API_URL,
        forecast_url=settings.WEATHER_FORECAST_API_URL,
    )


@lru_cache(maxsize=1)
def get_preference_service() -> PreferenceService:
    return PreferenceService(JsonFilePreferenceStore(settings.WEATHER_USERDATA_PATH))


def reset_services() -> None:
    """Drop cached services so the next call picks up current settings."""
    get_weather_service.cache_clear()
    get_preference_service.cache_clear()
