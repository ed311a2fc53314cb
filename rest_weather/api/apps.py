from __future__ import annotations

from django.apps import AppConfig


class ApiConfig(AppConfig):
    name = "rest_weather.api"
    label = "weather_api"
