"""Django settings for the weather service."""
from __future__ import annotations

from pathlib import Path
import os

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "rest_weather.api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "rest_weather.urls"

WSGI_APPLICATION = "rest_weather.wsgi.application"

# Preferences live in a JSON file; there is no database.
DATABASES = {}

WEATHER_GEOCODE_API_URL = env(
    "GEOCODE_API_URL",
    "https://geocoding-api.open-meteo.com/v1/search?name={}&count=1&language=en&format=json",
)
WEATHER_CURRENT_API_URL = env(
    "CURRENT_WEATHER_API_URL",
    "https://api.open-meteo.com/v1/forecast?latitude={}&longitude={}&current_weather=true",
)
WEATHER_FORECAST_API_URL = env(
    "FORECAST_WEATHER_API_URL",
    "https://api.open-meteo.com/v1/forecast?latitude={}&longitude={}"
    "&daily=temperature_2m_max,temperature_2m_min&timezone=auto",
)
WEATHER_REQUEST_TIMEOUT = float(os.environ.get("WEATHER_REQUEST_TIMEOUT", "5"))
WEATHER_USERDATA_PATH = env("USERDATA_PATH", str(BASE_DIR / "userdata.json"))

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "rest_weather.api.exceptions.weather_exception_handler",
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
if LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
    LOG_LEVEL = "INFO"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "loggers": {
        "rest_weather": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": True},
        "WeatherService": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": True},
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True
