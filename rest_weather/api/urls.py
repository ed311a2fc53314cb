"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from rest_weather.api.views import (
    CurrentWeatherView,
    ForecastView,
    UserCitiesView,
    UserDataView,
    UserUnitsView,
)

urlpatterns = [
    path("weather", CurrentWeatherView.as_view(), name="weather"),
    path("weather/<str:city>", CurrentWeatherView.as_view(), name="weather-city"),
    path("forecast", ForecastView.as_view(), name="forecast"),
    path("forecast/<str:city>", ForecastView.as_view(), name="forecast-city"),
    path("user/data", UserDataView.as_view(), name="user-data"),
    path("user/cities/<str:city>", UserCitiesView.as_view(), name="user-cities"),
    path("user/units", UserUnitsView.as_view(), name="user-units"),
]
