"""REST API views for weather lookups and user preferences."""
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from rest_weather.api import services
from rest_weather.core.errors import InvalidUnit


def _city_from(request, kwargs) -> str:
    return kwargs.get("city") or request.query_params.get("city", "")


class CurrentWeatherView(APIView):
    """Current temperature and wind speed for a city."""

    def get(self, request, *args, **kwargs):  # noqa: D401
        weather = services.get_weather_service().get_current_weather(_city_from(request, kwargs))
        return Response(weather.as_payload(), status=status.HTTP_200_OK)


class ForecastView(APIView):
    """Daily min/max temperature forecast for a city."""

    def get(self, request, *args, **kwargs):  # noqa: D401
        forecast = services.get_weather_service().get_forecast(_city_from(request, kwargs))
        return Response(forecast.as_payload(), status=status.HTTP_200_OK)


class UserDataView(APIView):
    def get(self, request, *args, **kwargs):
        document = services.get_preference_service().get_preferences()
        return Response(document.to_json(), status=status.HTTP_200_OK)


class UserCitiesView(APIView):
    """Add (POST) or remove (DELETE) a comma separated list of cities."""

    def post(self, request, city: str, *args, **kwargs):
        document = services.get_preference_service().add_cities(city)
        return Response(document.to_json(), status=status.HTTP_200_OK)

    def delete(self, request, city: str, *args, **kwargs):
        cities = services.get_preference_service().delete_cities(city)
        return Response(cities, status=status.HTTP_200_OK)


class UserUnitsView(APIView):
    def put(self, request, *args, **kwargs):
        data = request.data
        units = data.get("units") if isinstance(data, dict) else None
        if not isinstance(units, str):
            raise InvalidUnit("units must be provided as a string")

        updated = services.get_preference_service().update_units(units)
        return Response({"units": updated.value}, status=status.HTTP_200_OK)
