"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from rest_weather.api.services import get_weather_service
from rest_weather.core.errors import WeatherAppError


class Command(BaseCommand):
    help = "Fetch the current weather or the daily forecast for a city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, required=True, help="City name")
        parser.add_argument("--forecast", action="store_true", help="Print the daily forecast instead")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options["city"]
        service = get_weather_service()
        try:
            if options["forecast"]:
                result = service.get_forecast(city)
            else:
                result = service.get_current_weather(city)
        except WeatherAppError as exc:
            raise CommandError(f"{exc.kind.value}: {exc}") from exc

        self.stdout.write(json.dumps(result.as_payload()))
