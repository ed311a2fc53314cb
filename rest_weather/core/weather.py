from __future__ import annotations

import logging
from typing import Optional, Type

from .entities import CurrentWeather, Forecast, T
from .errors import CityRequired, DecodeError
from .geocode import GeocodeResolver
from .http import RequestExecutor


class WeatherService:
    """Current weather and forecast lookups for a city name.

    Both lookups share :meth:`fetch`; they differ only in the URL template
    and the schema the response is decoded into.
    """

    def __init__(
        self,
        *,
        executor: RequestExecutor,
        current_weather_url: str,
        forecast_url: str,
        geocoder: Optional[GeocodeResolver] = None,
        geocode_url: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if geocoder is None:
            if geocode_url is None:
                raise ValueError("either geocoder or geocode_url is required")
            geocoder = GeocodeResolver(executor, geocode_url)
        self.executor = executor
        self.geocoder = geocoder
        self.current_weather_url = current_weather_url
        self.forecast_url = forecast_url
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def get_current_weather(self, city: str) -> CurrentWeather:
        return self.fetch(city, self.current_weather_url, CurrentWeather)

    def get_forecast(self, city: str) -> Forecast:
        return self.fetch(city, self.forecast_url, Forecast)

    def fetch(self, city: str, url_template: str, schema: Type[T]) -> T:
        if not city:
            raise CityRequired()

        coordinate = self.geocoder.resolve(city)
        weather_url = url_template.format(coordinate.latitude, coordinate.longitude)

        with self.executor.execute("GET", weather_url) as response:
            if not response.ok:
                self._log.warning("Weather service returned %s for %s", response.status_code, weather_url)
            try:
                payload = response.json()
            except ValueError as exc:
                self._log.error("Failed to decode weather data from %s", weather_url, exc_info=exc)
                raise DecodeError(f"failed to decode weather data: {exc}") from exc

        try:
            return schema.decode(payload)
        except DecodeError as exc:
            self._log.error("Unexpected weather data shape from %s: %s", weather_url, exc)
            raise


__all__ = ["WeatherService"]
