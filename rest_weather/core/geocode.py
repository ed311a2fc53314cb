"""Resolve a city name to coordinates via the Open-Meteo geocoding API."""
from __future__ import annotations

import logging
from urllib.parse import quote_plus

from pydantic import ValidationError

from .entities import Coordinate, GeocodeResponse
from .errors import NoResultsForCity
from .http import RequestExecutor


logger = logging.getLogger(__name__)


class GeocodeResolver:
    def __init__(self, executor: RequestExecutor, url_template: str) -> None:
        self.executor = executor
        self.url_template = url_template

    def resolve(self, city: str) -> Coordinate:
        """Return the coordinates of the first geocoding match for ``city``.

        The name is sent as given; matching and ranking are left to the
        upstream service.
        """
        geo_url = self.url_template.format(quote_plus(city))

        with self.executor.execute("GET", geo_url) as response:
            try:
                geo_data = GeocodeResponse.model_validate(response.json())
            except (ValueError, ValidationError) as exc:
                logger.error("Undecodable geocode response for %s: %s", city, exc)
                raise NoResultsForCity(f"no results for city: {city}") from exc

        if not geo_data.results:
            logger.error("No geocode results for %s", city)
            raise NoResultsForCity(f"no results for city: {city}")
        return geo_data.results[0]


__all__ = ["GeocodeResolver"]
