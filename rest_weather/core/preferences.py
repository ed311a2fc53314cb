"""Tracked cities and unit preference, kept in a :class:`PreferenceStore`.

Each mutation is a load, mutate, save cycle with no locking. Two concurrent
mutations may both load the same document and the later save wins.
"""
from __future__ import annotations

import logging
from typing import List

from .entities import PreferenceDocument, Units
from .errors import CityRequired, InvalidUnit
from .storage import PreferenceStore


logger = logging.getLogger(__name__)


def split_cities(raw: str) -> List[str]:
    """Split a comma separated list of cities, dropping blank entries."""
    return [piece.strip() for piece in raw.split(",") if piece.strip()]


def _find_city(cities: List[str], city: str) -> int:
    folded = city.casefold()
    for idx, existing in enumerate(cities):
        if existing.casefold() == folded:
            return idx
    return -1


class PreferenceService:
    def __init__(self, store: PreferenceStore) -> None:
        self.store = store

    def get_preferences(self) -> PreferenceDocument:
        return self.store.load()

    def add_cities(self, raw: str) -> PreferenceDocument:
        """Track every city in ``raw`` that is not tracked yet (ignoring case)."""
        if not raw:
            raise CityRequired()

        document = self.store.load()
        cities = list(document.cities)
        for city in split_cities(raw):
            if _find_city(cities, city) >= 0:
                logger.info("City %s is already tracked", city)
                continue
            cities.append(city)

        updated = document.model_copy(update={"cities": cities})
        self.store.save(updated)
        return updated

    def delete_cities(self, raw: str) -> List[str]:
        """Stop tracking every city in ``raw``; unknown cities are skipped."""
        if not raw:
            raise CityRequired()

        document = self.store.load()
        cities = list(document.cities)
        for city in split_cities(raw):
            idx = _find_city(cities, city)
            if idx < 0:
                logger.warning("City not found: %s", city)
                continue
            del cities[idx]

        updated = document.model_copy(update={"cities": cities})
        self.store.save(updated)
        return updated.cities

    def update_units(self, candidate: str) -> Units:
        try:
            units = Units(candidate)
        except ValueError:
            logger.warning("Invalid unit type: %s", candidate)
            raise InvalidUnit(f"invalid unit type: {candidate}") from None

        document = self.store.load()
        updated = document.model_copy(update={"units": units})
        self.store.save(updated)
        return units


__all__ = ["PreferenceService", "split_cities"]
