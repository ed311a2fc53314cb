from __future__ import annotations

import pytest

from requests_mock import Mocker

from rest_weather.core.entities import PreferenceDocument
from rest_weather.core.http import RequestExecutor
from rest_weather.core.storage import JsonFilePreferenceStore
from rest_weather.core.weather import WeatherService


GEOCODE_URL = "https://geo.test/v1/search"
CURRENT_URL = "https://api.test/v1/current"
FORECAST_URL = "https://api.test/v1/forecast"

GEOCODE_TEMPLATE = GEOCODE_URL + "?name={}&count=1"
CURRENT_TEMPLATE = CURRENT_URL + "?latitude={}&longitude={}&current_weather=true"
FORECAST_TEMPLATE = FORECAST_URL + "?latitude={}&longitude={}&daily=temperature_2m_max,temperature_2m_min"

HALIFAX = {"results": [{"name": "Halifax", "latitude": 44.6488, "longitude": -63.5752}]}
CURRENT_PAYLOAD = {"current_weather": {"temperature": 12.5, "windspeed": 20.1, "weathercode": 3}}
FORECAST_PAYLOAD = {
    "daily": {
        "time": ["2024-05-01", "2024-05-02"],
        "temperature_2m_max": [14.2, 16.0],
        "temperature_2m_min": [5.1, 6.3],
    }
}


class TimeController:
    def __init__(self) -> None:
        self.now = 0.0

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


class RecordingStore:
    """In-memory store that remembers every saved document."""

    def __init__(self, document: PreferenceDocument | None = None) -> None:
        self.document = document or PreferenceDocument()
        self.loads = 0
        self.saved: list[PreferenceDocument] = []

    def load(self) -> PreferenceDocument:
        self.loads += 1
        return self.document.model_copy(deep=True)

    def save(self, document: PreferenceDocument) -> None:
        self.saved.append(document)
        self.document = document


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def clock() -> TimeController:
    return TimeController()


@pytest.fixture
def executor(clock) -> RequestExecutor:
    return RequestExecutor(time_func=clock)


@pytest.fixture
def weather_service(executor) -> WeatherService:
    return WeatherService(
        executor=executor,
        geocode_url=GEOCODE_TEMPLATE,
        current_weather_url=CURRENT_TEMPLATE,
        forecast_url=FORECAST_TEMPLATE,
    )


@pytest.fixture
def userdata_path(tmp_path):
    return tmp_path / "userdata.json"


@pytest.fixture
def file_store(userdata_path) -> JsonFilePreferenceStore:
    return JsonFilePreferenceStore(userdata_path)
