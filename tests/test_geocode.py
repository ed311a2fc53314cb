from __future__ import annotations

import pytest
import requests
from pydantic import ValidationError

from rest_weather.core.errors import InvalidURL, NoResultsForCity, TransportError
from rest_weather.core.geocode import GeocodeResolver

from tests.conftest import GEOCODE_TEMPLATE, GEOCODE_URL, HALIFAX


@pytest.fixture
def resolver(executor) -> GeocodeResolver:
    return GeocodeResolver(executor, GEOCODE_TEMPLATE)


def test_resolve_returns_first_result(requests_mock, resolver):
    requests_mock.get(
        GEOCODE_URL,
        json={
            "results": [
                {"latitude": 44.6488, "longitude": -63.5752},
                {"latitude": 51.0, "longitude": 0.1},
            ]
        },
    )

    coordinate = resolver.resolve("Halifax")

    assert coordinate.latitude == 44.6488
    assert coordinate.longitude == -63.5752
    assert requests_mock.call_count == 1


def test_resolved_coordinate_is_immutable(requests_mock, resolver):
    requests_mock.get(GEOCODE_URL, json=HALIFAX)

    coordinate = resolver.resolve("Halifax")

    with pytest.raises(ValidationError):
        coordinate.latitude = 0.0


def test_resolve_escapes_city_name(requests_mock, resolver):
    requests_mock.get(GEOCODE_URL, json=HALIFAX)

    resolver.resolve("New York & Co")

    assert "name=New+York+%26+Co&count=1" in requests_mock.last_request.url


def test_resolve_passes_city_through_verbatim(requests_mock, resolver):
    requests_mock.get(GEOCODE_URL, json=HALIFAX)

    resolver.resolve(" hAlIfAx")

    assert "name=+hAlIfAx&" in requests_mock.last_request.url


def test_resolve_raises_for_empty_results(requests_mock, resolver):
    requests_mock.get(GEOCODE_URL, json={"results": []})

    with pytest.raises(NoResultsForCity, match="Atlantis"):
        resolver.resolve("Atlantis")


def test_resolve_raises_when_results_key_missing(requests_mock, resolver):
    requests_mock.get(GEOCODE_URL, json={"generationtime_ms": 0.5})

    with pytest.raises(NoResultsForCity):
        resolver.resolve("Atlantis")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"text": "<html>not json</html>"},
        {"json": {"results": [{"latitude": "north"}]}},
        {"json": ["unexpected"]},
    ],
)
def test_resolve_treats_undecodable_body_as_no_results(requests_mock, resolver, kwargs):
    requests_mock.get(GEOCODE_URL, **kwargs)

    with pytest.raises(NoResultsForCity):
        resolver.resolve("Halifax")


def test_resolve_propagates_transport_errors(requests_mock, resolver):
    requests_mock.get(GEOCODE_URL, exc=requests.exceptions.ReadTimeout)

    with pytest.raises(TransportError):
        resolver.resolve("Halifax")


def test_resolve_rejects_insecure_template(requests_mock, executor):
    resolver = GeocodeResolver(executor, "http://geo.test/v1/search?name={}")

    with pytest.raises(InvalidURL):
        resolver.resolve("Halifax")

    assert not requests_mock.called
