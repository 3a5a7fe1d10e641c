"""Shared fixtures: a scripted stand-in for ApiClient and ready-made settings."""

import copy

import pytest

from homedash.config import Settings
from homedash.errors import NetworkUnreachable


class FakeClient:
    """Answers get_json from a url -> outcome table.

    An outcome may be a payload (returned as a copy), an exception instance
    (raised) or an async callable (awaited). Unknown urls fail like a dead
    network.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    async def get_json(self, url, params=None, timeout=None):
        self.calls.append((url, params))
        if url not in self.routes:
            raise NetworkUnreachable(f"Network error while fetching {url}")
        outcome = self.routes[url]
        if isinstance(outcome, BaseException):
            raise outcome
        if callable(outcome):
            return await outcome()
        return copy.deepcopy(outcome)

    def urls(self):
        return [url for url, _ in self.calls]


@pytest.fixture
def make_client():
    return FakeClient


@pytest.fixture
def settings():
    """No credentials, no geolocation: keyless sources only."""
    return Settings(geolocation_enabled=False)


@pytest.fixture
def keyed_settings():
    return Settings(
        openweather_api_key="ow-test-key",
        news_api_key="news-test-key",
        geolocation_enabled=False,
    )


@pytest.fixture
def openweather_payload():
    return {
        "name": "Lisbon",
        "main": {"temp": 21.4, "feels_like": 20.6, "humidity": 64, "pressure": 1017},
        "weather": [{"main": "Clear", "description": "clear sky"}],
        "wind": {"speed": 3.6},
    }


@pytest.fixture
def open_meteo_payload():
    return {
        "current_weather": {"temperature": 17.2, "windspeed": 11.9, "weathercode": 2},
        "hourly": {"relative_humidity_2m": [71, 73, 75]},
    }


@pytest.fixture
def posts_payload():
    return [
        {"id": i, "title": f"post title {i}", "body": "lorem ipsum dolor " * 12}
        for i in range(1, 7)
    ]
