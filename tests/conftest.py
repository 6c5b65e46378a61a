"""Pytest configuration and shared fixtures."""

import os
from unittest.mock import AsyncMock

# Settings are read when the app module is imported
os.environ.setdefault("WEATHER_API_KEY", "test-weather-key")

import httpx
import pytest
from fastapi.testclient import TestClient

from weather_widget.config import Settings
from weather_widget.main import app as fastapi_app
from weather_widget.state_managers import WeatherWidget, WidgetStateManager

WEATHERAPI_TEST_URL = "http://api.weatherapi.com/v1/current.json"


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for external API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def mock_settings():
    """Settings instance with test values."""
    return Settings(
        api_host="127.0.0.1",
        api_port=8000,
        weather_api_key="test-weather-key",
        weather_api_url=WEATHERAPI_TEST_URL,
        max_widgets=3,
    )


@pytest.fixture
def make_weather_payload():
    """Build a WeatherAPI.com current.json payload."""

    def _make(name: str = "Paris", temp_c: float = 21.0, condition: str = "Sunny") -> dict:
        return {
            "location": {
                "name": name,
                "region": "Ile-de-France",
                "country": "France",
                "lat": 48.87,
                "lon": 2.33,
                "tz_id": "Europe/Paris",
                "localtime": "2024-06-01 14:00",
            },
            "current": {
                "last_updated": "2024-06-01 13:45",
                "temp_c": temp_c,
                "temp_f": temp_c * 9 / 5 + 32,
                "is_day": 1,
                "condition": {"text": condition, "icon": "//cdn.weatherapi.com/weather/64x64/day/113.png", "code": 1000},
                "wind_kph": 11.2,
                "humidity": 52,
            },
        }

    return _make


@pytest.fixture
def mock_weather_response(make_weather_payload):
    """Default successful WeatherAPI.com payload (Paris, 21°C, Sunny)."""
    return make_weather_payload()


@pytest.fixture
def make_response():
    """Build a real httpx.Response bound to a request, so raise_for_status works."""

    def _make(status_code: int = 200, json: dict | None = None, text: str | None = None) -> httpx.Response:
        request = httpx.Request("GET", WEATHERAPI_TEST_URL)
        if json is not None:
            return httpx.Response(status_code, json=json, request=request)
        return httpx.Response(status_code, text=text or "", request=request)

    return _make


@pytest.fixture
def widget():
    """A fresh widget view-state."""
    return WeatherWidget("test-widget")


@pytest.fixture
def widget_state_manager():
    """A small widget registry."""
    return WidgetStateManager(max_widgets=3)
