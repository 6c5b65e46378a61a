"""Tests for weather and widget models."""

import pytest
from pydantic import ValidationError

from weather_widget.models.weather import CurrentWeather, WeatherData
from weather_widget.models.widget import WidgetState


class TestCurrentWeather:
    """Tests for parsing WeatherAPI.com responses."""

    def test_parses_consumed_fields(self, mock_weather_response):
        data = CurrentWeather.model_validate(mock_weather_response)

        assert data.location.name == "Paris"
        assert data.current.temp_c == 21.0
        assert data.current.condition.text == "Sunny"

    def test_missing_condition_rejected(self, mock_weather_response):
        del mock_weather_response["current"]["condition"]

        with pytest.raises(ValidationError):
            CurrentWeather.model_validate(mock_weather_response)


class TestWeatherData:
    """Tests for WeatherData."""

    def test_from_weatherapi(self, make_weather_payload):
        data = CurrentWeather.model_validate(make_weather_payload(name="Reykjavik", temp_c=-3.5, condition="Mist"))

        weather = WeatherData.from_weatherapi(data)

        assert weather.temperature == -3.5
        assert weather.description == "Mist"
        assert weather.location == "Reykjavik"
        assert weather.unit == "C"


class TestWidgetState:
    """Tests for WidgetState defaults."""

    def test_defaults(self):
        state = WidgetState()

        assert state.location == ""
        assert state.weather is None
        assert state.error is None
        assert state.is_loading is False
