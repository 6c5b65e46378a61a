"""Unit tests for configuration."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from weather_widget.config import WEATHERAPI_URL, Settings, get_settings


def test_settings_defaults():
    """Test Settings model has correct defaults."""
    settings = Settings(weather_api_key="test-key")

    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 8000
    assert settings.weather_api_url == WEATHERAPI_URL
    assert settings.max_widgets == 1000


def test_weather_api_key_is_stripped():
    settings = Settings(weather_api_key="  abc123  ")

    assert settings.weather_api_key == "abc123"


def test_blank_weather_api_key_rejected():
    with pytest.raises(ValidationError):
        Settings(weather_api_key="   ")


def test_invalid_weather_api_url_rejected():
    with pytest.raises(ValidationError):
        Settings(weather_api_key="key", weather_api_url="ftp://example.com")


def test_invalid_port_rejected():
    with pytest.raises(ValidationError):
        Settings(weather_api_key="key", api_port=70000)


def test_settings_env_loading():
    """Test settings can load from environment."""
    with patch.dict(
        "os.environ",
        {
            "WEATHER_API_KEY": "env-key",
            "API_PORT": "9000",
            "MAX_WIDGETS": "50",
            "TRUSTED_HOSTS": "example.com",
        },
    ):
        settings = Settings()

        assert settings.weather_api_key == "env-key"
        assert settings.api_port == 9000
        assert settings.max_widgets == 50
        assert settings.trusted_hosts == "example.com"


def test_get_settings_singleton():
    """Test get_settings returns singleton instance."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
