"""Weather service for WeatherAPI.com integration."""

import httpx

from weather_widget.config import Settings, get_settings
from weather_widget.exceptions import WeatherAPIException, WeatherException
from weather_widget.logging_config import get_logger, log_with_context
from weather_widget.models.weather import CurrentWeather, WeatherData

logger = get_logger(__name__)


async def get_current_weather(
    client: httpx.AsyncClient,
    location: str,
    settings: Settings | None = None,
) -> WeatherData:
    """Get current weather for a location from WeatherAPI.com.

    Issues exactly one request; there is no retry and no caching.

    Args:
        client: Shared HTTP client for making requests
        location: City name, passed through as the `q` parameter
        settings: Settings instance (defaults to singleton)

    Returns:
        WeatherData in Celsius

    Raises:
        WeatherAPIException: If the API answers with a non-success status
        WeatherException: If the request fails or the response can't be parsed
    """
    if settings is None:
        settings = get_settings()

    params = {
        "key": settings.weather_api_key,
        "q": location,
    }

    try:
        response = await client.get(settings.weather_api_url, params=params)
        response.raise_for_status()
        data = response.json()

        # Validate and parse into Pydantic model
        current_weather = CurrentWeather.model_validate(data)
        weather = WeatherData.from_weatherapi(current_weather)

    except httpx.HTTPStatusError as e:
        raise WeatherAPIException(
            f"Weather API request failed (HTTP {e.response.status_code}): {e.response.text}",
            status_code=e.response.status_code,
            details={"api_response": e.response.text, "location": location},
        ) from e
    except httpx.HTTPError as e:
        raise WeatherException(
            f"Failed to fetch weather data: {str(e)}",
            details={"error_type": "network_error", "location": location},
        ) from e
    except Exception as e:
        raise WeatherException(
            f"Failed to process weather data: {str(e)}",
            details={"error_type": "parsing_error", "location": location},
        ) from e

    log_with_context(
        logger,
        "info",
        "Weather fetched",
        location=weather.location,
        temperature=weather.temperature,
        event_type="weather_fetched",
    )
    return weather
