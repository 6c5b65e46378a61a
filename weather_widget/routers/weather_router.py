"""Weather API routes (JSON)."""

import httpx
from fastapi import APIRouter, Depends, Query

from weather_widget.config import Settings, get_settings
from weather_widget.dependencies import get_http_client, get_widget
from weather_widget.models.base_models import ErrorResponse
from weather_widget.models.weather import WeatherReport
from weather_widget.models.widget import WidgetState
from weather_widget.services import widget_service
from weather_widget.state_managers import WeatherWidget

router = APIRouter()


@router.get(
    "/weather/current",
    response_model=WeatherReport,
    summary="Get current weather",
    description="""
    Retrieves current weather conditions for a city from WeatherAPI.com,
    together with the messages the widget would show.

    Every failure is reported as `CITY_NOT_FOUND`; blank input as `INVALID_LOCATION`.
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "temperature": 25.0,
                        "description": "Sunny",
                        "location": "Lisbon",
                        "unit": "C",
                        "temperature_message": "It's pleasant at 25°C. Enjoy the nice weather!",
                        "weather_message": "It's a beautiful sunny day!",
                        "location_message": "Lisbon during the day",
                    }
                }
            },
        },
        400: {"model": ErrorResponse, "description": "Blank location"},
        404: {"model": ErrorResponse, "description": "City not found or weather API failure"},
    },
)
async def get_current_weather(
    location: str = Query(default="", description="City name to search for"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Get current weather data with widget messages.

    Args:
        location: City name as typed by the user
        client: HTTP client from dependency injection
        settings: Settings from dependency injection

    Returns:
        WeatherReport
    """
    weather = await widget_service.lookup(client, location, settings)
    return widget_service.build_report(weather)


@router.get(
    "/widget/{widget_id}",
    response_model=WidgetState,
    summary="Get widget view-state",
    responses={404: {"model": ErrorResponse, "description": "Unknown widget"}},
)
async def get_widget_state(widget: WeatherWidget = Depends(get_widget)):
    """Return the current view-state of a rendered widget."""
    return await widget.snapshot()
