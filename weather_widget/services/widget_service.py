"""Search handling for the weather widget."""

from datetime import datetime

import httpx

from weather_widget.config import Settings
from weather_widget.exceptions import (
    CITY_NOT_FOUND_MESSAGE,
    CityNotFoundException,
    InvalidLocationException,
    WeatherException,
)
from weather_widget.formatting import get_location_message, get_temperature_message, get_weather_message
from weather_widget.logging_config import get_logger, log_with_context
from weather_widget.models.weather import WeatherData, WeatherReport
from weather_widget.models.widget import WidgetState
from weather_widget.services import weather_service
from weather_widget.state_managers import WeatherWidget

logger = get_logger(__name__)


def normalize_location(raw_location: str) -> str:
    """Trim the submitted location.

    Raises:
        InvalidLocationException: If nothing is left after trimming
    """
    location = raw_location.strip()
    if not location:
        raise InvalidLocationException()
    return location


async def lookup(client: httpx.AsyncClient, raw_location: str, settings: Settings | None = None) -> WeatherData:
    """Fetch weather for user input, collapsing every failure into one error.

    Raises:
        InvalidLocationException: If the input is blank
        CityNotFoundException: If the weather could not be fetched for any reason
    """
    location = normalize_location(raw_location)

    try:
        return await weather_service.get_current_weather(client, location, settings)
    except WeatherException as e:
        log_with_context(
            logger,
            "warning",
            "Weather lookup failed",
            location=location,
            error=e.message,
            error_code=e.code.value,
            event_type="weather_lookup_failed",
        )
        raise CityNotFoundException(details={"location": location}) from e


def build_report(weather: WeatherData, now: datetime | None = None) -> WeatherReport:
    """Attach the rendered widget messages to weather data."""
    return WeatherReport(
        **weather.model_dump(),
        temperature_message=get_temperature_message(weather.temperature, weather.unit),
        weather_message=get_weather_message(weather.description),
        location_message=get_location_message(weather.location, now),
    )


async def handle_search(
    widget: WeatherWidget,
    raw_location: str,
    client: httpx.AsyncClient,
    settings: Settings | None = None,
) -> WidgetState:
    """Handle a search form submission for one widget.

    Blank input sets an error without any network call. Otherwise exactly one
    request is made and the loading flag is cleared on every outcome. Searches
    are not serialized: if two overlap, whichever completes last wins.

    Args:
        widget: Widget whose state is updated
        raw_location: Text as submitted by the user
        client: Shared HTTP client
        settings: Settings instance (defaults to singleton)

    Returns:
        Snapshot of the widget state after the search
    """
    await widget.set_location(raw_location)

    try:
        location = normalize_location(raw_location)
    except InvalidLocationException as e:
        await widget.show_error(e.message)
        return await widget.snapshot()

    await widget.start_loading()
    log_with_context(
        logger,
        "info",
        "Widget search started",
        widget_id=widget.widget_id,
        location=location,
        event_type="widget_search_started",
    )

    try:
        weather = await lookup(client, location, settings)
    except CityNotFoundException:
        await widget.show_error(CITY_NOT_FOUND_MESSAGE)
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Unexpected error during widget search",
            widget_id=widget.widget_id,
            error=str(e),
            error_type=type(e).__name__,
            event_type="widget_search_error",
        )
        await widget.show_error(CITY_NOT_FOUND_MESSAGE)
    else:
        await widget.show_weather(weather)
    finally:
        await widget.stop_loading()

    return await widget.snapshot()
