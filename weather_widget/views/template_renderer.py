"""Template rendering utilities for HTML views."""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from weather_widget.formatting import get_location_message, get_temperature_message, get_weather_message
from weather_widget.models.widget import WidgetState
from weather_widget.state_managers import WeatherWidget

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for the widget views."""

    @staticmethod
    async def render_index(request: Request, widget: WeatherWidget) -> HTMLResponse:
        """Render the widget page for a freshly registered widget."""
        state = await widget.snapshot()
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "widget_id": widget.widget_id,
                "location": state.location,
                **TemplateRenderer.result_context(state),
            },
        )

    @staticmethod
    def render_result(request: Request, state: WidgetState) -> HTMLResponse:
        """Render the search result fragment (error line or message rows).

        Args:
            request: FastAPI request object
            state: Widget state snapshot to render

        Returns:
            HTMLResponse with the rendered fragment
        """
        return templates.TemplateResponse(
            request,
            "partials/weather_result.html",
            TemplateRenderer.result_context(state),
        )

    @staticmethod
    def result_context(state: WidgetState) -> dict:
        """Build the template context for a widget state."""
        if state.weather is None:
            return {"error": state.error, "weather": None, "is_loading": state.is_loading}

        weather = state.weather
        return {
            "error": state.error,
            "is_loading": state.is_loading,
            "weather": weather,
            "temperature_message": get_temperature_message(weather.temperature, weather.unit),
            "weather_message": get_weather_message(weather.description),
            "location_message": get_location_message(weather.location),
        }
