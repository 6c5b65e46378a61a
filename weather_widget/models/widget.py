"""View-state of a single displayed widget."""

from pydantic import BaseModel, Field

from weather_widget.models.weather import WeatherData


class WidgetState(BaseModel):
    """Transient widget state, held only while its page is displayed.

    A populated ``weather`` and an ``error`` are never set together.
    """

    location: str = Field(default="", description="Text currently typed into the search box")
    weather: WeatherData | None = Field(default=None, description="Result of the last successful search")
    error: str | None = Field(default=None, description="User-facing error message")
    is_loading: bool = Field(default=False, description="True while a search request is in flight")
