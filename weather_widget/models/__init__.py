"""Weather Widget models"""

from weather_widget.models.base_models import DetailedHealthResponse, ErrorResponse, HealthResponse
from weather_widget.models.weather import CurrentWeather, WeatherData, WeatherReport
from weather_widget.models.widget import WidgetState

__all__ = [
    "DetailedHealthResponse",
    "ErrorResponse",
    "HealthResponse",
    "CurrentWeather",
    "WeatherData",
    "WeatherReport",
    "WidgetState",
]
