"""Pydantic models for weather data."""

from pydantic import BaseModel

CELSIUS = "C"


class ProviderCondition(BaseModel):
    """Sky condition descriptor from WeatherAPI.com."""

    text: str


class ProviderCurrent(BaseModel):
    """Current conditions block from WeatherAPI.com."""

    temp_c: float
    condition: ProviderCondition


class ProviderLocation(BaseModel):
    """Resolved location block from WeatherAPI.com."""

    name: str


class CurrentWeather(BaseModel):
    """Raw WeatherAPI.com current.json response (consumed fields only)."""

    location: ProviderLocation
    current: ProviderCurrent


class WeatherData(BaseModel):
    """Weather shown by the widget."""

    temperature: float
    description: str
    location: str
    unit: str = CELSIUS

    @classmethod
    def from_weatherapi(cls, data: CurrentWeather) -> "WeatherData":
        """Create WeatherData from a WeatherAPI.com response.

        Args:
            data: Parsed current.json response

        Returns:
            WeatherData in Celsius
        """
        return cls(
            temperature=data.current.temp_c,
            description=data.current.condition.text,
            location=data.location.name,
            unit=CELSIUS,
        )


class WeatherReport(WeatherData):
    """Weather data with the rendered widget messages, for the JSON API."""

    temperature_message: str
    weather_message: str
    location_message: str
