"""Message helpers that turn raw weather values into widget text."""

import bisect
from datetime import datetime

from weather_widget.models.weather import CELSIUS

# Lower bounds (Celsius) of each temperature band
TEMPERATURE_THRESHOLDS = [0, 10, 20, 30, 40, 50]

TEMPERATURE_MESSAGES = [
    "It's freezing at {temp}°C! Bundle up!",
    "It's cold at {temp}°C. Wear warm clothes.",
    "It's chilly at {temp}°C. Comfortable with a light jacket.",
    "It's pleasant at {temp}°C. Enjoy the nice weather!",
    "It's warm at {temp}°C. Very hot, wear light clothing.",
    "It's warm at {temp}°C. Very hot, wear light clothing and drink water.",
]

WEATHER_MESSAGES = {
    "sunny": "It's a beautiful sunny day!",
    "partly cloudy": "Some clouds and sunshine.",
    "cloudy": "It's cloudy today.",
    "overcast": "The sky is overcast.",
    "rain": "Don't forget your umbrella, it's raining!",
    "storm": "Thunderstorms are expected today.",
    "mist": "It's misty outside.",
    "fog": "Be careful, there's fog outside.",
}

NIGHT_STARTS_AT = 18
DAY_STARTS_AT = 6


def format_temperature(temperature: float) -> str:
    """Render a temperature without a trailing '.0' for whole numbers."""
    if float(temperature).is_integer():
        return str(int(temperature))
    return str(temperature)


def get_temperature_message(temperature: float, unit: str) -> str:
    """Describe how the temperature feels.

    Only Celsius is supported; any other unit yields an empty string.
    From 50°C upwards only the bare value is shown.
    """
    if unit != CELSIUS:
        return ""

    temp = format_temperature(temperature)
    idx = bisect.bisect_right(TEMPERATURE_THRESHOLDS, temperature)
    if idx >= len(TEMPERATURE_MESSAGES):
        return f"{temp}° {unit}"
    return TEMPERATURE_MESSAGES[idx].format(temp=temp)


def get_weather_message(description: str) -> str:
    """Map a provider condition to a friendly sentence, echoing unknown ones."""
    return WEATHER_MESSAGES.get(description.lower(), description)


def is_night(hour: int) -> bool:
    return hour >= NIGHT_STARTS_AT or hour < DAY_STARTS_AT


def get_location_message(location: str, now: datetime | None = None) -> str:
    """Append a day/night suffix based on the local hour.

    Args:
        location: Resolved location name
        now: Point in time to judge by (defaults to the current local time)

    Returns:
        e.g. "Paris at night" or "Paris during the day"
    """
    if now is None:
        now = datetime.now()
    suffix = "at night" if is_night(now.hour) else "during the day"
    return f"{location} {suffix}"
