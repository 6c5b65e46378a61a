"""Custom exceptions for the Weather Widget with HTTP status codes."""

from enum import Enum
from typing import Any

# User-facing messages shown inline in the widget
INVALID_LOCATION_MESSAGE = "Please enter a valid location"
CITY_NOT_FOUND_MESSAGE = "City not found. Please try again."


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    WIDGET_ERROR = "WIDGET_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Search errors
    INVALID_LOCATION = "INVALID_LOCATION"
    CITY_NOT_FOUND = "CITY_NOT_FOUND"
    WIDGET_NOT_FOUND = "WIDGET_NOT_FOUND"

    # Weather provider errors
    WEATHER_ERROR = "WEATHER_ERROR"
    WEATHER_API_ERROR = "WEATHER_API_ERROR"


class WidgetException(Exception):
    """Base exception for widget errors with HTTP status code support.

    All custom exceptions inherit from this class so the error handlers
    can turn them into consistent JSON responses.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WIDGET_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize widget exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class InvalidLocationException(WidgetException):
    """Submitted location is empty or whitespace only."""

    def __init__(self, message: str = INVALID_LOCATION_MESSAGE, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.INVALID_LOCATION,
            status_code=400,
            details=details,
        )


class CityNotFoundException(WidgetException):
    """Weather lookup failed for any reason."""

    def __init__(self, message: str = CITY_NOT_FOUND_MESSAGE, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.CITY_NOT_FOUND,
            status_code=404,
            details=details,
        )


class WidgetNotFoundException(WidgetException):
    """No live widget state for the given id."""

    def __init__(self, widget_id: str):
        super().__init__(
            f"Widget '{widget_id}' not found",
            code=ErrorCode.WIDGET_NOT_FOUND,
            status_code=404,
            details={"widget_id": widget_id},
        )


class WeatherException(WidgetException):
    """Weather provider errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class WeatherAPIException(WeatherException):
    """Weather API answered with a non-success status."""

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_API_ERROR,
            status_code=status_code,
            details=details,
        )
