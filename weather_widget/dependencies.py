"""FastAPI dependencies for dependency injection."""

import httpx
from fastapi import Depends, Path, Request

from weather_widget.state_managers import WeatherWidget, WidgetStateManager


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared AsyncClient instance.

    Raises:
        RuntimeError: If HTTP client is not initialized.
    """
    client: httpx.AsyncClient | None = getattr(request.app.state, "http_client", None)

    if client is None:
        raise RuntimeError("HTTP client not initialized. This should never happen.")

    return client


async def get_widget_state_manager(request: Request) -> WidgetStateManager:
    """
    Get the widget state registry from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared WidgetStateManager instance.

    Raises:
        RuntimeError: If the widget state manager is not initialized.
    """
    manager: WidgetStateManager | None = getattr(request.app.state, "widget_state_manager", None)

    if manager is None:
        raise RuntimeError("Widget state manager not initialized.")

    return manager


async def get_widget(
    widget_id: str,
    manager: WidgetStateManager = Depends(get_widget_state_manager),
) -> WeatherWidget:
    """Resolve the widget addressed by the `widget_id` path parameter."""
    return await manager.get(widget_id)


async def get_page_widget(
    widget_id: str = Path(min_length=1, max_length=64, pattern=r"^[A-Za-z0-9_-]+$"),
    manager: WidgetStateManager = Depends(get_widget_state_manager),
) -> WeatherWidget:
    """Resolve the widget for an HTML page route, restoring it if it was evicted."""
    return await manager.get_or_restore(widget_id)
