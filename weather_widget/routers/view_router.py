"""Page/view routes for serving the widget page and its HTMX fragments."""

import httpx
from fastapi import APIRouter, Depends, Form, Request, Response, status
from fastapi.responses import HTMLResponse

from weather_widget.config import Settings, get_settings
from weather_widget.dependencies import get_http_client, get_page_widget, get_widget_state_manager
from weather_widget.services import widget_service
from weather_widget.state_managers import WeatherWidget, WidgetStateManager
from weather_widget.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    manager: WidgetStateManager = Depends(get_widget_state_manager),
):
    """Render the widget page with a fresh view-state."""
    widget = await manager.create()
    return await TemplateRenderer.render_index(request, widget)


@router.get("/favicon.ico", include_in_schema=False)
async def favicon():
    """Return empty favicon to prevent 404 errors."""
    return Response(content=b"", media_type="image/x-icon")


@router.post("/widget/{widget_id}/location", status_code=status.HTTP_204_NO_CONTENT)
async def update_location(
    location: str = Form(""),
    widget: WeatherWidget = Depends(get_page_widget),
):
    """Record the search box text on every keystroke."""
    await widget.set_location(location)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/widget/{widget_id}/search", response_class=HTMLResponse)
async def search(
    request: Request,
    location: str = Form(""),
    widget: WeatherWidget = Depends(get_page_widget),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Run a search and render the result fragment."""
    state = await widget_service.handle_search(widget, location, client, settings)
    return TemplateRenderer.render_result(request, state)


@router.get("/widget/{widget_id}", response_class=HTMLResponse)
async def widget_result(
    request: Request,
    widget: WeatherWidget = Depends(get_page_widget),
):
    """Re-render the result fragment from the current state."""
    state = await widget.snapshot()
    return TemplateRenderer.render_result(request, state)
