"""Health endpoints."""

from datetime import UTC, datetime

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from weather_widget import __version__
from weather_widget.config import Settings, get_settings
from weather_widget.dependencies import get_http_client, get_widget_state_manager
from weather_widget.models import DetailedHealthResponse, HealthResponse
from weather_widget.state_managers import WidgetStateManager

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for Docker healthcheck and basic monitoring.
    For detailed health status, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(
    client: httpx.AsyncClient = Depends(get_http_client),
    manager: WidgetStateManager = Depends(get_widget_state_manager),
    settings: Settings = Depends(get_settings),
):
    """Readiness probe - can the application serve traffic?

    Checks local dependencies only; the weather API is never called so
    probes don't spend provider quota.

    **Returns:**
    - 200: Application is ready to serve requests
    - 503: Application is not ready
    """
    checks = {}
    all_healthy = True

    checks["http_client"] = "failed" if client.is_closed else "ok"
    if client.is_closed:
        all_healthy = False

    checks["widget_registry"] = f"ok ({await manager.count()} widgets)"

    if settings.weather_api_key:
        checks["weather_api_key"] = "ok"
    else:
        checks["weather_api_key"] = "missing"
        all_healthy = False

    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content=DetailedHealthResponse(
            status="healthy" if all_healthy else "unhealthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
        ).model_dump(mode="json"),
    )
