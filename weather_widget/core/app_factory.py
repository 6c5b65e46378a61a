"""Application factory for creating and configuring the FastAPI app."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from weather_widget import __version__
from weather_widget.config import get_settings
from weather_widget.core.lifespan import lifespan
from weather_widget.core.middleware import setup_middleware
from weather_widget.middleware.error_handlers import register_error_handlers
from weather_widget.routers import health_router, view_router, weather_router

STATIC_DIR = Path(__file__).parent.parent / "static"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Weather Widget",
        description="""
        🌤️ **Weather Widget** - Search current weather in a city

        ## Pages
        - `/` - The widget page (HTML + HTMX)

        ## API
        - `/api/weather/current?location=...` - Current weather with widget messages
        - `/api/widget/{widget_id}` - View-state of a rendered widget

        ## 📊 Health
        - `/health` - Basic health check
        - `/health/ready` - Readiness probe
        """,
        version=__version__,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)

    register_error_handlers(app)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # View routes (HTML page and widget fragments) - no prefix
    app.include_router(view_router.router, tags=["views"])

    app.include_router(health_router.router, tags=["health"])

    app.include_router(weather_router.router, prefix="/api", tags=["weather"])

    return app
