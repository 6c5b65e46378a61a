"""Main FastAPI application entry point."""

import os
from pathlib import Path

from dotenv import load_dotenv

from weather_widget.core.app_factory import create_app
from weather_widget.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
setup_logging(os.getenv("LOG_LEVEL", "INFO"))

app = create_app()


def run() -> None:
    """Run the app with uvicorn using host/port from settings."""
    import uvicorn

    from weather_widget.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "weather_widget.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    run()
