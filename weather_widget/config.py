from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # weather-widget/

WEATHERAPI_URL = "http://api.weatherapi.com/v1/current.json"


class Settings(BaseSettings):
    """Application settings with validation.

    The weather API key is required and will raise a validation error if missing.
    Secrets must be provided via environment variables or .env file.

    Uses Pydantic v2 API:
    - model_config with SettingsConfigDict
    - @field_validator decorator
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # Weather API - required for every search
    weather_api_key: str = Field(min_length=1, description="WeatherAPI.com API key")
    weather_api_url: str = Field(
        default=WEATHERAPI_URL,
        pattern=r"^https?://",
        description="WeatherAPI.com current conditions endpoint",
    )

    # Widget registry bound (one entry per rendered page)
    max_widgets: int = Field(default=1000, ge=1, description="Maximum number of live widget states kept in memory")

    # Security
    trusted_hosts: str = Field(
        default="localhost,127.0.0.1,testserver",
        description="Comma-separated list of allowed Host headers",
    )
    cors_origins: str = Field(
        default="http://localhost:8000,http://127.0.0.1:8000",
        description="Comma-separated list of allowed CORS origins",
    )

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,  # Validate defaults too
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("weather_api_key", mode="after")
    @classmethod
    def validate_weather_api_key(cls, v: str) -> str:
        """Ensure weather_api_key is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("weather_api_key must not be empty")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request. Use this with FastAPI's Depends() for
    dependency injection.

    Returns:
        Cached Settings instance

    Example:
        @app.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"host": settings.api_host}
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
