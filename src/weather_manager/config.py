"""
Application settings.

Values come from the environment (``WEATHER_`` prefix) or a local ``.env``
file, e.g. ``WEATHER_HTTP_TIMEOUT=10`` or ``WEATHER_LAT=45.5``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Open-Meteo endpoints (https://open-meteo.com/en/docs)
OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"
OPEN_METEO_HISTORY = "https://api.open-meteo.com/v1/history"


class Settings(BaseSettings):
    """Runtime configuration for the CLI and the HTTP clients."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "weather-manager"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "WARNING"

    # Endpoints
    forecast_url: str = OPEN_METEO_API
    history_url: str = OPEN_METEO_HISTORY
    http_timeout: float = Field(default=30.0, gt=0, description="Seconds per request")

    # Default coordinates (CityA)
    lat: float = Field(default=35.0, ge=-90, le=90)
    lon: float = Field(default=-78.0, ge=-180, le=180)

    csv_path: Path = Path("weather_data.csv")
    json_path: Path = Path("weather_data.json")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
