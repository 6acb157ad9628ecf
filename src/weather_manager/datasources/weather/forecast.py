"""Weather forecast from the Open-Meteo Forecast API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_manager.config import get_settings
from weather_manager.datasources.weather.client import get_text

if TYPE_CHECKING:
    from weather_manager.schemas import Location


def fetch_forecast(lat: float, lon: float) -> str:
    """
    Fetch the forecast for a coordinate pair.

    Args:
        lat: Latitude.
        lon: Longitude.

    Returns:
        Raw response body.

    Raises:
        RequestError: If the request fails or returns a non-2xx status.
    """
    params = {"latitude": lat, "longitude": lon}
    return get_text(get_settings().forecast_url, params)


def fetch_forecast_for(location: Location) -> str:
    """Fetch the forecast at a registered location."""
    return fetch_forecast(location.latitude, location.longitude)
