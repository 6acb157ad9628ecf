"""Open-Meteo weather data source.

Fetches forecast and historical weather from Open-Meteo (free, no API key)
and returns the response body untouched.

Public API:
  - forecast: fetch_forecast, fetch_forecast_for
  - historical: fetch_historical, fetch_historical_for
  - client: get_text (shared GET helper)
"""

from weather_manager.datasources.weather.client import get_text
from weather_manager.datasources.weather.forecast import fetch_forecast, fetch_forecast_for
from weather_manager.datasources.weather.historical import (
    fetch_historical,
    fetch_historical_for,
)

__all__ = [
    "fetch_forecast",
    "fetch_forecast_for",
    "fetch_historical",
    "fetch_historical_for",
    "get_text",
]
