"""Historical weather for a single day from the Open-Meteo history endpoint."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from weather_manager.config import get_settings
from weather_manager.datasources.weather.client import get_text

if TYPE_CHECKING:
    from weather_manager.schemas import Location


def _as_date(day: date | str) -> date:
    if isinstance(day, datetime):
        return day.date()
    if isinstance(day, date):
        return day
    return date.fromisoformat(day)


def fetch_historical(lat: float, lon: float, day: date | str) -> str:
    """
    Fetch historical weather for one day at a coordinate pair.

    Args:
        lat: Latitude.
        lon: Longitude.
        day: ``datetime.date`` or ISO date string (YYYY-MM-DD).

    Returns:
        Raw response body.

    Raises:
        ValueError: If ``day`` is not a valid ISO date; no request is made.
        RequestError: If the request fails or returns a non-2xx status.
    """
    params = {
        "latitude": lat,
        "longitude": lon,
        "date": _as_date(day).isoformat(),
    }
    return get_text(get_settings().history_url, params)


def fetch_historical_for(location: Location, day: date | str) -> str:
    """Fetch historical weather at a registered location."""
    return fetch_historical(location.latitude, location.longitude, day)
