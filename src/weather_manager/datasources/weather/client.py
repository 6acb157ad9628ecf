"""Open-Meteo request helper shared by the forecast and history fetchers.

Endpoint URLs come from :class:`weather_manager.config.Settings`
(``WEATHER_FORECAST_URL`` / ``WEATHER_HISTORY_URL``).
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from weather_manager.errors import RequestError
from weather_manager.services.http import get_session

logger = logging.getLogger(__name__)


def get_text(url: str, params: dict[str, Any]) -> str:
    """
    GET ``url`` with ``params`` and return the body as text.

    Args:
        url: Endpoint URL without query string.
        params: Query parameters.

    Returns:
        The full response body, unparsed.

    Raises:
        RequestError: On DNS/connection failure, timeout, or a non-2xx status.
    """
    logger.debug("GET %s params=%s", url, params)
    try:
        resp = get_session().get(url, params=params)
        resp.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        logger.warning("Request to %s failed with status %s", url, status)
        msg = f"{url} returned HTTP {status}"
        raise RequestError(msg, url=url, status_code=status) from exc
    except requests.RequestException as exc:
        logger.warning("Request to %s failed: %s", url, exc)
        msg = f"Request to {url} failed: {exc}"
        raise RequestError(msg, url=url) from exc
    return resp.text
