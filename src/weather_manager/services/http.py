"""
Shared HTTP client.

Provides one pre-configured ``requests.Session`` for the whole process so
connections are pooled and reused across calls. Every request gets a default
timeout, so a peer that never answers cannot block the caller forever.
Failed requests are not retried.

Usage::

    from weather_manager.services.http import get_session

    resp = get_session().get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_manager import __version__
from weather_manager.config import get_settings

logger = logging.getLogger(__name__)

#: No retries: a failed request is reported to the caller straight away.
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"weather-manager/{__version__}"

_session: requests.Session | None = None


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Session.request always passes ``timeout`` to send (None when the caller
    # gave none), so fill it in whenever it is missing or None.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


def get_session() -> requests.Session:
    """Return the process-wide session, creating it on first use."""
    global _session
    if _session is None:
        timeout = get_settings().http_timeout
        _session = create_session(timeout=timeout)
        logger.debug("Created HTTP session (timeout=%ss)", timeout)
    return _session


def close_session() -> None:
    """Close the process-wide session. The next ``get_session()`` builds a new one."""
    global _session
    if _session is not None:
        _session.close()
        _session = None
        logger.debug("Closed HTTP session")
