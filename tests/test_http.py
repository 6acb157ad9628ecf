"""Tests for the shared HTTP session."""

from __future__ import annotations

from unittest.mock import patch

import pytest
import requests
from urllib3.util.retry import Retry

from weather_manager.config import get_settings
from weather_manager.services.http import (
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    close_session,
    create_session,
    get_session,
)


class TestDefaultRetry:
    """Failed requests are not retried."""

    def test_no_retries(self) -> None:
        assert DEFAULT_RETRY.total == 0


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_https_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_mounts_http_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("http://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_adapter_has_no_retry(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 0

    def test_custom_retry(self) -> None:
        s = create_session(retry=Retry(total=3))
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 3

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"].startswith("weather-manager/")

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99


class TestProcessSession:
    """The long-lived, process-wide session."""

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30

    def test_reused_across_calls(self) -> None:
        assert get_session() is get_session()

    def test_close_then_recreate(self) -> None:
        first = get_session()
        close_session()
        assert get_session() is not first

    def test_close_without_session_is_noop(self) -> None:
        close_session()
        close_session()

    def test_uses_configured_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_HTTP_TIMEOUT", "5")
        get_settings.cache_clear()

        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            get_session().send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 5.0


class TestTimeoutThroughRequest:
    """Session.get passes ``timeout=None`` to send; the default must still apply."""

    def test_get_without_timeout_uses_default(self) -> None:
        s = create_session(timeout=42)
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.get("https://example.com")
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_get_with_explicit_timeout(self) -> None:
        s = create_session(timeout=42)
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.get("https://example.com", timeout=3)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 3

    def test_process_session_get_uses_configured_timeout(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WEATHER_HTTP_TIMEOUT", "5")
        get_settings.cache_clear()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            get_session().get("https://example.com")
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 5.0
