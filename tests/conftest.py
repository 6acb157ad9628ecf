"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from weather_manager.config import get_settings
from weather_manager.services.http import close_session


@pytest.fixture(autouse=True)
def _fresh_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Iterator[None]:
    """Isolate every test from the developer's environment and ``.env``."""
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    get_settings.cache_clear()
    close_session()
    yield
    get_settings.cache_clear()
    close_session()
