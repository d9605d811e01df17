from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import get_settings


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure provider credentials exist during tests."""

    monkeypatch.setenv("AMADEUS_CLIENT_ID", "test-client-id")
    monkeypatch.setenv("AMADEUS_CLIENT_SECRET", "test-client-secret")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
