from __future__ import annotations

import pytest

from config.settings import Settings, get_settings


def test_credentials_load_from_environment() -> None:
    settings = get_settings()

    assert settings.amadeus_client_id == "test-client-id"
    assert settings.amadeus_client_secret == "test-client-secret"
    assert settings.provider_base_url == "https://test.api.amadeus.com"


def test_missing_credentials_do_not_fail_settings_load(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AMADEUS_CLIENT_ID")
    monkeypatch.delenv("AMADEUS_CLIENT_SECRET")

    settings = Settings(_env_file=None)

    assert settings.amadeus_client_id is None


def test_production_env_and_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AMADEUS_ENV", "production")
    assert Settings().provider_base_url == "https://api.amadeus.com"

    monkeypatch.setenv("AMADEUS_BASE_URL", "http://localhost:8080/")
    assert Settings().provider_base_url == "http://localhost:8080"
