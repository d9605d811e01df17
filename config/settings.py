"""Centralised configuration for the flight data orchestration layer."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROVIDER_HOSTS: dict[str, str] = {
    "test": "https://test.api.amadeus.com",
    "production": "https://api.amadeus.com",
}


class Settings(BaseSettings):
    """Environment-driven settings shared across components."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    amadeus_client_id: str | None = Field(
        None,
        description="Client identifier used for the client-credentials token exchange.",
    )
    amadeus_client_secret: str | None = Field(
        None,
        description="Client secret used for the client-credentials token exchange.",
    )
    amadeus_env: Literal["test", "production"] = "test"
    amadeus_base_url: str | None = Field(
        None,
        description="Overrides the host derived from amadeus_env.",
    )

    credential_store_path: Path = Field(
        Path("~/.flightdata/credentials.json"),
        description="Key-value file mirroring the active access token.",
    )
    http_timeout: float = Field(20.0, gt=0.0, le=120.0)
    search_max_results: int = Field(20, ge=1, le=250)
    location_page_limit: int = Field(10, ge=1, le=100)

    log_level: str = "INFO"

    @property
    def provider_base_url(self) -> str:
        if self.amadeus_base_url:
            return self.amadeus_base_url.rstrip("/")
        return PROVIDER_HOSTS[self.amadeus_env]


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
