"""Persistence for the provider access token across process restarts."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
TOKEN_EXPIRY_KEY = "token_expiry"


class Credential(BaseModel):
    """Bearer token plus the instant it stops being usable."""

    model_config = ConfigDict(frozen=True)

    token: str
    expires_at: datetime

    @field_validator("expires_at")
    @classmethod
    def ensure_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def is_valid(self, now: datetime) -> bool:
        """A credential is usable strictly before its expiry, no grace period."""

        return now < self.expires_at

    def to_record(self) -> dict[str, str]:
        return {
            TOKEN_KEY: self.token,
            TOKEN_EXPIRY_KEY: self.expires_at.isoformat(),
        }


@runtime_checkable
class CredentialStore(Protocol):
    """Capability the token manager uses to mirror its credential."""

    def load(self) -> Credential | None: ...

    def save(self, credential: Credential) -> None: ...

    def evict(self) -> None: ...


def _credential_from_record(record: dict[str, object]) -> Credential | None:
    token = record.get(TOKEN_KEY)
    expiry = record.get(TOKEN_EXPIRY_KEY)
    if not token or not expiry:
        return None
    try:
        return Credential(token=token, expires_at=expiry)
    except ValidationError as exc:
        logger.warning("Ignoring unreadable stored credential: %s", exc)
        return None


class InMemoryCredentialStore:
    """Dict-backed store, handy for tests and short-lived processes."""

    def __init__(self, credential: Credential | None = None) -> None:
        self._record: dict[str, str] = credential.to_record() if credential else {}
        self.saves = 0
        self.evictions = 0

    def load(self) -> Credential | None:
        return _credential_from_record(self._record)

    def save(self, credential: Credential) -> None:
        self._record = credential.to_record()
        self.saves += 1

    def evict(self) -> None:
        self._record = {}
        self.evictions += 1


class FileCredentialStore:
    """JSON key-value file holding the `token` and `token_expiry` entries."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Credential | None:
        if not self._path.exists():
            return None
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                record = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read credential store %s: %s", self._path, exc)
            return None
        if not isinstance(record, dict):
            return None
        return _credential_from_record(record)

    def save(self, credential: Credential) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as handle:
                json.dump(credential.to_record(), handle)
        except OSError as exc:
            logger.warning("Could not write credential store %s: %s", self._path, exc)

    def evict(self) -> None:
        # Both keys live in one file, so they go together.
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not clear credential store %s: %s", self._path, exc)


__all__ = [
    "Credential",
    "CredentialStore",
    "FileCredentialStore",
    "InMemoryCredentialStore",
    "TOKEN_EXPIRY_KEY",
    "TOKEN_KEY",
]
