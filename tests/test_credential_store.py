from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from credentials.store import Credential, FileCredentialStore, InMemoryCredentialStore


def _credential() -> Credential:
    return Credential(token="abc123", expires_at=datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc))


def test_file_store_round_trips_token_and_expiry(tmp_path: Path) -> None:
    store = FileCredentialStore(tmp_path / "nested" / "credentials.json")

    store.save(_credential())

    record = json.loads(store.path.read_text(encoding="utf-8"))
    assert record == {"token": "abc123", "token_expiry": "2030-01-01T12:00:00+00:00"}
    assert store.load() == _credential()


def test_file_store_evict_removes_both_entries(tmp_path: Path) -> None:
    store = FileCredentialStore(tmp_path / "credentials.json")
    store.save(_credential())

    store.evict()

    assert not store.path.exists()
    assert store.load() is None
    store.evict()


def test_file_store_ignores_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "credentials.json"
    path.write_text("{not json", encoding="utf-8")

    assert FileCredentialStore(path).load() is None


def test_file_store_ignores_unparseable_expiry(tmp_path: Path) -> None:
    path = tmp_path / "credentials.json"
    path.write_text(json.dumps({"token": "abc", "token_expiry": "tomorrow-ish"}), encoding="utf-8")

    assert FileCredentialStore(path).load() is None


def test_naive_expiry_is_treated_as_utc() -> None:
    credential = Credential(token="t", expires_at=datetime(2030, 1, 1))
    assert credential.expires_at.tzinfo == timezone.utc


def test_credential_has_no_grace_period() -> None:
    credential = _credential()
    assert credential.is_valid(datetime(2030, 1, 1, 11, 59, 59, tzinfo=timezone.utc))
    assert not credential.is_valid(credential.expires_at)


def test_in_memory_store_counts_mutations() -> None:
    store = InMemoryCredentialStore()
    assert store.load() is None

    store.save(_credential())
    store.evict()

    assert store.saves == 1
    assert store.evictions == 1
    assert store.load() is None


def test_file_store_save_failure_is_logged_not_raised(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    store = FileCredentialStore(blocker / "credentials.json")

    store.save(_credential())

    assert store.load() is None
