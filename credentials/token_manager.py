"""Access-token lifecycle: reuse, reload from storage, or re-exchange."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx

from credentials.store import Credential, CredentialStore
from shared.errors import AuthenticationError, ConfigurationError, NetworkError

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/security/oauth2/token"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenManager:
    """Hands out bearer tokens and never returns an expired one.

    Lookup order on every call: the in-memory credential, then the
    credential store, then a client-credentials exchange against the
    provider. Concurrent callers that arrive while an exchange is in
    flight wait for it instead of starting their own.
    """

    def __init__(
        self,
        base_url: str,
        client_id: str | None,
        client_secret: str | None,
        store: CredentialStore,
        *,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client_id = (client_id or "").strip()
        self._client_secret = (client_secret or "").strip()
        self._store = store
        self._timeout = timeout
        self._transport = transport
        self._clock = clock
        self._credential: Credential | None = None
        self._lock = asyncio.Lock()
        self.exchange_count = 0

    @property
    def credential(self) -> Credential | None:
        return self._credential

    async def acquire_token(self) -> str:
        token = self._usable_token()
        if token:
            return token
        async with self._lock:
            # Another caller may have refreshed while we waited.
            token = self._usable_token() or self._adopt_stored()
            if token:
                return token
            credential = await self._exchange()
            self._credential = credential
            self._store.save(credential)
            return credential.token

    def _usable_token(self) -> str | None:
        if self._credential and self._credential.is_valid(self._clock()):
            logger.debug("Reusing in-memory access token")
            return self._credential.token
        return None

    def _adopt_stored(self) -> str | None:
        stored = self._store.load()
        if stored is None:
            return None
        if stored.is_valid(self._clock()):
            logger.debug("Adopted stored access token expiring at %s", stored.expires_at)
            self._credential = stored
            return stored.token
        logger.warning("Evicting expired stored access token (expired %s)", stored.expires_at)
        self._store.evict()
        return None

    async def _exchange(self) -> Credential:
        if not self._client_id or not self._client_secret:
            raise ConfigurationError(
                "Missing provider credentials. Set AMADEUS_CLIENT_ID and AMADEUS_CLIENT_SECRET."
            )

        data = {
            "grant_type": "client_credentials",
            "client_id": self._client_id,
            "client_secret": self._client_secret,
        }
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        self.exchange_count += 1
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    f"{self._base_url}{TOKEN_PATH}", data=data, headers=headers
                )
        except httpx.TransportError as exc:
            raise NetworkError("Token endpoint unreachable") from exc

        if not response.is_success:
            raise AuthenticationError(response.reason_phrase, status=response.status_code)

        credential = self._parse_token_payload(response)
        logger.info("Obtained provider access token valid until %s", credential.expires_at)
        return credential

    def _parse_token_payload(self, response: httpx.Response) -> Credential:
        try:
            payload: dict[str, Any] = response.json()
            token = payload["access_token"]
            ttl_seconds = int(payload["expires_in"])
        except (ValueError, KeyError, TypeError) as exc:
            raise AuthenticationError(
                "malformed token response", status=response.status_code
            ) from exc
        if not isinstance(token, str) or not token:
            raise AuthenticationError("malformed token response", status=response.status_code)
        return Credential(token=token, expires_at=self._clock() + timedelta(seconds=ttl_seconds))


__all__ = ["TOKEN_PATH", "TokenManager", "utc_now"]
