"""Authenticated HTTP client for the provider's shopping and reference-data endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from credentials.token_manager import TokenManager
from flight_search.models import SearchQuery
from shared.errors import NetworkError, ProviderError

logger = logging.getLogger(__name__)

FLIGHT_OFFERS_PATH = "/v2/shopping/flight-offers"
LOCATIONS_PATH = "/v1/reference-data/locations"


class ProviderClient:
    """Thin async client; every call fetches a bearer token first."""

    def __init__(
        self,
        base_url: str,
        token_manager: TokenManager,
        *,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token_manager = token_manager
        self._timeout = timeout
        self._transport = transport

    async def search_offers(self, query: SearchQuery, *, max_results: int = 20) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "originLocationCode": query.origin,
            "destinationLocationCode": query.destination,
            "departureDate": query.departure_date.isoformat(),
            "adults": query.passenger_count,
        }
        return_date = query.effective_return_date
        if return_date:
            params["returnDate"] = return_date.isoformat()
        params["max"] = max_results

        payload = await self._get(FLIGHT_OFFERS_PATH, params, "flight search")
        return _data_records(payload)

    async def search_locations(self, keyword: str, *, limit: int = 10) -> list[dict[str, Any]]:
        params = {
            "subType": "CITY,AIRPORT",
            "keyword": keyword,
            "page[limit]": limit,
        }
        payload = await self._get(LOCATIONS_PATH, params, "location search")
        return _data_records(payload)

    async def _get(self, path: str, params: dict[str, Any], operation: str) -> dict[str, Any]:
        token = await self._token_manager.acquire_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(f"{self._base_url}{path}", params=params, headers=headers)
        except httpx.TransportError as exc:
            raise NetworkError(f"Provider {operation} unreachable") from exc

        if not response.is_success:
            raise ProviderError(response.status_code, response.reason_phrase, operation=operation)
        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError(
                response.status_code, "malformed JSON body", operation=operation
            ) from exc
        if not isinstance(payload, dict):
            raise ProviderError(response.status_code, "unexpected body shape", operation=operation)
        return payload


def _data_records(payload: dict[str, Any]) -> list[dict[str, Any]]:
    data = payload.get("data") or []
    if not isinstance(data, list):
        logger.debug("Provider payload carried non-list data: %r", type(data))
        return []
    return [item for item in data if isinstance(item, dict)]


__all__ = ["FLIGHT_OFFERS_PATH", "LOCATIONS_PATH", "ProviderClient"]
