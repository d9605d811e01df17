"""Airport suggestions from the provider, with a static catalog fallback."""

from __future__ import annotations

import logging
from typing import Any

from flight_search.models import AirportSuggestion
from provider.client import ProviderClient
from shared.errors import FlightDataError

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5

FALLBACK_AIRPORTS: tuple[AirportSuggestion, ...] = (
    AirportSuggestion(code="JFK", city="New York", name="John F. Kennedy International"),
    AirportSuggestion(code="LAX", city="Los Angeles", name="Los Angeles International"),
    AirportSuggestion(code="ORD", city="Chicago", name="O'Hare International"),
    AirportSuggestion(code="MIA", city="Miami", name="Miami International"),
    AirportSuggestion(code="SFO", city="San Francisco", name="San Francisco International"),
    AirportSuggestion(code="SEA", city="Seattle", name="Seattle-Tacoma International"),
    AirportSuggestion(code="BOS", city="Boston", name="Logan International"),
    AirportSuggestion(code="DEN", city="Denver", name="Denver International"),
    AirportSuggestion(code="LHR", city="London", name="Heathrow Airport"),
    AirportSuggestion(code="CDG", city="Paris", name="Charles de Gaulle Airport"),
)


def match_fallback_airports(keyword: str) -> list[AirportSuggestion]:
    """Case-insensitive substring match on code, city or name."""

    needle = keyword.lower()
    matches = [
        airport
        for airport in FALLBACK_AIRPORTS
        if needle in airport.code.lower()
        or needle in airport.city.lower()
        or needle in airport.name.lower()
    ]
    return matches[:MAX_SUGGESTIONS]


class LocationResolver:
    """Resolves a keyword to at most five suggestions.

    Live results and catalog entries are never mixed in one response.
    Live results are taken as the provider matched them and are not
    re-checked against the keyword; only catalog entries are filtered here.
    A malformed live record sends the whole call to the catalog.
    """

    def __init__(self, provider: ProviderClient, *, page_limit: int = 10) -> None:
        self._provider = provider
        self._page_limit = page_limit

    async def resolve(self, keyword: str) -> list[AirportSuggestion]:
        try:
            records = await self._provider.search_locations(keyword, limit=self._page_limit)
        except FlightDataError as exc:
            logger.warning("Location search for %r failed, using fallback catalog: %s", keyword, exc)
            return match_fallback_airports(keyword)

        suggestions: list[AirportSuggestion] = []
        try:
            for record in records:
                suggestion = _to_suggestion(record)
                if suggestion:
                    suggestions.append(suggestion)
        except (AttributeError, TypeError, ValueError) as exc:
            logger.warning("Unreadable location record for %r, using fallback catalog: %s", keyword, exc)
            return match_fallback_airports(keyword)
        return suggestions[:MAX_SUGGESTIONS]


def _to_suggestion(record: dict[str, Any]) -> AirportSuggestion | None:
    code = record.get("iataCode")
    if not code:
        logger.debug("Skipping location without IATA code: %s", record)
        return None
    address = record.get("address") or {}
    return AirportSuggestion(
        code=code,
        city=address.get("cityName") or code,
        name=record.get("name") or code,
    )


__all__ = [
    "FALLBACK_AIRPORTS",
    "LocationResolver",
    "MAX_SUGGESTIONS",
    "match_fallback_airports",
]
