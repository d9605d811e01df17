"""Facade composing token management, provider calls and normalization."""

from __future__ import annotations

import logging
import random

from config.settings import Settings
from credentials.store import CredentialStore, FileCredentialStore
from credentials.token_manager import TokenManager
from flight_search.locations import LocationResolver
from flight_search.models import AirportSuggestion, FlightOffer, PriceHistoryPoint, SearchQuery
from flight_search.normalizer import normalize_offer
from flight_search.price_history import PriceHistorySynthesizer
from provider.client import ProviderClient
from shared.errors import MalformedOfferError

logger = logging.getLogger(__name__)


class FlightSearchFacade:
    """Single entry point for the presentation layer.

    Search and airport lookups let provider failures propagate; price
    history degrades to a heuristic series instead.
    """

    def __init__(
        self,
        provider: ProviderClient,
        *,
        locations: LocationResolver | None = None,
        price_history: PriceHistorySynthesizer | None = None,
        max_results: int = 20,
    ) -> None:
        self._provider = provider
        self._locations = locations or LocationResolver(provider)
        self._price_history = price_history or PriceHistorySynthesizer(provider)
        self._max_results = max_results

    async def search_flights(self, query: SearchQuery) -> list[FlightOffer]:
        raw_offers = await self._provider.search_offers(query, max_results=self._max_results)
        offers: list[FlightOffer] = []
        for index, raw_offer in enumerate(raw_offers):
            try:
                offers.append(normalize_offer(raw_offer, index))
            except MalformedOfferError as exc:
                logger.warning("Skipping malformed offer: %s", exc)
        return offers

    async def get_price_history(self, origin: str, destination: str) -> list[PriceHistoryPoint]:
        return await self._price_history.synthesize(origin, destination)

    async def get_airports(self, keyword: str) -> list[AirportSuggestion]:
        return await self._locations.resolve(keyword)


def build_facade(
    settings: Settings,
    *,
    store: CredentialStore | None = None,
    rng: random.Random | None = None,
) -> FlightSearchFacade:
    """Wire the facade and its collaborators from settings."""

    base_url = settings.provider_base_url
    token_manager = TokenManager(
        base_url,
        settings.amadeus_client_id,
        settings.amadeus_client_secret,
        store or FileCredentialStore(settings.credential_store_path),
        timeout=settings.http_timeout,
    )
    provider = ProviderClient(base_url, token_manager, timeout=settings.http_timeout)
    return FlightSearchFacade(
        provider,
        locations=LocationResolver(provider, page_limit=settings.location_page_limit),
        price_history=PriceHistorySynthesizer(provider, rng=rng),
        max_results=settings.search_max_results,
    )


__all__ = ["FlightSearchFacade", "build_facade"]
