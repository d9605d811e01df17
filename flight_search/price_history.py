"""Synthetic 31-day price history anchored on one live price sample.

The series is a heuristic, not fetched data. A base price is taken as the
mean of a handful of live offers departing tomorrow (or a fixed fallback),
then each day of the window is scaled by four multiplicative factors:

* weekend: 1.10 on Saturday and Sunday
* season: 1.15 from June through September
* noise: 1 + u, u uniform in [-0.20, 0.20], drawn from the injected RNG
* urgency: 1.20 for the first 7 days of the window, 1.10 for days 7-13

Urgency is counted from the oldest day in the window, not from today.
Each price is rounded and floored at 60% of the base price.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from datetime import date, timedelta

from flight_search.models import PriceHistoryPoint, SearchQuery
from provider.client import ProviderClient
from shared.errors import FlightDataError
from shared.flight_utils import mean_price, round_half_up

logger = logging.getLogger(__name__)

FALLBACK_BASE_PRICE = 250.0
HISTORY_DAYS = 31
SAMPLE_SIZE = 5
WEEKEND_FACTOR = 1.10
SUMMER_FACTOR = 1.15
SUMMER_MONTHS = frozenset({6, 7, 8, 9})
NOISE_AMPLITUDE = 0.20
FLOOR_RATIO = 0.6


def urgency_factor(days_from_window_start: int) -> float:
    if days_from_window_start < 7:
        return 1.20
    if days_from_window_start < 14:
        return 1.10
    return 1.00


def price_floor(base_price: float) -> int:
    return round_half_up(base_price * FLOOR_RATIO)


class PriceHistorySynthesizer:
    """Builds the price series; never raises to its caller."""

    def __init__(
        self,
        provider: ProviderClient,
        *,
        rng: random.Random | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._provider = provider
        self._rng = rng or random.Random()
        self._today = today

    async def synthesize(self, origin: str, destination: str) -> list[PriceHistoryPoint]:
        try:
            base_price = await self.sample_base_price(origin, destination)
            return self.build_series(base_price)
        except Exception:
            logger.exception("Price history generation failed for %s-%s", origin, destination)
            return []

    async def sample_base_price(self, origin: str, destination: str) -> float:
        try:
            query = SearchQuery(
                origin=origin,
                destination=destination,
                departure_date=self._today() + timedelta(days=1),
                passenger_count=1,
            )
            offers = await self._provider.search_offers(query, max_results=SAMPLE_SIZE)
            average = mean_price((offer.get("price") or {}).get("total") for offer in offers)
        except (FlightDataError, ValueError, TypeError, AttributeError) as exc:
            logger.warning(
                "Price sample for %s-%s unavailable, using fallback %.0f: %s",
                origin,
                destination,
                FALLBACK_BASE_PRICE,
                exc,
            )
            return FALLBACK_BASE_PRICE
        if average is None:
            logger.warning("No offers sampled for %s-%s, using fallback", origin, destination)
            return FALLBACK_BASE_PRICE
        return average

    def build_series(self, base_price: float) -> list[PriceHistoryPoint]:
        today = self._today()
        window_start = today - timedelta(days=HISTORY_DAYS - 1)
        minimum = price_floor(base_price)

        points: list[PriceHistoryPoint] = []
        for offset in range(HISTORY_DAYS):
            day = window_start + timedelta(days=offset)
            weekend = WEEKEND_FACTOR if day.weekday() >= 5 else 1.0
            season = SUMMER_FACTOR if day.month in SUMMER_MONTHS else 1.0
            noise = 1 + self._rng.uniform(-NOISE_AMPLITUDE, NOISE_AMPLITUDE)
            price = round_half_up(base_price * noise * weekend * season * urgency_factor(offset))
            points.append(PriceHistoryPoint(date=day, price=max(price, minimum)))

        points.sort(key=lambda point: point.date)
        return points


__all__ = [
    "FALLBACK_BASE_PRICE",
    "HISTORY_DAYS",
    "PriceHistorySynthesizer",
    "price_floor",
    "urgency_factor",
]
