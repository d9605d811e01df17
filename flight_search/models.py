"""Canonical entities handed to the presentation layer."""

from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt

TripType = Literal["one-way", "round-trip"]


class SearchQuery(BaseModel):
    """Input contract for a flight search."""

    origin: str = Field(..., min_length=3, max_length=3)
    destination: str = Field(..., min_length=3, max_length=3)
    departure_date: dt.date
    return_date: dt.date | None = None
    passenger_count: PositiveInt = 1
    trip_type: TripType = "one-way"

    @property
    def effective_return_date(self) -> dt.date | None:
        """Return date as sent upstream: only round trips carry one."""

        if self.trip_type == "round-trip":
            return self.return_date
        return None


class FlightEndpoint(BaseModel):
    """Departure or arrival side of a flight offer."""

    model_config = ConfigDict(frozen=True)

    airport: str
    city: str
    time: str
    date: str


class FlightOffer(BaseModel):
    """Flight offer derived from the first itinerary of a provider offer."""

    model_config = ConfigDict(frozen=True)

    id: str
    airline: str
    flight_number: str
    departure: FlightEndpoint
    arrival: FlightEndpoint
    duration: str
    stops: NonNegativeInt
    price: float = Field(..., ge=0.0)
    currency: str
    aircraft: str | None = None


class PriceHistoryPoint(BaseModel):
    """One day of the synthetic price series."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    price: float = Field(..., ge=0.0)


class AirportSuggestion(BaseModel):
    """Airport or city suggestion for an autocomplete field."""

    model_config = ConfigDict(frozen=True)

    code: str
    city: str
    name: str


__all__ = [
    "AirportSuggestion",
    "FlightEndpoint",
    "FlightOffer",
    "PriceHistoryPoint",
    "SearchQuery",
    "TripType",
]
