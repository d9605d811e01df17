"""Map provider flight-offer records onto the canonical FlightOffer."""

from __future__ import annotations

from typing import Any

from flight_search.models import FlightEndpoint, FlightOffer
from shared.errors import MalformedOfferError
from shared.flight_utils import format_duration, parse_price, split_timestamp


def normalize_offer(raw_offer: dict[str, Any], index: int) -> FlightOffer:
    """Build a FlightOffer from the offer's first itinerary.

    Later itineraries (the return leg of a round trip) are not represented.
    The first segment supplies departure, carrier, flight number and aircraft;
    the last segment supplies arrival. Offers without an id are named
    `flight-<index>`.
    """

    offer_id = str(raw_offer.get("id") or f"flight-{index}")
    itineraries = raw_offer.get("itineraries") or []
    if not itineraries:
        raise MalformedOfferError(offer_id, "has no itineraries")
    itinerary = itineraries[0]
    segments = itinerary.get("segments") or []
    if not segments:
        raise MalformedOfferError(offer_id, "has no segments in its first itinerary")

    first_segment = segments[0]
    last_segment = segments[-1]
    carrier = first_segment["carrierCode"]
    aircraft = (first_segment.get("aircraft") or {}).get("code")
    price = raw_offer["price"]

    return FlightOffer(
        id=offer_id,
        airline=carrier,
        flight_number=f"{carrier} {first_segment['number']}",
        departure=_endpoint(first_segment["departure"]),
        arrival=_endpoint(last_segment["arrival"]),
        duration=format_duration(itinerary.get("duration")),
        stops=len(segments) - 1,
        price=parse_price(price["total"]),
        currency=price["currency"],
        aircraft=aircraft,
    )


def _endpoint(raw: dict[str, Any]) -> FlightEndpoint:
    day, clock = split_timestamp(raw["at"])
    airport = raw["iataCode"]
    # No airport lookup is done; the city falls back to the IATA code.
    return FlightEndpoint(airport=airport, city=airport, time=clock, date=day)


__all__ = ["normalize_offer"]
