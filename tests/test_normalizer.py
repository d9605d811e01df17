from __future__ import annotations

import copy
from typing import Any

import pytest

from flight_search.normalizer import normalize_offer
from shared.errors import MalformedOfferError


def _segment(origin: str, destination: str, dep: str, arr: str, number: str, **extra: Any) -> dict[str, Any]:
    return {
        "departure": {"iataCode": origin, "at": dep},
        "arrival": {"iataCode": destination, "at": arr},
        "carrierCode": "AA",
        "number": number,
        **extra,
    }


def _direct_offer() -> dict[str, Any]:
    return {
        "id": "X",
        "itineraries": [
            {
                "duration": "PT2H30M",
                "segments": [
                    _segment("JFK", "LAX", "2024-06-01T08:00", "2024-06-01T11:30", "100"),
                ],
            }
        ],
        "price": {"total": "199.99", "currency": "USD"},
    }


def test_direct_offer_maps_to_canonical_fields() -> None:
    offer = normalize_offer(_direct_offer(), 0)

    assert offer.model_dump() == {
        "id": "X",
        "airline": "AA",
        "flight_number": "AA 100",
        "departure": {"airport": "JFK", "city": "JFK", "time": "08:00", "date": "2024-06-01"},
        "arrival": {"airport": "LAX", "city": "LAX", "time": "11:30", "date": "2024-06-01"},
        "duration": "2h30m",
        "stops": 0,
        "price": pytest.approx(199.99),
        "currency": "USD",
        "aircraft": None,
    }


def test_connecting_offer_uses_last_segment_for_arrival() -> None:
    raw = _direct_offer()
    raw["itineraries"][0] = {
        "duration": "PT9H5M",
        "segments": [
            _segment("JFK", "ORD", "2024-06-01T06:10:00", "2024-06-01T07:55:00", "11", aircraft={"code": "321"}),
            _segment("ORD", "DEN", "2024-06-01T09:00:00", "2024-06-01T10:40:00", "22"),
            _segment("DEN", "SEA", "2024-06-01T12:00:00", "2024-06-01T13:15:00", "33"),
        ],
    }

    offer = normalize_offer(raw, 4)

    assert offer.stops == 2
    assert offer.flight_number == "AA 11"
    assert offer.aircraft == "321"
    assert offer.departure.airport == "JFK"
    assert (offer.arrival.airport, offer.arrival.time) == ("SEA", "13:15")
    assert offer.duration == "9h5m"


def test_return_itinerary_is_ignored() -> None:
    raw = _direct_offer()
    raw["itineraries"].append(
        {
            "duration": "PT5H50M",
            "segments": [
                _segment("LAX", "JFK", "2024-06-08T09:00", "2024-06-08T17:20", "200"),
            ],
        }
    )

    offer = normalize_offer(raw, 0)

    assert offer.arrival.airport == "LAX"
    assert offer.duration == "2h30m"


def test_missing_id_falls_back_to_index() -> None:
    raw = _direct_offer()
    del raw["id"]

    assert normalize_offer(raw, 7).id == "flight-7"


def test_normalize_is_pure() -> None:
    raw = _direct_offer()
    snapshot = copy.deepcopy(raw)

    assert normalize_offer(raw, 3) == normalize_offer(raw, 3)
    assert raw == snapshot


@pytest.mark.parametrize(
    "itineraries",
    [[], [{"duration": "PT1H", "segments": []}]],
)
def test_offer_without_segments_is_rejected(itineraries: list[dict[str, Any]]) -> None:
    raw = _direct_offer()
    raw["itineraries"] = itineraries

    with pytest.raises(MalformedOfferError) as excinfo:
        normalize_offer(raw, 0)

    assert excinfo.value.offer_id == "X"
