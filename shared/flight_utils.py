"""Shared helpers for provider timestamp, duration and price strings."""

from __future__ import annotations

import math
from collections.abc import Iterable

_PERIOD_PREFIX = "PT"


def split_timestamp(raw_at: str) -> tuple[str, str]:
    """Return `(date, hh:mm)` from a provider timestamp like `2024-06-01T08:00:00`."""

    day, _, clock = raw_at.partition("T")
    return day, clock[:5]


def format_duration(raw_duration: str | None) -> str:
    """Convert `PT2H30M` into `2h30m`."""

    if not raw_duration:
        return ""
    return raw_duration.replace(_PERIOD_PREFIX, "", 1).lower()


def parse_price(raw_total: str | float | int | None) -> float:
    """Parse a provider `price.total` string into a float."""

    if raw_total is None:
        raise ValueError("price total missing")
    return float(raw_total)


def mean_price(totals: Iterable[str | float | int | None]) -> float | None:
    """Average a set of provider price totals, or None when there are none."""

    prices = [parse_price(total) for total in totals]
    if not prices:
        return None
    return sum(prices) / len(prices)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going upward."""

    return int(math.floor(value + 0.5))


__all__ = [
    "format_duration",
    "mean_price",
    "parse_price",
    "round_half_up",
    "split_timestamp",
]
