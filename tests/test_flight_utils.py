from __future__ import annotations

import pytest

from shared.flight_utils import (
    format_duration,
    mean_price,
    parse_price,
    round_half_up,
    split_timestamp,
)


def test_split_timestamp_returns_date_and_minutes() -> None:
    assert split_timestamp("2024-06-01T08:05:00") == ("2024-06-01", "08:05")
    assert split_timestamp("2024-06-01T23:59") == ("2024-06-01", "23:59")


def test_format_duration_strips_period_designator() -> None:
    assert format_duration("PT2H30M") == "2h30m"
    assert format_duration("PT45M") == "45m"
    assert format_duration(None) == ""


def test_parse_price_reads_decimal_strings() -> None:
    assert parse_price("199.99") == pytest.approx(199.99)
    with pytest.raises(ValueError):
        parse_price(None)


def test_mean_price_averages_totals() -> None:
    assert mean_price(["100.00", "300.00"]) == pytest.approx(200.0)
    assert mean_price([]) is None


def test_round_half_up_rounds_ties_upward() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.49) == 2
