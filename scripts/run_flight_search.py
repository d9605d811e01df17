#!/usr/bin/env python3
"""Invoke the flight data handler locally."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from dotenv import load_dotenv

from config.settings import get_settings
from flight_search.handler import lambda_handler


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the flight data handler locally and print the JSON response."
    )
    subparsers = parser.add_subparsers(dest="operation", required=True)

    search = subparsers.add_parser("search", help="Search flight offers.")
    search.add_argument("origin")
    search.add_argument("destination")
    search.add_argument("departure_date", help="YYYY-MM-DD")
    search.add_argument("--return-date", default=None, help="YYYY-MM-DD, round trips only.")
    search.add_argument("--passengers", type=int, default=1)

    history = subparsers.add_parser("history", help="Synthesize a 31-day price history.")
    history.add_argument("origin")
    history.add_argument("destination")

    airports = subparsers.add_parser("airports", help="Suggest airports for a keyword.")
    airports.add_argument("keyword")

    return parser.parse_args(args=args)


def build_event(args: argparse.Namespace) -> dict[str, Any]:
    """Translate CLI arguments into a handler event."""

    if args.operation == "search":
        event: dict[str, Any] = {
            "operation": "search_flights",
            "origin": args.origin.upper(),
            "destination": args.destination.upper(),
            "departure_date": args.departure_date,
            "passenger_count": args.passengers,
            "trip_type": "round-trip" if args.return_date else "one-way",
        }
        if args.return_date:
            event["return_date"] = args.return_date
        return event
    if args.operation == "history":
        return {
            "operation": "price_history",
            "origin": args.origin.upper(),
            "destination": args.destination.upper(),
        }
    return {"operation": "airports", "keyword": args.keyword}


def main(raw_args: list[str] | None = None) -> None:
    load_dotenv()
    logging.basicConfig(level=get_settings().log_level.upper())
    args = parse_args(raw_args)
    response = lambda_handler(build_event(args), None)
    print(json.dumps(response, indent=2))


if __name__ == "__main__":
    main()
