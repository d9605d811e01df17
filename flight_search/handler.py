"""AWS Lambda-style handler exposing the facade to the presentation layer."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from config.settings import get_settings
from flight_search.models import SearchQuery
from flight_search.service import FlightSearchFacade, build_facade
from shared.errors import FlightDataError

logger = logging.getLogger(__name__)

_facade: FlightSearchFacade | None = None


class HandlerEvent(BaseModel):
    """Envelope naming the facade operation to run."""

    operation: Literal["search_flights", "price_history", "airports"]


class PriceHistoryRequest(BaseModel):
    origin: str = Field(..., min_length=3, max_length=3)
    destination: str = Field(..., min_length=3, max_length=3)


class AirportsRequest(BaseModel):
    keyword: str


def _get_facade() -> FlightSearchFacade:
    global _facade
    if _facade is None:
        _facade = build_facade(get_settings())
    return _facade


def _success(items: list[BaseModel]) -> dict[str, Any]:
    return {"status": "success", "data": [item.model_dump(mode="json") for item in items]}


def _error(exc: FlightDataError) -> dict[str, Any]:
    return {
        "status": "error",
        "error": type(exc).__name__,
        "message": str(exc),
        "data": [],
    }


def lambda_handler(event: dict[str, Any], _context: Any | None = None) -> dict[str, Any]:
    """Entry point compatible with AWS Lambda."""

    try:
        envelope = HandlerEvent.model_validate(event)
        params = {key: value for key, value in event.items() if key != "operation"}
        if envelope.operation == "search_flights":
            request: BaseModel = SearchQuery.model_validate(params)
        elif envelope.operation == "price_history":
            request = PriceHistoryRequest.model_validate(params)
        else:
            request = AirportsRequest.model_validate(params)
    except ValidationError as exc:
        logger.error("Invalid flight data payload: %s", exc)
        raise

    facade = _get_facade()
    try:
        if isinstance(request, SearchQuery):
            return _success(asyncio.run(facade.search_flights(request)))
        if isinstance(request, PriceHistoryRequest):
            return _success(asyncio.run(facade.get_price_history(request.origin, request.destination)))
        return _success(asyncio.run(facade.get_airports(request.keyword)))
    except FlightDataError as exc:
        logger.error("%s failed: %s", envelope.operation, exc)
        return _error(exc)


__all__ = ["AirportsRequest", "HandlerEvent", "PriceHistoryRequest", "lambda_handler"]
