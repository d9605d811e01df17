"""Error taxonomy shared by the credential, provider and search layers."""

from __future__ import annotations


class FlightDataError(RuntimeError):
    """Base class for failures talking to the flight data provider."""


class AuthenticationError(FlightDataError):
    """Raised when the token exchange is rejected or returns garbage."""

    def __init__(self, reason: str, *, status: int | None = None) -> None:
        self.status = status
        self.reason = reason
        if status is None:
            super().__init__(f"Authentication failed: {reason}")
        else:
            super().__init__(f"Authentication failed: {status} {reason}")


class ConfigurationError(AuthenticationError):
    """Raised when the client identifier or secret is not configured."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)


class ProviderError(FlightDataError):
    """Raised when a data endpoint answers with a non-success status."""

    def __init__(self, status: int, status_text: str, *, operation: str = "request") -> None:
        self.status = status
        self.status_text = status_text
        self.operation = operation
        super().__init__(f"Provider {operation} failed: {status} {status_text}".rstrip())


class MalformedOfferError(ProviderError):
    """Raised for an offer record that lacks an itinerary or segments."""

    def __init__(self, offer_id: str, detail: str) -> None:
        self.offer_id = offer_id
        super().__init__(200, f"offer {offer_id} {detail}", operation="offer parsing")


class NetworkError(FlightDataError):
    """Raised when the provider could not be reached at all."""


__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "FlightDataError",
    "MalformedOfferError",
    "NetworkError",
    "ProviderError",
]
