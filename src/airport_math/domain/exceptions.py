from __future__ import annotations


class AirportMathError(Exception):
    """Base exception for all airport-math errors."""


class InvalidInputError(AirportMathError):
    """Raised when a caller passes input no calculation can make sense of.

    Examples: a missing origin or destination for route estimation, or a
    departure time that is not HH:MM.
    """


class AirportNotFoundError(AirportMathError):
    """Raised when an IATA code does not match any airport in the dataset."""


class ApiError(AirportMathError):
    """Raised when an upstream service returns an unexpected HTTP error status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        super().__init__(message or f"Upstream API error ({status_code})")


class RoutingError(AirportMathError):
    """Raised when the routing service answers but the payload holds no usable route."""
