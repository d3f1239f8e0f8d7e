from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from airport_math.domain.value_objects import AirportType, Coordinate, TransportMode


@dataclass(frozen=True)
class Airport:
    """A commercial passenger airport. Read-only reference data."""

    id: str  # OurAirports ident, e.g. "KLAX"
    name: str
    city: str
    country: str
    iata: str  # 3-letter code, e.g. "LAX"
    icao: str
    coordinate: Coordinate
    elevation: int  # meters, may be negative
    timezone: str  # IANA name
    type: AirportType
    # Set only on copies returned by a proximity search.
    distance_km: float | None = field(default=None, compare=False)


@dataclass
class NearbyAirports:
    """Result of a proximity search around the user's location."""

    airports: list[Airport]
    user_location: Coordinate


@dataclass
class RouteInfo:
    """Travel estimate from the user's location to an airport for one mode."""

    duration: int  # minutes, rounded
    distance: float  # meters
    mode: TransportMode
    instructions: list[str] = field(default_factory=list)
    is_estimate: bool = False  # True when produced by the analytic fallback


@dataclass
class FlightInfo:
    departure_time: str  # local "HH:MM", same calendar day as now
    selected_airport: Airport | None = None


@dataclass
class DeparturePreferences:
    has_checked_bags: bool = False
    needs_passport_control: bool = False
    safety_margin_level: int = 3  # 0 (relaxed) .. 5 (most conservative)
    additional_buffer: int = 0  # minutes


@dataclass(frozen=True)
class DepartureBreakdown:
    """Minutes spent on each part of the trip, for display."""

    travel: int
    check_in: int
    baggage: int
    security: int
    passport: int
    safety: int  # safety buffer plus the user's additional buffer

    @property
    def total(self) -> int:
        return (
            self.travel
            + self.check_in
            + self.baggage
            + self.security
            + self.passport
            + self.safety
        )


@dataclass(frozen=True)
class DepartureCalculation:
    """When to leave for the airport, and how the time budget adds up."""

    flight_time: datetime
    check_in_buffer: int  # same value as gate_wait
    gate_wait: int
    travel_time: int
    baggage_time: int
    security_time: int
    passport_time: int
    safety_buffer: int
    additional_buffer: int
    total_buffer: int
    leave_time: datetime  # flight_time - (travel_time + total_buffer)
    arrival_deadline: datetime  # flight_time - gate_wait
    breakdown: DepartureBreakdown


@dataclass(frozen=True)
class TimeUntil:
    hours: int
    minutes: int
    total_minutes: int
    is_overdue: bool


@dataclass
class DeparturePlan:
    """One transport option with its leave-by time and status."""

    route: RouteInfo
    calculation: DepartureCalculation
    time_until: TimeUntil
    summary: str
