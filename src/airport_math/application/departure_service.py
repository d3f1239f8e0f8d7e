from __future__ import annotations

from datetime import datetime
from typing import Callable, Sequence

from airport_math.application.route_service import RouteEstimator
from airport_math.domain.departure import (
    calculate_for_routes,
    is_valid_flight_time,
    summarize,
    time_until,
)
from airport_math.domain.entities import DeparturePlan, DeparturePreferences, FlightInfo
from airport_math.domain.exceptions import InvalidInputError
from airport_math.domain.value_objects import TRANSPORT_MODES, Coordinate, TransportMode
from airport_math.infrastructure.time_utils import now_local


class DepartureService:
    """Orchestrates route estimation and leave-by calculations for a flight."""

    def __init__(
        self,
        route_estimator: RouteEstimator,
        clock: Callable[[], datetime] = now_local,
    ) -> None:
        self._routes = route_estimator
        self._clock = clock

    async def plan_departure(
        self,
        origin: Coordinate,
        flight: FlightInfo,
        prefs: DeparturePreferences | None = None,
        modes: Sequence[TransportMode] | None = None,  # None means all modes
    ) -> list[DeparturePlan]:
        """Return one plan per transport mode, in the order of modes.

        Steps:
        1. Require a selected airport and an HH:MM time (InvalidInputError otherwise)
        2. Estimate routes from origin to the airport for every mode
        3. Read the clock once and compute a DepartureCalculation per route
        4. Attach time-until and summary text for each calculation
        """
        airport = flight.selected_airport
        if airport is None:
            raise InvalidInputError("A selected airport is required to plan a departure")
        if not is_valid_flight_time(flight.departure_time):
            raise InvalidInputError(
                f"Invalid departure time {flight.departure_time!r}, expected HH:MM"
            )

        routes = await self._routes.estimate_multiple(
            origin, airport.coordinate, list(modes) if modes is not None else TRANSPORT_MODES
        )

        now = self._clock()
        return [
            DeparturePlan(
                route=route,
                calculation=calc,
                time_until=time_until(calc.leave_time, now),
                summary=summarize(calc, now),
            )
            for calc, route in calculate_for_routes(flight, routes, prefs, now=now)
        ]
