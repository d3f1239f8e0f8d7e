from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

import httpx
from mcp import types
from mcp.server.fastmcp import FastMCP

from airport_math.application.airport_service import AirportService
from airport_math.application.departure_service import DepartureService
from airport_math.application.route_service import RouteEstimator
from airport_math.domain.entities import (
    Airport,
    DeparturePlan,
    DeparturePreferences,
    FlightInfo,
    RouteInfo,
)
from airport_math.domain.exceptions import (
    AirportNotFoundError,
    ApiError,
    InvalidInputError,
)
from airport_math.domain.services import format_distance, format_duration
from airport_math.domain.value_objects import Coordinate, TransportMode, get_transport_mode
from airport_math.infrastructure.time_utils import format_clock

logger = logging.getLogger(__name__)

_RESULT_URI = "mcp://airport-math/result"


def _as_resource(json_str: str) -> list[types.EmbeddedResource]:
    """Wrap a JSON string as an embedded resource so the LLM does not narrate it."""
    return [
        types.EmbeddedResource(
            type="resource",
            resource=types.TextResourceContents(
                uri=_RESULT_URI,  # type: ignore[arg-type]
                mimeType="application/json",
                text=json_str,
            ),
        )
    ]


def _error_json(message: str) -> str:
    return json.dumps({"error": message}, ensure_ascii=False)


def _result_json(result: dict[str, Any]) -> list[types.EmbeddedResource]:
    return _as_resource(json.dumps(result, default=str, ensure_ascii=False))


def _handle_exception(exc: Exception) -> list[types.EmbeddedResource]:
    if isinstance(exc, (AirportNotFoundError, InvalidInputError)):
        return _as_resource(_error_json(str(exc)))
    if isinstance(exc, ApiError):
        if exc.status_code >= 500:
            return _as_resource(
                _error_json(f"Upstream API error ({exc.status_code}). Please try again later.")
            )
        return _as_resource(_error_json(str(exc)))
    if isinstance(exc, httpx.TimeoutException):
        return _as_resource(_error_json("Request timed out. Please try again."))
    if isinstance(exc, ValueError):
        return _as_resource(_error_json(str(exc)))
    logger.exception("Unexpected error in MCP tool: %s", exc)
    return _as_resource(_error_json("An unexpected error occurred."))


def _validate_coordinate(lat: float, lng: float) -> Coordinate:
    if not -90 <= lat <= 90:
        raise ValueError(f"Latitude out of range: {lat}")
    if not -180 <= lng <= 180:
        raise ValueError(f"Longitude out of range: {lng}")
    return Coordinate(lat=lat, lng=lng)


def _validate_max_results(max_results: int) -> int:
    if max_results < 0:
        raise ValueError(f"max_results must not be negative: {max_results}")
    return max_results


def _validate_modes(transport_modes: list[str] | None) -> list[TransportMode] | None:
    if transport_modes is None:
        return None
    result: list[TransportMode] = []
    for mode_id in transport_modes:
        mode = get_transport_mode(mode_id)
        if mode is None:
            raise ValueError(f"Unknown transport mode: {mode_id}")
        result.append(mode)
    return result


def _airport_dict(airport: Airport) -> dict[str, Any]:
    return dataclasses.asdict(airport)


def _route_dict(route: RouteInfo) -> dict[str, Any]:
    data = dataclasses.asdict(route)
    data["durationText"] = format_duration(route.duration)
    data["distanceText"] = format_distance(route.distance)
    return data


def _plan_dict(plan: DeparturePlan) -> dict[str, Any]:
    calc = plan.calculation
    return {
        "mode": plan.route.mode.id,
        "route": _route_dict(plan.route),
        "flightTime": calc.flight_time.isoformat(),
        "leaveTime": calc.leave_time.isoformat(),
        "leaveTimeText": format_clock(calc.leave_time),
        "arrivalDeadline": calc.arrival_deadline.isoformat(),
        "totalBuffer": calc.total_buffer,
        "breakdown": dataclasses.asdict(calc.breakdown),
        "timeUntil": dataclasses.asdict(plan.time_until),
        "summary": plan.summary,
    }


def register_tools(
    mcp: FastMCP,
    airport_svc: AirportService,
    route_estimator: RouteEstimator,
    departure_svc: DepartureService,
) -> None:
    """Bind all @mcp.tool decorators. Called once during server setup."""

    @mcp.tool()
    async def find_nearby_airports(
        lat: float,
        lng: float,
        max_results: int = 10,
        max_distance_km: float = 2000,
    ) -> list[types.EmbeddedResource]:
        """Find commercial passenger airports near a location, nearest first.

        Args:
            lat: Latitude of the traveller in decimal degrees.
            lng: Longitude of the traveller in decimal degrees.
            max_results: Maximum number of airports to return (default 10).
            max_distance_km: Ignore airports farther than this (default 2000 km).
        """
        try:
            origin = _validate_coordinate(lat, lng)
            max_results = _validate_max_results(max_results)
            nearby = await airport_svc.find_nearby(origin, max_results, max_distance_km)
            return _result_json(
                {
                    "userLocation": dataclasses.asdict(nearby.user_location),
                    "airports": [_airport_dict(a) for a in nearby.airports],
                    "count": len(nearby.airports),
                }
            )
        except Exception as exc:
            return _handle_exception(exc)

    @mcp.tool()
    async def search_airports(
        query: str,
        max_results: int = 10,
    ) -> list[types.EmbeddedResource]:
        """Search airports by name, city, IATA or ICAO code (case-insensitive).

        Args:
            query: Free-text search term, e.g. "heathrow" or "LAX".
            max_results: Maximum number of matches to return (default 10).
        """
        try:
            if not query.strip():
                return _as_resource(_error_json("query cannot be empty"))
            max_results = _validate_max_results(max_results)
            airports = await airport_svc.search(query.strip(), max_results)
            return _result_json(
                {"airports": [_airport_dict(a) for a in airports], "count": len(airports)}
            )
        except Exception as exc:
            return _handle_exception(exc)

    @mcp.tool()
    async def get_airport(iata_code: str) -> list[types.EmbeddedResource]:
        """Look up a single airport by its 3-letter IATA code.

        Args:
            iata_code: IATA code such as "FRA" (case-insensitive).
        """
        try:
            if not iata_code.strip():
                return _as_resource(_error_json("iata_code cannot be empty"))
            airport = await airport_svc.get_airport(iata_code)
            return _result_json({"airport": _airport_dict(airport)})
        except Exception as exc:
            return _handle_exception(exc)

    @mcp.tool()
    async def estimate_routes(
        lat: float,
        lng: float,
        iata_code: str,
        transport_modes: list[str] | None = None,
    ) -> list[types.EmbeddedResource]:
        """Estimate travel time and distance to an airport for each transport mode.

        Args:
            lat: Latitude of the starting point.
            lng: Longitude of the starting point.
            iata_code: Destination airport IATA code.
            transport_modes: Optional mode ids, e.g. ["driving-car", "public-transport"].
                             All modes when omitted.
        """
        try:
            origin = _validate_coordinate(lat, lng)
            modes = _validate_modes(transport_modes)
            airport = await airport_svc.get_airport(iata_code)
            if modes is None:
                routes = await route_estimator.estimate_multiple(origin, airport.coordinate)
            else:
                routes = await route_estimator.estimate_multiple(
                    origin, airport.coordinate, modes
                )
            return _result_json(
                {
                    "airport": _airport_dict(airport),
                    "routes": [_route_dict(r) for r in routes],
                    "count": len(routes),
                }
            )
        except Exception as exc:
            return _handle_exception(exc)

    @mcp.tool()
    async def plan_departure(
        lat: float,
        lng: float,
        iata_code: str,
        departure_time: str,
        has_checked_bags: bool = False,
        needs_passport_control: bool = False,
        safety_margin_level: int = 3,
        additional_buffer: int = 0,
        transport_modes: list[str] | None = None,
    ) -> list[types.EmbeddedResource]:
        """Work out when to leave for a flight today, for each transport mode.

        Args:
            lat: Latitude of the starting point.
            lng: Longitude of the starting point.
            iata_code: Departure airport IATA code.
            departure_time: Flight departure as local "HH:MM" today.
            has_checked_bags: Whether bags must be dropped off.
            needs_passport_control: Whether the flight requires passport control.
            safety_margin_level: 0 (relaxed) to 5 (most conservative); out-of-range
                                 values are clamped.
            additional_buffer: Extra minutes to add on top of all buffers.
            transport_modes: Optional mode ids. All modes when omitted.
        """
        try:
            origin = _validate_coordinate(lat, lng)
            modes = _validate_modes(transport_modes)
            airport = await airport_svc.get_airport(iata_code)
            flight = FlightInfo(departure_time=departure_time, selected_airport=airport)
            prefs = DeparturePreferences(
                has_checked_bags=has_checked_bags,
                needs_passport_control=needs_passport_control,
                safety_margin_level=safety_margin_level,
                additional_buffer=additional_buffer,
            )
            plans = await departure_svc.plan_departure(origin, flight, prefs, modes)
            return _result_json(
                {
                    "airport": _airport_dict(airport),
                    "departureTime": departure_time,
                    "plans": [_plan_dict(p) for p in plans],
                    "count": len(plans),
                }
            )
        except Exception as exc:
            return _handle_exception(exc)
