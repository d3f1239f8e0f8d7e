from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import httpx

from airport_math.domain.exceptions import ApiError, RoutingError
from airport_math.domain.value_objects import Coordinate
from airport_math.infrastructure.headers import make_headers

BASE_URL = "https://router.project-osrm.org"


@dataclass
class OsrmRoute:
    duration_s: float
    distance_m: float
    instructions: list[str] = field(default_factory=list)


def _is_usable_amount(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        amount = float(value)
    except OverflowError:
        return False
    return math.isfinite(amount) and amount >= 0


def parse_osrm_route(payload: Any) -> OsrmRoute:
    """Extract the first route from an OSRM /route response.

    Raises RoutingError when the service reports no route or the payload does
    not have the expected shape.
    """
    if not isinstance(payload, dict):
        raise RoutingError("Routing response is not a JSON object")
    if payload.get("code") != "Ok":
        raise RoutingError(f"No route found ({payload.get('code')!r})")
    routes = payload.get("routes")
    if not isinstance(routes, list) or not routes or not isinstance(routes[0], dict):
        raise RoutingError("No route found")

    route = routes[0]
    duration = route.get("duration")
    distance = route.get("distance")
    if not _is_usable_amount(duration) or not _is_usable_amount(distance):
        raise RoutingError(f"Route has unusable duration or distance ({duration!r}, {distance!r})")

    instructions: list[str] = []
    legs = route.get("legs")
    first_leg = legs[0] if isinstance(legs, list) and legs else None
    steps = first_leg.get("steps") if isinstance(first_leg, dict) else None
    for step in steps if isinstance(steps, list) else []:
        maneuver = step.get("maneuver") if isinstance(step, dict) else None
        instruction = maneuver.get("instruction") if isinstance(maneuver, dict) else None
        if isinstance(instruction, str) and instruction:
            instructions.append(instruction)

    return OsrmRoute(duration_s=float(duration), distance_m=float(distance), instructions=instructions)


class OsrmClient:
    """HTTP client for an OSRM routing server (driving profile only).

    The public demo server only offers car routing; other modes never reach it.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str = BASE_URL) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    async def route(
        self,
        origin: Coordinate,
        destination: Coordinate,
        timeout: float | None = None,
    ) -> OsrmRoute:
        """GET /route/v1/driving/{lng},{lat};{lng},{lat}?overview=false&steps=true.

        OSRM expects lng,lat order. Raises ApiError on non-2xx status and
        RoutingError when no usable route comes back. httpx errors propagate.
        """
        url = (
            f"{self._base_url}/route/v1/driving/"
            f"{origin.lng},{origin.lat};{destination.lng},{destination.lat}"
        )
        params = {"overview": "false", "steps": "true"}
        if timeout is not None:
            response = await self._http.get(
                url, params=params, headers=make_headers(), timeout=timeout
            )
        else:
            response = await self._http.get(url, params=params, headers=make_headers())
        if response.status_code >= 400:
            raise ApiError(response.status_code, f"OSRM API error ({response.status_code})")
        return parse_osrm_route(response.json())
