from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from airport_math.domain.entities import RouteInfo
from airport_math.domain.exceptions import InvalidInputError
from airport_math.domain.services import estimate_fallback_route, round_half_up
from airport_math.domain.value_objects import DRIVING, TRANSPORT_MODES, Coordinate, TransportMode
from airport_math.infrastructure.osrm_client import OsrmClient

logger = logging.getLogger(__name__)


def _require_geometry(
    origin: Coordinate | None, destination: Coordinate | None
) -> tuple[Coordinate, Coordinate]:
    if origin is None:
        raise InvalidInputError("Route origin is required")
    if destination is None:
        raise InvalidInputError("Route destination is required")
    return origin, destination


class RouteEstimator:
    """Travel estimates per transport mode.

    Driving asks the routing server first; every other mode, and driving when
    the server fails, gets the analytic fallback. Failures never reach the caller.
    """

    def __init__(self, osrm_client: OsrmClient, timeout: float | None = None) -> None:
        self._osrm = osrm_client
        self._timeout = timeout

    async def estimate_route(
        self,
        origin: Coordinate | None,
        destination: Coordinate | None,
        mode: TransportMode | None,
    ) -> RouteInfo:
        origin, destination = _require_geometry(origin, destination)
        if mode is None:
            raise InvalidInputError("Transport mode is required")

        if mode.id != DRIVING.id:
            return estimate_fallback_route(origin, destination, mode)

        try:
            route = await self._osrm.route(origin, destination, timeout=self._timeout)
            return RouteInfo(
                duration=round_half_up(route.duration_s / 60),
                distance=route.distance_m,
                mode=mode,
                instructions=route.instructions,
            )
        except Exception as exc:
            logger.warning("Routing failed, using estimated route: %r", exc)
            return estimate_fallback_route(origin, destination, mode)

    async def estimate_multiple(
        self,
        origin: Coordinate | None,
        destination: Coordinate | None,
        modes: Sequence[TransportMode] = TRANSPORT_MODES,
    ) -> list[RouteInfo]:
        """Estimate all modes concurrently. Results follow the order of modes.

        Returns an empty list if the batch fails unexpectedly.
        """
        origin, destination = _require_geometry(origin, destination)
        try:
            results = await asyncio.gather(
                *(self.estimate_route(origin, destination, mode) for mode in modes)
            )
        except Exception:
            logger.exception("Error calculating routes for %d modes", len(modes))
            return []
        return list(results)
