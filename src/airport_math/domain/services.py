from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable

from airport_math.domain.entities import Airport, RouteInfo
from airport_math.domain.value_objects import Coordinate, TransportMode

EARTH_RADIUS_KM = 6371.0

# Mode id -> (average speed km/h, straight-line distance inflation)
FALLBACK_FACTORS: dict[str, tuple[float, float]] = {
    "driving-car": (50.0, 1.3),  # roads add ~30%
    "cycling-regular": (15.0, 1.2),
    "foot-walking": (5.0, 1.15),
    "public-transport": (25.0, 1.5),  # includes transfers and waiting
}
DEFAULT_FALLBACK_FACTOR = FALLBACK_FACTORS["driving-car"]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates using the Haversine formula."""
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def find_nearby(
    origin: Coordinate,
    airports: Iterable[Airport],
    max_results: int = 10,
    max_distance_km: float = 2000.0,
) -> list[Airport]:
    """Return copies of the airports within max_distance_km, nearest first.

    The distance limit is inclusive. Ties keep their input order (sorted() is
    stable), which matters because the dataset order reflects curation.
    """
    ranked: list[tuple[float, Airport]] = []
    for airport in airports:
        km = distance_km(origin, airport.coordinate)
        if km <= max_distance_km:
            ranked.append((km, replace(airport, distance_km=km)))
    ranked.sort(key=lambda pair: pair[0])
    return [airport for _, airport in ranked[:max_results]]


def find_by_code(code: str, airports: Iterable[Airport]) -> Airport | None:
    """Exact, case-insensitive IATA code lookup."""
    wanted = code.strip().upper()
    for airport in airports:
        if airport.iata.upper() == wanted:
            return airport
    return None


def search_by_text(
    query: str, airports: Iterable[Airport], max_results: int = 10
) -> list[Airport]:
    """Case-insensitive substring match on name, city, IATA or ICAO, in source order."""
    term = query.lower()
    matches: list[Airport] = []
    for airport in airports:
        if len(matches) >= max_results:
            break
        if (
            term in airport.name.lower()
            or term in airport.city.lower()
            or term in airport.iata.lower()
            or term in airport.icao.lower()
        ):
            matches.append(airport)
    return matches


def estimate_fallback_route(
    origin: Coordinate, destination: Coordinate, mode: TransportMode
) -> RouteInfo:
    """Network-independent route estimate from straight-line distance.

    The straight-line distance is inflated by a per-mode factor to approximate
    real paths, then divided by the mode's average speed. Unknown modes use the
    driving factors.
    """
    speed_kmh, inflation = FALLBACK_FACTORS.get(mode.id, DEFAULT_FALLBACK_FACTOR)
    adjusted_km = distance_km(origin, destination) * inflation
    return RouteInfo(
        duration=round_half_up(adjusted_km / speed_kmh * 60),
        distance=round_half_up(adjusted_km * 1000),
        mode=mode,
        instructions=[f"Estimated {mode.name.lower()} route to airport"],
        is_estimate=True,
    )


def format_distance(meters: float) -> str:
    """Format meters for display: "850m", "4.2km", "37km"."""
    if meters < 1000:
        return f"{round_half_up(meters)}m"
    if meters < 10000:
        return f"{meters / 1000:.1f}km"
    return f"{round_half_up(meters / 1000)}km"


def format_duration(minutes: int) -> str:
    """Format minutes for display: "45m", "2h", "1h 30m"."""
    if minutes < 60:
        return f"{minutes}m"
    hours, mins = divmod(minutes, 60)
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"
