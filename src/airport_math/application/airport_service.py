from __future__ import annotations

import logging

import httpx

from airport_math.domain.entities import Airport, NearbyAirports
from airport_math.domain.exceptions import AirportMathError, AirportNotFoundError
from airport_math.domain.services import find_by_code, find_nearby, search_by_text
from airport_math.domain.value_objects import Coordinate
from airport_math.infrastructure.cache import TTLCache
from airport_math.infrastructure.fallback_airports import FALLBACK_AIRPORTS
from airport_math.infrastructure.ourairports_client import OurAirportsClient

logger = logging.getLogger(__name__)

TTL_AIRPORTS = 24 * 60 * 60  # seconds
_CACHE_KEY = "airports"


class AirportService:
    """Resolves the airport dataset and runs searches over it.

    The dataset is cached for 24 hours and refreshed lazily on the first
    access after expiry. When the download fails the curated fallback list is
    cached in its place for the same period.
    """

    def __init__(
        self,
        dataset_client: OurAirportsClient,
        cache: TTLCache,
        ttl: int = TTL_AIRPORTS,
    ) -> None:
        self._dataset = dataset_client
        self._cache = cache
        self._ttl = ttl

    async def get_airports(self) -> list[Airport]:
        cached = self._cache.get(_CACHE_KEY)
        if cached is not None:
            return cached  # type: ignore[no-any-return]

        airports = await self._load()
        self._cache.set(_CACHE_KEY, airports, ttl=self._ttl)
        return airports

    async def _load(self) -> list[Airport]:
        try:
            airports = await self._dataset.fetch_airports()
        except (httpx.HTTPError, AirportMathError) as exc:
            logger.warning("Airport dataset unavailable, using fallback list: %s", exc)
            return list(FALLBACK_AIRPORTS)
        if not airports:
            logger.warning("Airport dataset contained no usable rows, using fallback list")
            return list(FALLBACK_AIRPORTS)
        logger.info("Loaded %d commercial passenger airports", len(airports))
        return airports

    async def find_nearby(
        self,
        origin: Coordinate,
        max_results: int = 10,
        max_distance_km: float = 2000.0,
    ) -> NearbyAirports:
        airports = await self.get_airports()
        nearby = find_nearby(origin, airports, max_results, max_distance_km)
        logger.info(
            "Found %d airports within %skm of (%s, %s)",
            len(nearby),
            max_distance_km,
            origin.lat,
            origin.lng,
        )
        return NearbyAirports(airports=nearby, user_location=origin)

    async def find_by_code(self, code: str) -> Airport | None:
        return find_by_code(code, await self.get_airports())

    async def get_airport(self, code: str) -> Airport:
        """Like find_by_code, but raises AirportNotFoundError when nothing matches."""
        airport = await self.find_by_code(code)
        if airport is None:
            raise AirportNotFoundError(f"Airport not found: {code}")
        return airport

    async def search(self, query: str, max_results: int = 10) -> list[Airport]:
        return search_by_text(query, await self.get_airports(), max_results)
