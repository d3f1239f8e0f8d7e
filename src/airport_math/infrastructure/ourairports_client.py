from __future__ import annotations

import csv
import io
import logging
from typing import Mapping

import httpx

from airport_math.domain.entities import Airport
from airport_math.domain.exceptions import ApiError
from airport_math.domain.services import round_half_up
from airport_math.domain.value_objects import AirportType, Coordinate
from airport_math.infrastructure.headers import make_headers

logger = logging.getLogger(__name__)

AIRPORTS_CSV_URL = "https://davidmegginson.github.io/ourairports-data/airports.csv"
FEET_TO_METERS = 0.3048

_EXCLUDED_NAME_WORDS = ("military", "air force", "army", "navy", "private", "heliport")


def _parse_float(value: str | None) -> float | None:
    try:
        return float(value) if value else None
    except ValueError:
        return None


def parse_airport_row(row: Mapping[str, str | None]) -> Airport | None:
    """Turn one OurAirports CSV row into an Airport, or None if it is not a
    commercial passenger airport with usable data.

    Kept rows:
    - type is large_airport or medium_airport
    - scheduled_service == "yes"
    - 3-letter iata_code, non-empty name and municipality
    - numeric, in-range latitude_deg / longitude_deg
    - name does not look military, private or like a heliport
    """
    raw_type = (row.get("type") or "").strip()
    try:
        airport_type = AirportType(raw_type)
    except ValueError:
        return None

    iata = (row.get("iata_code") or "").strip().upper()
    name = (row.get("name") or "").strip()
    city = (row.get("municipality") or "").strip()
    if len(iata) != 3 or not iata.isalpha() or not name or not city:
        return None
    if (row.get("scheduled_service") or "").strip() != "yes":
        return None
    lowered = name.lower()
    if any(word in lowered for word in _EXCLUDED_NAME_WORDS):
        return None

    lat = _parse_float(row.get("latitude_deg"))
    lng = _parse_float(row.get("longitude_deg"))
    if lat is None or lng is None or not (-90 <= lat <= 90) or not (-180 <= lng <= 180):
        return None

    elevation_ft = _parse_float(row.get("elevation_ft"))
    ident = (row.get("ident") or "").strip()
    return Airport(
        id=ident or iata,
        name=name,
        city=city,
        country=(row.get("iso_country") or "").strip() or "Unknown",
        iata=iata,
        icao=ident or (row.get("gps_code") or "").strip(),
        coordinate=Coordinate(lat, lng),
        elevation=round_half_up(elevation_ft * FEET_TO_METERS) if elevation_ft is not None else 0,
        timezone="UTC",  # the dataset carries no timezone column
        type=airport_type,
    )


def parse_airports_csv(text: str) -> list[Airport]:
    """Parse the full airports.csv, keeping dataset order and dropping rejected rows."""
    reader = csv.DictReader(io.StringIO(text))
    airports: list[Airport] = []
    rejected = 0
    for row in reader:
        airport = parse_airport_row(row)
        if airport is None:
            rejected += 1
            continue
        airports.append(airport)
    logger.debug("Parsed %d airports, rejected %d rows", len(airports), rejected)
    return airports


class OurAirportsClient:
    """Downloads the public-domain OurAirports dataset."""

    def __init__(self, http_client: httpx.AsyncClient, url: str = AIRPORTS_CSV_URL) -> None:
        self._http = http_client
        self._url = url

    async def fetch_csv(self) -> str:
        """GET airports.csv as text. Raises ApiError on non-2xx status."""
        response = await self._http.get(self._url, headers=make_headers("text/csv"))
        if response.status_code >= 400:
            raise ApiError(response.status_code, f"Airport dataset error ({response.status_code})")
        return response.text

    async def fetch_airports(self) -> list[Airport]:
        return parse_airports_csv(await self.fetch_csv())
