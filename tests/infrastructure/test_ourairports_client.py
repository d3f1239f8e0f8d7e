"""Tests for the OurAirports dataset parser and client."""
from __future__ import annotations

import httpx
import pytest
import respx

from airport_math.domain.exceptions import ApiError
from airport_math.domain.value_objects import AirportType
from airport_math.infrastructure.ourairports_client import (
    AIRPORTS_CSV_URL,
    OurAirportsClient,
    parse_airport_row,
    parse_airports_csv,
)


def make_row(**overrides: str) -> dict[str, str]:
    row = {
        "ident": "EGLL",
        "type": "large_airport",
        "name": "London Heathrow Airport",
        "latitude_deg": "51.4706",
        "longitude_deg": "-0.461941",
        "elevation_ft": "83",
        "iso_country": "GB",
        "municipality": "London",
        "scheduled_service": "yes",
        "gps_code": "EGLL",
        "iata_code": "LHR",
    }
    row.update(overrides)
    return row


def test_parse_airports_csv_keeps_commercial_airports(sample_airports_csv: str) -> None:
    airports = parse_airports_csv(sample_airports_csv)

    assert [a.iata for a in airports] == ["LAX", "BUR"]
    lax, bur = airports
    assert lax.id == "KLAX"
    assert lax.icao == "KLAX"
    assert lax.type is AirportType.LARGE
    assert lax.elevation == 38
    assert lax.timezone == "UTC"
    assert lax.coordinate.lat == pytest.approx(33.942501)
    assert bur.name == "Bob Hope Airport, Burbank"
    assert bur.type is AirportType.MEDIUM
    assert bur.city == "Burbank"


def test_parse_row_maps_fields() -> None:
    airport = parse_airport_row(make_row())
    assert airport is not None
    assert airport.country == "GB"
    assert airport.elevation == 25
    assert airport.distance_km is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"type": "small_airport"},
        {"type": "closed"},
        {"iata_code": ""},
        {"iata_code": "LH"},
        {"iata_code": "L1R"},
        {"name": ""},
        {"municipality": ""},
        {"scheduled_service": "no"},
        {"name": "RAF Northolt Military Airfield"},
        {"name": "Private Strip"},
        {"name": "City Heliport"},
        {"latitude_deg": "abc"},
        {"latitude_deg": "91"},
        {"longitude_deg": "-181"},
    ],
)
def test_parse_row_rejects(overrides: dict[str, str]) -> None:
    assert parse_airport_row(make_row(**overrides)) is None


def test_parse_row_defaults_for_missing_optionals() -> None:
    airport = parse_airport_row(make_row(ident="", elevation_ft="", iso_country=""))
    assert airport is not None
    assert airport.id == "LHR"
    assert airport.icao == "EGLL"
    assert airport.elevation == 0
    assert airport.country == "Unknown"


def test_parse_row_uppercases_iata() -> None:
    airport = parse_airport_row(make_row(iata_code="lhr"))
    assert airport is not None
    assert airport.iata == "LHR"


def test_parse_empty_csv() -> None:
    assert parse_airports_csv("") == []


@respx.mock
async def test_fetch_airports(sample_airports_csv: str) -> None:
    route = respx.get(AIRPORTS_CSV_URL).mock(
        return_value=httpx.Response(200, text=sample_airports_csv)
    )

    client = OurAirportsClient(http_client=httpx.AsyncClient())
    airports = await client.fetch_airports()

    assert route.call_count == 1
    assert route.calls[0].request.headers["Accept"] == "text/csv"
    assert [a.iata for a in airports] == ["LAX", "BUR"]


@respx.mock
async def test_fetch_uses_configured_url(sample_airports_csv: str) -> None:
    url = "https://mirror.example.org/airports.csv"
    route = respx.get(url).mock(return_value=httpx.Response(200, text=sample_airports_csv))

    client = OurAirportsClient(http_client=httpx.AsyncClient(), url=url)
    await client.fetch_csv()

    assert route.called


@respx.mock
async def test_api_error_on_non_2xx() -> None:
    respx.get(AIRPORTS_CSV_URL).mock(return_value=httpx.Response(404))

    client = OurAirportsClient(http_client=httpx.AsyncClient())
    with pytest.raises(ApiError) as exc_info:
        await client.fetch_airports()

    assert exc_info.value.status_code == 404


@pytest.mark.parametrize(("elevation_ft", "meters"), [("2.5", 3), ("3.5", 4), ("-2.5", -2)])
def test_elevation_rounds_half_up(
    monkeypatch: pytest.MonkeyPatch, elevation_ft: str, meters: int
) -> None:
    monkeypatch.setattr(
        "airport_math.infrastructure.ourairports_client.FEET_TO_METERS", 1.0
    )
    airport = parse_airport_row(make_row(elevation_ft=elevation_ft))
    assert airport is not None
    assert airport.elevation == meters
