"""Shared pytest fixtures for the Airport Math test suite."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from airport_math.domain.entities import Airport
from airport_math.domain.value_objects import AirportType, Coordinate


def make_airport(
    iata: str = "LAX",
    lat: float = 33.9425,
    lng: float = -118.4081,
    name: str | None = None,
    city: str = "Los Angeles",
    icao: str | None = None,
) -> Airport:
    return Airport(
        id=iata,
        name=name or f"{iata} International Airport",
        city=city,
        country="US",
        iata=iata,
        icao=icao or f"K{iata}",
        coordinate=Coordinate(lat, lng),
        elevation=10,
        timezone="UTC",
        type=AirportType.LARGE,
    )


@pytest.fixture
def airport_factory():  # type: ignore[no-untyped-def]
    return make_airport


@pytest.fixture
def fixed_now() -> datetime:
    """2026-02-24T12:00:00 UTC, the evaluation instant for departure tests."""
    return datetime(2026, 2, 24, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_osrm_payload() -> dict:  # type: ignore[type-arg]
    """Sample OSRM /route/v1/driving response with two steps."""
    return {
        "code": "Ok",
        "routes": [
            {
                "duration": 1830.4,
                "distance": 24512.7,
                "legs": [
                    {
                        "steps": [
                            {"maneuver": {"type": "depart", "instruction": "Head north on Main St"}},
                            {"maneuver": {"type": "arrive", "instruction": "Arrive at LAX"}},
                        ]
                    }
                ],
            }
        ],
        "waypoints": [],
    }


@pytest.fixture
def sample_airports_csv() -> str:
    """A few rows in OurAirports airports.csv format, including rejected ones."""
    header = (
        '"id","ident","type","name","latitude_deg","longitude_deg","elevation_ft",'
        '"continent","iso_country","iso_region","municipality","scheduled_service",'
        '"gps_code","iata_code","local_code","home_link","wikipedia_link","keywords"'
    )
    rows = [
        '3632,"KLAX","large_airport","Los Angeles International Airport",33.942501,-118.407997,125,'
        '"NA","US","US-CA","Los Angeles","yes","KLAX","LAX","LAX",,,',
        '3384,"KBUR","medium_airport","Bob Hope Airport, Burbank",34.197222,-118.358056,778,'
        '"NA","US","US-CA","Burbank","yes","KBUR","BUR","BUR",,,',
        '1,"00A","heliport","Total RF Heliport",40.070985,-74.933689,11,'
        '"NA","US","US-PA","Bensalem","no",,,,,,',
        '2,"KXXX","large_airport","Closed Field",40.0,-74.0,10,'
        '"NA","US","US-NJ","Nowhere","no","KXXX","XXX",,,,',
        '3,"KMIL","medium_airport","March Air Force Base",33.88,-117.26,1535,'
        '"NA","US","US-CA","Riverside","yes","KRIV","RIV",,,,',
        '4,"KNOI","medium_airport","No IATA Field",33.0,-117.0,10,'
        '"NA","US","US-CA","Somewhere","yes","KNOI",,,,,',
    ]
    return "\n".join([header, *rows]) + "\n"
