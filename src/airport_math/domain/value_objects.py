from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe in decimal degrees. Ranges are not validated here."""

    lat: float  # [-90, 90]
    lng: float  # [-180, 180]


class AirportType(str, Enum):
    """Commercial passenger airport classes kept from the OurAirports dataset.

    Using (str, Enum) for Python 3.10 compatibility (StrEnum requires 3.11+).
    """

    LARGE = "large_airport"
    MEDIUM = "medium_airport"


@dataclass(frozen=True)
class TransportMode:
    """A way of getting to the airport. The id doubles as the routing profile key."""

    id: str
    name: str
    icon: str
    description: str


DRIVING = TransportMode("driving-car", "Driving", "🚗", "Drive your own car")
WALKING = TransportMode("foot-walking", "Walking", "🚶", "Walk to the airport")
CYCLING = TransportMode("cycling-regular", "Cycling", "🚴", "Bike to the airport")
PUBLIC_TRANSIT = TransportMode(
    "public-transport", "Public Transit", "🚌", "Use public transportation"
)

TRANSPORT_MODES: tuple[TransportMode, ...] = (DRIVING, WALKING, CYCLING, PUBLIC_TRANSIT)


def get_transport_mode(mode_id: str) -> TransportMode | None:
    """Return the known mode with this id (case-insensitive), or None."""
    wanted = mode_id.strip().lower()
    for mode in TRANSPORT_MODES:
        if mode.id == wanted:
            return mode
    return None
