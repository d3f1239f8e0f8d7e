from __future__ import annotations

from airport_math.domain.entities import Airport
from airport_math.domain.value_objects import AirportType, Coordinate


def _large(
    iata: str,
    name: str,
    city: str,
    country: str,
    icao: str,
    lat: float,
    lng: float,
    elevation: int,
    timezone: str,
) -> Airport:
    return Airport(
        id=iata,
        name=name,
        city=city,
        country=country,
        iata=iata,
        icao=icao,
        coordinate=Coordinate(lat, lng),
        elevation=elevation,
        timezone=timezone,
        type=AirportType.LARGE,
    )


# Curated major passenger airports, used when the OurAirports download fails.
# Order is significant: proximity ties keep this order.
FALLBACK_AIRPORTS: tuple[Airport, ...] = (
    _large("LAX", "Los Angeles International Airport", "Los Angeles", "US", "KLAX", 33.9425, -118.4081, 125, "America/Los_Angeles"),
    _large("JFK", "John F. Kennedy International Airport", "New York", "US", "KJFK", 40.6413, -73.7781, 13, "America/New_York"),
    _large("LHR", "London Heathrow Airport", "London", "GB", "EGLL", 51.4700, -0.4543, 25, "Europe/London"),
    _large("CDG", "Charles de Gaulle Airport", "Paris", "FR", "LFPG", 49.0097, 2.5479, 119, "Europe/Paris"),
    _large("NRT", "Narita International Airport", "Tokyo", "JP", "RJAA", 35.7720, 140.3929, 43, "Asia/Tokyo"),
    _large("SFO", "San Francisco International Airport", "San Francisco", "US", "KSFO", 37.6213, -122.3790, 13, "America/Los_Angeles"),
    _large("ORD", "O'Hare International Airport", "Chicago", "US", "KORD", 41.9742, -87.9073, 201, "America/Chicago"),
    _large("DXB", "Dubai International Airport", "Dubai", "AE", "OMDB", 25.2532, 55.3657, 62, "Asia/Dubai"),
    _large("SIN", "Singapore Changi Airport", "Singapore", "SG", "WSSS", 1.3644, 103.9915, 22, "Asia/Singapore"),
    _large("HND", "Tokyo Haneda Airport", "Tokyo", "JP", "RJTT", 35.5494, 139.7798, 21, "Asia/Tokyo"),
    _large("ATL", "Hartsfield-Jackson Atlanta International Airport", "Atlanta", "US", "KATL", 33.6407, -84.4277, 313, "America/New_York"),
    _large("DEN", "Denver International Airport", "Denver", "US", "KDEN", 39.8617, -104.6737, 1655, "America/Denver"),
    _large("MIA", "Miami International Airport", "Miami", "US", "KMIA", 25.7959, -80.2870, 11, "America/New_York"),
    _large("SEA", "Seattle-Tacoma International Airport", "Seattle", "US", "KSEA", 47.4502, -122.3088, 131, "America/Los_Angeles"),
    _large("BOS", "Logan International Airport", "Boston", "US", "KBOS", 42.3656, -71.0096, 6, "America/New_York"),
    _large("YYZ", "Toronto Pearson International Airport", "Toronto", "CA", "CYYZ", 43.6777, -79.6248, 173, "America/Toronto"),
    _large("YVR", "Vancouver International Airport", "Vancouver", "CA", "CYVR", 49.1939, -123.1844, 4, "America/Vancouver"),
    _large("FRA", "Frankfurt Airport", "Frankfurt", "DE", "EDDF", 50.0379, 8.5622, 111, "Europe/Berlin"),
    _large("AMS", "Amsterdam Airport Schiphol", "Amsterdam", "NL", "EHAM", 52.3105, 4.7683, -3, "Europe/Amsterdam"),
    _large("MAD", "Adolfo Suárez Madrid–Barajas Airport", "Madrid", "ES", "LEMD", 40.4839, -3.5680, 610, "Europe/Madrid"),
    _large("FCO", "Leonardo da Vinci International Airport", "Rome", "IT", "LIRF", 41.8003, 12.2389, 13, "Europe/Rome"),
    _large("IST", "Istanbul Airport", "Istanbul", "TR", "LTFM", 41.2753, 28.7519, 325, "Europe/Istanbul"),
    _large("SYD", "Sydney Kingsford Smith Airport", "Sydney", "AU", "YSSY", -33.9399, 151.1753, 21, "Australia/Sydney"),
    _large("MEL", "Melbourne Airport", "Melbourne", "AU", "YMML", -37.6733, 144.8433, 132, "Australia/Melbourne"),
    _large("PEK", "Beijing Capital International Airport", "Beijing", "CN", "ZBAA", 40.0799, 116.6031, 116, "Asia/Shanghai"),
    _large("ICN", "Incheon International Airport", "Seoul", "KR", "RKSI", 37.4602, 126.4407, 23, "Asia/Seoul"),
    _large("BKK", "Suvarnabhumi Airport", "Bangkok", "TH", "VTBS", 13.6900, 100.7501, 2, "Asia/Bangkok"),
    _large("DEL", "Indira Gandhi International Airport", "Delhi", "IN", "VIDP", 28.5562, 77.1000, 237, "Asia/Kolkata"),
    _large("BOM", "Chhatrapati Shivaji Maharaj International Airport", "Mumbai", "IN", "VABB", 19.0897, 72.8656, 11, "Asia/Kolkata"),
)
