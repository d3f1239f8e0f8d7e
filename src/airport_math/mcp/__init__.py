from __future__ import annotations

import httpx
from mcp.server.fastmcp import FastMCP

from airport_math.application.airport_service import AirportService
from airport_math.application.departure_service import DepartureService
from airport_math.application.route_service import RouteEstimator
from airport_math.infrastructure.cache import TTLCache
from airport_math.infrastructure.osrm_client import BASE_URL as OSRM_BASE_URL
from airport_math.infrastructure.osrm_client import OsrmClient
from airport_math.infrastructure.ourairports_client import AIRPORTS_CSV_URL, OurAirportsClient
from airport_math.mcp.resources import register_resources
from airport_math.mcp.tools import register_tools

DEFAULT_TIMEOUT = 15.0  # seconds


def create_mcp_app(
    osrm_base_url: str = OSRM_BASE_URL,
    airports_csv_url: str = AIRPORTS_CSV_URL,
    timeout: float = DEFAULT_TIMEOUT,
    routing_timeout: float | None = None,
) -> FastMCP:
    """Create and configure the FastMCP application with all services wired."""
    cache = TTLCache()
    http_client = httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    airport_svc = AirportService(OurAirportsClient(http_client, airports_csv_url), cache)
    route_estimator = RouteEstimator(
        OsrmClient(http_client, osrm_base_url), timeout=routing_timeout
    )
    departure_svc = DepartureService(route_estimator)

    mcp = FastMCP("Airport Math", stateless_http=True)
    register_tools(mcp, airport_svc, route_estimator, departure_svc)
    register_resources(mcp)
    return mcp
