"""Tests for OsrmClient using respx to mock HTTP calls."""
from __future__ import annotations

import httpx
import pytest
import respx

from airport_math.domain.exceptions import ApiError, RoutingError
from airport_math.domain.value_objects import Coordinate
from airport_math.infrastructure.osrm_client import BASE_URL, OsrmClient, parse_osrm_route

ORIGIN = Coordinate(34.0522, -118.2437)
LAX = Coordinate(33.9425, -118.4081)
ROUTE_PREFIX = f"{BASE_URL}/route/v1/driving/"


def make_client(base_url: str = BASE_URL) -> OsrmClient:
    return OsrmClient(http_client=httpx.AsyncClient(), base_url=base_url)


@respx.mock
async def test_route_calls_correct_url(sample_osrm_payload: dict) -> None:  # type: ignore[type-arg]
    """Coordinates go out in lng,lat order with overview and steps params."""
    route = respx.get(url__startswith=ROUTE_PREFIX).mock(
        return_value=httpx.Response(200, json=sample_osrm_payload)
    )

    client = make_client()
    result = await client.route(ORIGIN, LAX)

    assert route.called
    request = route.calls[0].request
    assert request.url.path == "/route/v1/driving/-118.2437,34.0522;-118.4081,33.9425"
    assert request.url.params["overview"] == "false"
    assert request.url.params["steps"] == "true"
    assert request.headers["User-Agent"].startswith("Airport-Math-App/")
    assert result.duration_s == 1830.4
    assert result.distance_m == 24512.7
    assert result.instructions == ["Head north on Main St", "Arrive at LAX"]


@respx.mock
async def test_route_custom_base_url(sample_osrm_payload: dict) -> None:  # type: ignore[type-arg]
    route = respx.get(url__startswith="http://osrm.local:5000/route/v1/driving/").mock(
        return_value=httpx.Response(200, json=sample_osrm_payload)
    )

    client = make_client("http://osrm.local:5000/")
    await client.route(ORIGIN, LAX)

    assert route.call_count == 1


@respx.mock
async def test_route_passes_timeout(sample_osrm_payload: dict) -> None:  # type: ignore[type-arg]
    route = respx.get(url__startswith=ROUTE_PREFIX).mock(
        return_value=httpx.Response(200, json=sample_osrm_payload)
    )

    client = make_client()
    await client.route(ORIGIN, LAX, timeout=3.0)

    assert route.calls[0].request.extensions["timeout"]["read"] == 3.0


@respx.mock
async def test_api_error_on_non_2xx() -> None:
    respx.get(url__startswith=ROUTE_PREFIX).mock(return_value=httpx.Response(503))

    client = make_client()
    with pytest.raises(ApiError) as exc_info:
        await client.route(ORIGIN, LAX)

    assert exc_info.value.status_code == 503


@respx.mock
async def test_no_route_raises_routing_error() -> None:
    respx.get(url__startswith=ROUTE_PREFIX).mock(
        return_value=httpx.Response(200, json={"code": "NoRoute", "routes": []})
    )

    client = make_client()
    with pytest.raises(RoutingError):
        await client.route(ORIGIN, LAX)


@respx.mock
async def test_transport_errors_propagate() -> None:
    respx.get(url__startswith=ROUTE_PREFIX).mock(side_effect=httpx.ConnectError("refused"))

    client = make_client()
    with pytest.raises(httpx.ConnectError):
        await client.route(ORIGIN, LAX)


# ---------------------------------------------------------------------------
# parse_osrm_route
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {"code": "Ok"},
        {"code": "Ok", "routes": []},
        {"code": "InvalidQuery", "routes": [{"duration": 1, "distance": 1}]},
        {"code": "Ok", "routes": [{"duration": "fast", "distance": 100}]},
        {"code": "Ok", "routes": [{"duration": True, "distance": 100}]},
        {"code": "Ok", "routes": [{"duration": 60}]},
        {"code": "Ok", "routes": [{"duration": float("nan"), "distance": 100}]},
        {"code": "Ok", "routes": [{"duration": float("inf"), "distance": 100}]},
        {"code": "Ok", "routes": [{"duration": 60, "distance": float("-inf")}]},
        {"code": "Ok", "routes": [{"duration": -36000, "distance": 100}]},
        {"code": "Ok", "routes": [{"duration": 60, "distance": -1.5}]},
        {"code": "Ok", "routes": [{"duration": 10**400, "distance": 100}]},
    ],
)
def test_parse_rejects_unusable_payloads(payload: object) -> None:
    with pytest.raises(RoutingError):
        parse_osrm_route(payload)


def test_parse_without_steps() -> None:
    result = parse_osrm_route({"code": "Ok", "routes": [{"duration": 600, "distance": 9000}]})
    assert result.duration_s == 600.0
    assert result.instructions == []


def test_parse_skips_steps_without_instruction() -> None:
    payload = {
        "code": "Ok",
        "routes": [
            {
                "duration": 60,
                "distance": 500,
                "legs": [
                    {
                        "steps": [
                            {"maneuver": {"type": "depart"}},
                            {"maneuver": {"instruction": ""}},
                            "garbage",
                            {"maneuver": {"instruction": "Turn left"}},
                        ]
                    }
                ],
            }
        ],
    }
    assert parse_osrm_route(payload).instructions == ["Turn left"]


def test_parse_accepts_zero_length_route() -> None:
    result = parse_osrm_route({"code": "Ok", "routes": [{"duration": 0, "distance": 0}]})
    assert (result.duration_s, result.distance_m) == (0.0, 0.0)


@respx.mock
async def test_non_finite_json_raises_routing_error() -> None:
    respx.get(url__startswith=ROUTE_PREFIX).mock(
        return_value=httpx.Response(
            200, text='{"code": "Ok", "routes": [{"duration": NaN, "distance": 24512.7}]}'
        )
    )

    with pytest.raises(RoutingError):
        await make_client().route(ORIGIN, LAX)
