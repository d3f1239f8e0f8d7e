from __future__ import annotations

import dataclasses
import json

from mcp.server.fastmcp import FastMCP

from airport_math.domain.value_objects import TRANSPORT_MODES


def transport_modes_json() -> str:
    return json.dumps(
        {"transportModes": [dataclasses.asdict(m) for m in TRANSPORT_MODES]},
        ensure_ascii=False,
    )


def register_resources(mcp: FastMCP) -> None:
    """Register read-only reference resources. Called once during server setup."""

    @mcp.resource(
        "airport-math://transport-modes",
        mime_type="application/json",
    )
    def transport_modes() -> str:
        """The transport modes accepted by estimate_routes and plan_departure."""
        return transport_modes_json()
