#!/usr/bin/env python3
"""Airport Math MCP Server: repository root entry point.

Usage:
    uv run server.py           # HTTP mode (default)
    uv run server.py --stdio   # stdio mode for desktop MCP clients
"""
from __future__ import annotations

import logging
import os
import sys

import uvicorn
from starlette.middleware.cors import CORSMiddleware

from airport_math.infrastructure.ourairports_client import AIRPORTS_CSV_URL as DEFAULT_CSV_URL
from airport_math.infrastructure.osrm_client import BASE_URL as DEFAULT_OSRM_URL
from airport_math.mcp import DEFAULT_TIMEOUT, create_mcp_app

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3001"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
OSRM_BASE_URL = os.environ.get("OSRM_BASE_URL", DEFAULT_OSRM_URL)
AIRPORTS_CSV_URL = os.environ.get("AIRPORTS_CSV_URL", DEFAULT_CSV_URL)
HTTP_TIMEOUT = float(os.environ.get("HTTP_TIMEOUT", str(DEFAULT_TIMEOUT)))
_routing_timeout = os.environ.get("ROUTING_TIMEOUT")
ROUTING_TIMEOUT = float(_routing_timeout) if _routing_timeout else None

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

if __name__ == "__main__":
    mcp = create_mcp_app(
        osrm_base_url=OSRM_BASE_URL,
        airports_csv_url=AIRPORTS_CSV_URL,
        timeout=HTTP_TIMEOUT,
        routing_timeout=ROUTING_TIMEOUT,
    )
    if "--stdio" in sys.argv:
        mcp.run(transport="stdio")
    else:
        # HTTP mode with CORS
        app = mcp.streamable_http_app()
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )
        print(f"Airport Math MCP Server listening on http://{HOST}:{PORT}/mcp")
        uvicorn.run(app, host=HOST, port=PORT)
