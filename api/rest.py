"""
REST surface: discovery, tool listing/execution, stats and health.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.schemas import (
    DiscoveryResponse,
    ErrorResponse,
    HealthResponse,
    MemoryUsage,
    StatsResponse,
    ToolListResponse,
)
from api.state import ServerSession, get_session
from core import wire
from core.clock import utc_now_iso
from core.host import collect_host_info
from tools.errors import UnknownToolError
from tools.results import ToolResult

logger = logging.getLogger(__name__)

router = APIRouter()

PROTOCOLS = ["MCP-over-HTTP", "REST API"]

REST_ENDPOINTS = [
    "GET /api/tools - List available tools",
    "POST /api/tools/{name} - Execute a tool",
    "GET /api/stats - Get API statistics",
    "GET /api/health - Health check",
]

DOC_ENDPOINTS = [
    "GET /docs - Interactive Swagger UI documentation",
    "GET /openapi.json - OpenAPI specification (JSON)",
]


def parse_arguments(body: bytes) -> dict[str, Any]:
    """
    Tool arguments from a raw request body.
    Empty, malformed or non-object bodies all mean "no arguments".
    """
    if not body or not body.strip():
        return {}
    try:
        arguments = wire.loads(body)
    except ValueError:
        logger.debug("Ignoring malformed tool request body")
        return {}
    return arguments if isinstance(arguments, dict) else {}


@router.get("/", response_model=DiscoveryResponse)
async def root(session: ServerSession = Depends(get_session)):
    settings = session.settings
    return DiscoveryResponse(
        message=f"MCP Server with FastAPI ({settings.environment_name()})",
        version=settings.server_version,
        tools=session.registry.names(),
        environment=settings.environment_name(),
        protocols=PROTOCOLS,
        endpoints={
            "mcp": "POST /mcp - MCP protocol endpoint",
            "rest": REST_ENDPOINTS,
            "documentation": DOC_ENDPOINTS,
        },
    )


@router.get("/api/tools", response_model=ToolListResponse)
async def list_tools(session: ServerSession = Depends(get_session)):
    return {"tools": session.registry.describe()}


@router.post(
    "/api/tools/{tool_name}",
    response_model=ToolResult,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def call_tool(
    tool_name: str,
    request: Request,
    session: ServerSession = Depends(get_session),
):
    arguments = parse_arguments(await request.body())

    try:
        return session.executor.execute(tool_name, arguments)
    except UnknownToolError:
        logger.info("REST call for unknown tool %s", tool_name)
        return JSONResponse(
            status_code=404,
            content={"error": f"Tool '{tool_name}' not found"},
        )
    except Exception as exc:
        logger.exception("REST call for tool %s failed", tool_name)
        return JSONResponse(status_code=500, content={"error": str(exc)})


@router.get("/api/stats", response_model=StatsResponse)
async def stats(session: ServerSession = Depends(get_session)):
    usage = session.state.snapshot()
    info = collect_host_info()
    return StatsResponse(
        requests=usage.request_count,
        last_request=usage.last_request,
        uptime=info.uptime_rounded,
        memory_usage=MemoryUsage(rss=info.rss_bytes, vms=info.vms_bytes),
        platform=info.platform,
        python_version=info.python_version,
        environment=session.settings.environment_name(),
    )


@router.get("/api/health", response_model=HealthResponse)
async def health(session: ServerSession = Depends(get_session)):
    return HealthResponse(
        status="healthy",
        timestamp=utc_now_iso(),
        environment=session.settings.environment_name(),
    )
