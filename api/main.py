import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.mcp import router as mcp_router
from api.rest import router as rest_router
from api.state import ServerSession
from core.config import Settings, get_settings
from core.logger import setup_logging

logger = logging.getLogger("api.access")


def create_app(
    settings: Optional[Settings] = None,
    session: Optional[ServerSession] = None,
) -> FastAPI:
    settings = settings or get_settings()
    session = session or ServerSession(settings=settings)

    app = FastAPI(
        title="MCP Server API",
        version=settings.server_version,
        description=(
            "Model Context Protocol (MCP) server that also exposes its "
            "tools as REST endpoints."
        ),
    )
    app.state.session = session

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s %d %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.include_router(rest_router)
    app.include_router(mcp_router)
    return app


setup_logging(get_settings())
app = create_app()
