from typing import Optional

from fastapi import Request

from core.config import Settings, get_settings
from core.state import RuntimeState
from rpc.dispatcher import JsonRpcDispatcher
from tools.executor import ToolExecutor
from tools.registry import ToolRegistry, default_registry


class ServerSession:
    """
    Shared in-memory server session.
    Used by:
    - REST routes (/api/...)
    - MCP JSON-RPC endpoint (/mcp)

    One instance per app, so counters are shared across both protocols
    but never across apps.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        registry: Optional[ToolRegistry] = None,
    ):
        self.settings = settings or get_settings()
        self.state = RuntimeState()
        self.registry = registry or default_registry()
        self.executor = ToolExecutor(
            registry=self.registry,
            state=self.state,
            settings=self.settings,
        )
        self.rpc = JsonRpcDispatcher(
            registry=self.registry,
            executor=self.executor,
            settings=self.settings,
        )


def get_session(request: Request) -> ServerSession:
    return request.app.state.session
