from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from core import wire
from core.config import Settings
from rpc.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    RpcErrorCode,
    RpcMethod,
)
from tools.errors import UnknownToolError
from tools.executor import ToolExecutor
from tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

Handler = Callable[[JsonRpcRequest], JsonRpcResponse]


def server_capabilities() -> Dict[str, Any]:
    return {"tools": {}, "logging": {}}


def initialize_result(settings: Settings) -> Dict[str, Any]:
    return {
        "protocolVersion": settings.protocol_version,
        "capabilities": server_capabilities(),
        "serverInfo": {
            "name": settings.server_name,
            "version": settings.server_version,
        },
    }


class JsonRpcDispatcher:
    """
    MCP JSON-RPC 2.0 dispatcher.

    Stateless apart from the shared executor: every call maps one
    envelope to one response and never raises.
    """

    def __init__(
        self,
        *,
        registry: ToolRegistry,
        executor: ToolExecutor,
        settings: Settings,
    ):
        self.registry = registry
        self.executor = executor
        self.settings = settings
        self._handlers: Dict[RpcMethod, Handler] = {
            RpcMethod.INITIALIZE: self._initialize,
            RpcMethod.INITIALIZED: self._initialized,
            RpcMethod.TOOLS_LIST: self._tools_list,
            RpcMethod.TOOLS_CALL: self._tools_call,
        }

    # -------- entry points --------

    def handle_raw(self, body: bytes | str) -> JsonRpcResponse:
        """
        Decode a raw HTTP body and dispatch it.
        Malformed JSON yields a -32700 response with a null id.
        """
        try:
            payload = wire.loads(body)
        except (ValueError, TypeError) as exc:
            logger.info("Rejected malformed JSON-RPC body: %s", exc)
            return JsonRpcResponse.failure(None, RpcErrorCode.PARSE_ERROR, str(exc))
        return self.dispatch(payload)

    def dispatch(self, payload: Any) -> JsonRpcResponse:
        if not isinstance(payload, dict):
            return JsonRpcResponse.failure(
                None,
                RpcErrorCode.METHOD_NOT_FOUND,
                "Unknown method: None",
            )

        request = JsonRpcRequest.model_validate(payload)
        method = RpcMethod.parse(request.method)
        if method is None:
            logger.info("Unknown JSON-RPC method %r", request.method)
            return JsonRpcResponse.failure(
                request.response_id,
                RpcErrorCode.METHOD_NOT_FOUND,
                f"Unknown method: {request.method}",
            )

        try:
            return self._handlers[method](request)
        except Exception as exc:
            logger.exception("JSON-RPC %s failed", method.value)
            return JsonRpcResponse.failure(
                request.response_id,
                RpcErrorCode.INTERNAL_ERROR,
                str(exc),
            )

    # -------- method handlers --------

    def _initialize(self, request: JsonRpcRequest) -> JsonRpcResponse:
        return JsonRpcResponse.success(
            request.response_id,
            initialize_result(self.settings),
        )

    def _initialized(self, request: JsonRpcRequest) -> JsonRpcResponse:
        return JsonRpcResponse.notification_ack()

    def _tools_list(self, request: JsonRpcRequest) -> JsonRpcResponse:
        return JsonRpcResponse.success(
            request.response_id,
            {"tools": self.registry.describe()},
        )

    def _tools_call(self, request: JsonRpcRequest) -> JsonRpcResponse:
        params = request.params if isinstance(request.params, dict) else {}
        name = params.get("name")
        arguments = params.get("arguments") or {}

        try:
            result = self.executor.execute(name, arguments)
        except UnknownToolError as exc:
            logger.info("tools/call for unknown tool %r", name)
            # -32601 for an unknown tool, kept for wire compatibility
            return JsonRpcResponse.failure(
                request.response_id,
                RpcErrorCode.METHOD_NOT_FOUND,
                str(exc),
            )

        return JsonRpcResponse.success(
            request.response_id,
            result.model_dump(),
        )
