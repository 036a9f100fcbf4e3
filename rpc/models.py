"""JSON-RPC 2.0 messages used by the MCP endpoint.

Only the three error codes this server can emit are modelled. A response
carries exactly one of ``result`` / ``error``; ``id`` is omitted only for
the ``notifications/initialized`` acknowledgement.
"""

from __future__ import annotations

import math
from enum import Enum, IntEnum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

JSONRPC_VERSION = "2.0"

RequestId = Union[str, int, float, None]


class RpcMethod(str, Enum):
    INITIALIZE = "initialize"
    INITIALIZED = "notifications/initialized"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"

    @classmethod
    def parse(cls, value: Any) -> Optional["RpcMethod"]:
        try:
            return cls(value)
        except ValueError:
            return None


class RpcErrorCode(IntEnum):
    PARSE_ERROR = -32700
    METHOD_NOT_FOUND = -32601
    INTERNAL_ERROR = -32603

    @property
    def default_message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    RpcErrorCode.PARSE_ERROR: "Parse error",
    RpcErrorCode.METHOD_NOT_FOUND: "Method not found",
    RpcErrorCode.INTERNAL_ERROR: "Internal error",
}


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """Inbound envelope. Kept loose: bad fields are handled by the dispatcher."""

    model_config = ConfigDict(extra="allow")

    jsonrpc: Any = None
    id: Any = None
    method: Any = None
    params: Any = None

    @property
    def response_id(self) -> RequestId:
        if isinstance(self.id, bool):
            return None
        if isinstance(self.id, float) and not math.isfinite(self.id):
            return None
        if isinstance(self.id, (str, int, float)):
            return self.id
        return None


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Optional[Any] = None

    @classmethod
    def of(cls, code: RpcErrorCode, data: Any = None) -> "JsonRpcError":
        return cls(code=int(code), message=code.default_message, data=data)


class JsonRpcResponse(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = None
    result: Any = None
    error: Optional[JsonRpcError] = None
    include_id: bool = True

    @classmethod
    def success(cls, request_id: RequestId, result: Any) -> "JsonRpcResponse":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(
        cls,
        request_id: RequestId,
        code: RpcErrorCode,
        data: Any = None,
    ) -> "JsonRpcResponse":
        return cls(id=request_id, error=JsonRpcError.of(code, data))

    @classmethod
    def notification_ack(cls) -> "JsonRpcResponse":
        return cls(include_id=False)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.include_id:
            payload["id"] = self.id
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result
        return payload
