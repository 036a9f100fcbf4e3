from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ToolDescriptor(_WireModel):
    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")


class ToolListResponse(BaseModel):
    tools: List[ToolDescriptor]


class ErrorResponse(BaseModel):
    error: str


class EndpointMap(BaseModel):
    mcp: str
    rest: List[str]
    documentation: List[str]


class DiscoveryResponse(BaseModel):
    message: str
    version: str
    tools: List[str]
    environment: str
    protocols: List[str]
    endpoints: EndpointMap


class MemoryUsage(BaseModel):
    rss: int
    vms: int


class StatsResponse(_WireModel):
    requests: int
    last_request: Optional[str] = Field(alias="lastRequest")
    uptime: int
    memory_usage: MemoryUsage = Field(alias="memoryUsage")
    platform: str
    python_version: str = Field(alias="pythonVersion")
    environment: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str


class ServerInfo(BaseModel):
    name: str
    version: str


class McpDiscoveryResponse(_WireModel):
    name: str
    version: str
    protocol_version: str = Field(alias="protocolVersion")
    capabilities: Dict[str, Any]
    server_info: ServerInfo = Field(alias="serverInfo")
