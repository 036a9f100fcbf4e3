import copy
from dataclasses import dataclass
from typing import Any, Callable, Dict

from core.clock import utc_now
from core.config import Settings
from core.state import UsageSnapshot
from tools.results import ToolResult


@dataclass
class ToolContext:
    """
    Everything a tool may touch while executing.
    Built by the executor for each call.
    """
    settings: Settings
    usage: UsageSnapshot
    now: Callable = utc_now


class Tool:
    name: str
    description: str = ""
    input_schema: Dict[str, Any] = {
        "type": "object",
        "properties": {},
        "required": [],
    }

    def schema(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }

    def execute(self, arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
        raise NotImplementedError
