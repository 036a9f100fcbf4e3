from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from tools.base import Tool
from tools.builtin import BUILTIN_TOOLS

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Name -> tool mapping, filled once at startup.

    Iteration order is registration order. Both dispatchers read from
    the same registry; neither mutates it.
    """

    def __init__(self, tools: Iterable[Tool] = ()):
        self._tools: Dict[str, Tool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: Tool) -> Tool:
        name = getattr(tool, "name", "")
        if not name:
            raise ValueError(f"Tool {type(tool).__name__} has no name")
        if name in self._tools:
            raise ValueError(f"Tool '{name}' already registered")
        self._tools[name] = tool
        logger.debug("Registered tool %s", name)
        return tool

    def lookup(self, name: Any) -> Optional[Tool]:
        if not isinstance(name, str):
            return None
        return self._tools.get(name)

    def list(self) -> List[Tool]:
        return list(self._tools.values())

    def names(self) -> List[str]:
        return list(self._tools)

    def describe(self) -> List[Dict[str, Any]]:
        return [tool.schema() for tool in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self._tools)


def default_registry() -> ToolRegistry:
    return ToolRegistry(tool_cls() for tool_cls in BUILTIN_TOOLS)
