from __future__ import annotations

import logging
from typing import Any

from core.clock import utc_now
from core.config import Settings
from core.state import RuntimeState
from tools.base import ToolContext
from tools.errors import UnknownToolError
from tools.registry import ToolRegistry
from tools.results import ToolResult

logger = logging.getLogger(__name__)


class ToolExecutor:
    """
    Runs registered tools against the shared runtime state.

    Failures inside a tool body are soft: they come back as a normal
    ToolResult describing the error. Only an unknown tool name raises.
    """

    def __init__(
        self,
        *,
        registry: ToolRegistry,
        state: RuntimeState,
        settings: Settings,
        clock=utc_now,
    ):
        self.registry = registry
        self.state = state
        self.settings = settings
        self.clock = clock

    def execute(self, name: Any, arguments: Any = None) -> ToolResult:
        tool = self.registry.lookup(name)
        if tool is None:
            raise UnknownToolError(name)

        if not isinstance(arguments, dict):
            arguments = {}

        usage = self.state.record_request()
        context = ToolContext(
            settings=self.settings,
            usage=usage,
            now=self.clock,
        )
        logger.debug("Executing tool %s (request #%d)", name, usage.request_count)

        try:
            result = tool.execute(arguments, context)
        except Exception as exc:
            logger.warning("Tool %s failed", name, exc_info=True)
            return ToolResult.from_text(f"Error executing tool '{name}': {exc}")

        if not result.content:
            logger.warning("Tool %s returned no content", name)
        return result
