"""Errors raised by the tool layer."""


class ToolError(Exception):
    """Base error for the tool layer."""


class UnknownToolError(ToolError):
    """Requested tool is not in the registry."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
