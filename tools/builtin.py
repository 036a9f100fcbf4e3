from core import calculator
from core.clock import to_iso
from core.host import collect_host_info, process_uptime
from tools.base import Tool
from tools.results import ToolResult


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


# -------- SIMPLE TOOLS --------

class Echo(Tool):
    name = "echo"
    description = "Echo back the input text"
    input_schema = {
        "type": "object",
        "properties": {
            "message": {
                "type": "string",
                "description": "The message to echo back",
            },
        },
        "required": ["message"],
    }

    def execute(self, arguments, context):
        message = arguments.get("message") or ""
        return ToolResult.from_text(f"Echo: {message}")


class GetTime(Tool):
    name = "get_time"
    description = "Get the current date and time"

    def execute(self, arguments, context):
        return ToolResult.from_text(f"Current time: {to_iso(context.now())}")


class Calculate(Tool):
    name = "calculate"
    description = "Perform basic mathematical calculations"
    input_schema = {
        "type": "object",
        "properties": {
            "expression": {
                "type": "string",
                "description": 'Mathematical expression to evaluate (e.g., "2 + 2 * 3")',
            },
        },
        "required": ["expression"],
    }

    def execute(self, arguments, context):
        expression = arguments.get("expression")
        if expression is None:
            expression = ""
        expression = str(expression)
        try:
            value = calculator.evaluate(expression)
        except calculator.CalculationError as exc:
            return ToolResult.from_text(f"Error calculating '{expression}': {exc}")
        return ToolResult.from_text(
            f"Result of '{expression}': {calculator.format_number(value)}"
        )


# -------- REPORTING TOOLS --------

class GetSystemInfo(Tool):
    name = "get_system_info"
    description = "Get basic system information"

    def execute(self, arguments, context):
        info = collect_host_info()
        lines = [
            "System Information:",
            f"• Platform: {info.platform}",
            f"• Python Version: {info.python_version}",
            f"• Architecture: {info.architecture}",
            f"• Current Directory: {info.cwd}",
            f"• Memory Usage: {info.memory_mb}MB",
            f"• Uptime: {info.uptime_rounded}s",
            f"• Process ID: {info.pid}",
            f"• Running on Lambda: {_yes_no(context.settings.is_serverless())}",
        ]
        return ToolResult.from_text("\n".join(lines))


class ApiStats(Tool):
    name = "api_stats"
    description = "Get API usage statistics"

    def execute(self, arguments, context):
        # usage already includes this call
        usage = context.usage
        lines = [
            "API Usage Statistics:",
            f"• Total Requests: {usage.request_count}",
            f"• Last Request: {usage.last_request}",
            f"• Server Uptime: {round(process_uptime())}s",
            f"• Running on Lambda: {_yes_no(context.settings.is_serverless())}",
        ]
        return ToolResult.from_text("\n".join(lines))


# -------- DEFAULT SET --------

BUILTIN_TOOLS = (
    Echo,
    GetTime,
    Calculate,
    GetSystemInfo,
    ApiStats,
)
