"""
Start the MCP server with uvicorn.

Host, port and log level come from MCP_* environment variables
(see core/config.py).
"""

import uvicorn

from core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    print(f"Starting MCP server on http://{settings.host}:{settings.port}")
    print("Press Ctrl+C to stop")
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
