from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Server configuration.

    Every field can be overridden with an MCP_-prefixed environment
    variable (MCP_PORT=8080, MCP_LOG_FORMAT=json, ...) or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MCP_",
        case_sensitive=False,
        extra="ignore",
    )

    # --- identity ---
    server_name: str = "demo-mcp-server"
    server_version: str = "1.0.0"
    protocol_version: str = "2024-11-05"

    # --- deployment ---
    environment: Optional[str] = None
    serverless_env_var: str = "AWS_LAMBDA_FUNCTION_NAME"

    # --- transport ---
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    # --- logging ---
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return value

    def is_serverless(self) -> bool:
        return bool(os.environ.get(self.serverless_env_var))

    def environment_name(self) -> str:
        if self.environment:
            return self.environment
        return "lambda" if self.is_serverless() else "local"


@lru_cache
def get_settings() -> Settings:
    return Settings()
