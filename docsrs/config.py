#!/usr/bin/env python3
"""
Configuration for the docs.rs MCP server.

Settings are read from the environment once at startup and passed
explicitly to every component. The instance is frozen for the lifetime
of the process.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import AliasChoices, Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REGISTRY_URL = "https://crates.io/api/v1"
DEFAULT_DOCS_URL = "https://docs.rs"
DEFAULT_USER_AGENT = "docs-rs-mcp/1.0.1 (MCP documentation tool)"


class Settings(BaseSettings):
    """docs.rs MCP server configuration.

    Environment variables:
    - DOCS_RS_MCP_REGISTRY_BASE_URL: crates.io API root (default: https://crates.io/api/v1)
    - DOCS_RS_MCP_DOCS_BASE_URL: docs.rs root (default: https://docs.rs)
    - DOCS_RS_MCP_USER_AGENT: User-Agent sent with every request
    - DOCS_RS_MCP_REQUEST_TIMEOUT: Per-request timeout in seconds (default: 30)
    - DOCS_RS_MCP_PROXY, then HTTPS_PROXY / HTTP_PROXY: Outbound proxy (default: none)
    - DOCS_RS_MCP_LOGS_DIR: Directory for JSON log files (default: ./logs)
    - DOCS_RS_MCP_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR (default: INFO)
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCS_RS_MCP_",
        env_ignore_empty=True,
        frozen=True,
    )

    registry_base_url: str = DEFAULT_REGISTRY_URL
    docs_base_url: str = DEFAULT_DOCS_URL
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: PositiveFloat = 30.0
    proxy: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DOCS_RS_MCP_PROXY", "HTTPS_PROXY", "HTTP_PROXY"),
    )
    logs_dir: Path = Path("./logs")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("registry_base_url", "docs_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value
