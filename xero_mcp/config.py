"""Configuration management for the Xero MCP server.

Uses pydantic-settings to load configuration from environment variables
with validation and type coercion. Tenant credentials are deliberately
absent: they arrive with every request, never from the environment.
"""

from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_CHARACTER_LIMIT, XERO_API_BASE_URL


class Settings(BaseSettings):
    """Server settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="XERO_MCP_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    server_name: str = Field(
        default="xero-mcp-server",
        description="Name advertised to MCP clients"
    )
    host: str = Field(
        default="127.0.0.1",
        description="Bind address for the HTTP transports"
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Bind port for the HTTP transports"
    )
    transport: str = Field(
        default="streamable-http",
        description="MCP transport: 'stdio', 'sse' or 'streamable-http'"
    )

    # Xero API
    api_base_url: str = Field(
        default=XERO_API_BASE_URL,
        description="Default Xero API root, overridable per tenant via X-Xero-Base-URL"
    )
    request_timeout: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Timeout for a single Xero API request (seconds)"
    )

    # Responses
    character_limit: int = Field(
        default=DEFAULT_CHARACTER_LIMIT,
        ge=1000,
        description="Maximum characters returned by a single tool call"
    )

    # Application Settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional JSON log file path"
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Ensure the API root is an absolute http(s) URL without trailing slash."""
        v = v.strip().rstrip("/")
        if not v.startswith(("https://", "http://")):
            raise ValueError("API base URL must start with https:// or http://")
        return v

    @field_validator("transport")
    @classmethod
    def validate_transport(cls, v: str) -> str:
        """Ensure transport is one FastMCP can run."""
        v = v.lower()
        valid_transports = {"stdio", "sse", "streamable-http"}
        if v not in valid_transports:
            raise ValueError(f"Transport must be one of: {valid_transports}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        v = v.upper()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v


def get_settings() -> Settings:
    """Get server settings.

    Returns:
        Settings: Server settings loaded from environment
    """
    return Settings()
