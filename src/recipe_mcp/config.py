"""Configuration management for the AI Recipes MCP Server.

Handles environment-based configuration with layered loading:
1. .env.template (base defaults)
2. .env.local (personal overrides)
3. Environment variables (highest priority)
"""

import logging
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        # Load from multiple env files in order
        env_file=[".env.template", ".env.local"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    app_name: str = Field(default="AI Recipes MCP Server", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")

    # MCP Server Settings
    mcp_server_name: str = Field(default="ai-recipes-server", description="MCP server identifier")
    mcp_server_version: str = Field(default="1.0.0", description="MCP server version")

    # Catalog Settings
    recipes_root: Path = Field(default=Path("."), description="Root directory holding one folder per recipe category")
    docs_dirname: str = Field(default="docs", description="Subdirectory of recipes_root holding documentation categories")
    markdown_extension: str = Field(default=".md", description="File extension of recipes and documentation pages")

    # Search
    preview_length: int = Field(default=100, description="Maximum length of a search preview line")

    # HTTP Server Settings (for HTTP transport)
    http_host: str = Field(default="127.0.0.1", description="HTTP server host")
    http_port: int = Field(default=8000, description="HTTP server port")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format")

    @field_validator("recipes_root")
    @classmethod
    def expand_root(cls, v: Path) -> Path:
        """Expand a leading ~ in the catalog root."""
        return v.expanduser()

    @field_validator("docs_dirname")
    @classmethod
    def validate_docs_dirname(cls, v: str) -> str:
        """Docs must live directly below the catalog root."""
        if not v or "/" in v or "\\" in v or v in {".", ".."}:
            raise ValueError("docs_dirname must be a single directory name")
        return v

    @field_validator("markdown_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Normalize the extension to start with a dot."""
        if not v:
            raise ValueError("markdown_extension must not be empty")
        return v if v.startswith(".") else f".{v}"

    @field_validator("preview_length")
    @classmethod
    def validate_preview_length(cls, v: int) -> int:
        """Validate preview length."""
        if v < 1:
            raise ValueError("preview_length must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @property
    def docs_root(self) -> Path:
        """Directory holding one folder per documentation category."""
        return self.recipes_root / self.docs_dirname


def configure_logging(config: Settings | None = None) -> None:
    """Configure the package logger.

    Logs go to stderr: stdout carries the MCP stdio transport.
    """
    config = config or settings
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level)

    logger = logging.getLogger("recipe_mcp")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.log_format))
    logger.addHandler(handler)


# Global settings instance
settings = Settings()
