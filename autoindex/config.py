"""
autoindex - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Literal


class WikiSettings(BaseSettings):
    """Wiki GraphQL API configuration."""
    base_url: str = Field("http://localhost:3000", alias="WIKI_BASE_URL")
    graphql_path: str = Field("/graphql", alias="WIKI_GRAPHQL_PATH")
    timeout_s: float = Field(30.0, alias="WIKI_TIMEOUT_SECONDS")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class IndexSettings(BaseSettings):
    """Index widget defaults."""
    depth: int = Field(1, ge=1, alias="INDEX_DEPTH")
    default_path: str = Field("/", alias="INDEX_DEFAULT_PATH")
    heading: str = Field("Index", alias="INDEX_HEADING")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["sse", "stdio"] = Field("sse", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("0.0.0.0", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )

    model_config = {"env_prefix": "", "extra": "ignore", "populate_by_name": True}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    wiki: WikiSettings = Field(default_factory=WikiSettings)
    index: IndexSettings = Field(default_factory=IndexSettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
