"""Configuration management using Pydantic Settings.

This module provides centralized configuration for the service, loading
settings from environment variables (or a .env file) with validation.
Upstream credentials are optional: a missing key disables that source
without stopping the application.
"""

import json
from typing import Annotated, Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from newsdesk.core.constants import NEWSAPI_DEFAULT_DOMAINS


def _parse_str_list(v: Any) -> Any:
    """Accept a JSON array or a comma-separated string for list settings."""
    if isinstance(v, str):
        stripped = v.strip()
        if stripped.startswith("["):
            return json.loads(stripped)
        return [item.strip() for item in stripped.split(",") if item.strip()]
    return v


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All configuration parameters are defined here with type hints, default values,
    and validation. Settings are loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream Credentials
    news_guardian_apikey: Optional[str] = Field(
        default=None,
        description="The Guardian Content API key",
    )
    news_nyt_apikey: Optional[str] = Field(
        default=None,
        description="New York Times Article Search API key",
    )
    news_api_org_key: Optional[str] = Field(
        default=None,
        description="NewsAPI.org API key",
    )

    # Upstream Fetch Configuration
    news_fetch_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP timeout for a single upstream request in seconds",
    )
    news_adapter_timeout: float = Field(
        default=15.0,
        gt=0,
        description="Upper bound on one adapter invocation during aggregation",
    )
    newsapi_domains: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(NEWSAPI_DEFAULT_DOMAINS),
        description="Domains NewsAPI.org results are restricted to",
    )
    newsapi_page_size: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Number of most recent NewsAPI.org results to request",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")
    log_file: str = Field(
        default="logs/newsdesk.log",
        description="Log file path",
    )
    log_max_bytes: int = Field(
        default=10485760,
        description="Maximum log file size in bytes",
    )
    log_backup_count: int = Field(default=5, description="Number of log backup files")

    # API Configuration
    api_title: str = Field(default="Newsdesk", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    api_cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="CORS allowed origins",
    )
    api_cors_allow_methods: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["GET"],
        description="CORS allowed methods",
    )
    api_cors_allow_headers: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="CORS allowed headers",
    )

    # Environment
    environment: str = Field(default="development", description="Environment name")

    @field_validator(
        "newsapi_domains",
        "api_cors_origins",
        "api_cors_allow_methods",
        "api_cors_allow_headers",
        mode="before",
    )
    @classmethod
    def parse_str_list(cls, v: Any) -> list[str]:
        """Parse list settings from a JSON array or comma-separated string."""
        return _parse_str_list(v)  # type: ignore[no-any-return]


# Global settings instance
settings = Settings()
