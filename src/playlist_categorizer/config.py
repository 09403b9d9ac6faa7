"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CategorizerSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CATEGORIZER_",
        populate_by_name=True,
        extra="ignore",
    )

    # YouTube Data API
    youtube_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CATEGORIZER_YOUTUBE_API_KEY", "YT_API_KEY"),
        description="YouTube Data API v3 key (required to serve requests)",
    )
    youtube_base_url: str = Field(
        default="https://www.googleapis.com/youtube/v3",
        description="YouTube Data API base URL",
    )
    request_timeout: float = Field(
        default=15.0,
        gt=0,
        description="Timeout for a single YouTube API request in seconds",
    )

    # Pipeline
    deadline: float = Field(
        default=90.0,
        gt=0,
        description="Time budget for one playlist aggregation in seconds",
    )
    page_size: int = Field(
        default=50,
        ge=1,
        le=50,
        description="Items requested per playlistItems.list page",
    )
    batch_size: int = Field(
        default=50,
        ge=1,
        le=50,
        description="Channel IDs per channels.list request",
    )
    max_concurrent_batches: int = Field(
        default=4,
        ge=1,
        description="Maximum channels.list requests in flight at once",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="HTTP listen host")
    port: int = Field(default=8080, ge=1, le=65535, description="HTTP listen port")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> CategorizerSettings:
    """Get cached settings instance."""
    return CategorizerSettings()
