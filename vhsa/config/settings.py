"""Application settings loaded from environment variables."""
from functools import lru_cache
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/vhsa.db",
        description="Database connection URL"
    )
    external_database_url: str = Field(
        default="",
        description="External PostgreSQL database URL (takes priority over database_url)"
    )

    # Application
    app_env: str = Field(default="development", description="Application environment")
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Optional log file name under ./tmp/")
    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    # Student identifiers
    default_school_code: str = Field(
        default="st01",
        description="School code used when the school name carries no parenthesized code"
    )

    # Admin listings
    screenings_page_size: int = Field(default=50, description="Default page size for screening listings")
    max_page_size: int = Field(default=500, description="Upper bound for requested page sizes")


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
