"""
Configuration settings for the artwork selector.

This module handles environment variable loading and configuration management
using Pydantic for validation and type safety.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Artwork selector configuration settings.

    All settings can be overridden via environment variables.
    """

    # Artworks API Configuration
    artworks_api_base_url: str = Field(
        default="https://api.artic.edu/api/v1",
        description="Base URL for the artworks collection API"
    )
    artworks_api_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for API requests"
    )
    artworks_api_max_retries: int = Field(
        default=2,
        ge=0,
        description="Retries for rate-limited or failed transport requests"
    )
    artworks_api_retry_delay: float = Field(
        default=1.0,
        ge=0,
        description="Base delay in seconds for exponential backoff between retries"
    )

    # Pagination
    default_page_size: int = Field(
        default=10,
        gt=0,
        description="Page size requested from the API, and used when a response omits one"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="text",
        description="Logging format (json or text)"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path; stderr only when unset"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Configured settings instance
    """
    return Settings()
