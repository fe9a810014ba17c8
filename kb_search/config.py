"""
Configuration module for the knowledge base search service.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings for the knowledge base service.

    Attributes:
        DEBUG: Enable auto-reload when run directly
        HOST: Server bind address
        PORT: Server port number
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON instead of console output
        DATA_FILE: JSON export to seed the article store from
        FUZZY_THRESHOLD: Minimum word similarity for fuzzy topic matches
        SIMILAR_LIMIT: Number of related articles shown with an article
        SUGGESTION_LIMIT: Maximum number of topic suggestions
    """

    DEBUG: bool = Field(default=False, description="Enable auto-reload")

    HOST: str = Field(default="0.0.0.0", description="Server bind address")
    PORT: int = Field(default=3000, ge=1, le=65535, description="Server port number")

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(default=True, description="Render logs as JSON")

    DATA_FILE: Optional[str] = Field(
        default=None,
        description="Path to the JSON article export; empty store when unset",
    )

    FUZZY_THRESHOLD: float = Field(
        default=0.7,
        gt=0,
        le=1.0,
        description="Minimum word similarity for fuzzy topic matches",
    )
    SIMILAR_LIMIT: int = Field(default=5, ge=0, le=50, description="Related articles per article")
    SUGGESTION_LIMIT: int = Field(default=10, ge=1, le=50, description="Maximum topic suggestions")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DATA_FILE")
    @classmethod
    def empty_path_is_unset(cls, value: Optional[str]) -> Optional[str]:
        """Treat an empty DATA_FILE as not configured."""
        if value is not None and not value.strip():
            return None
        return value


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
