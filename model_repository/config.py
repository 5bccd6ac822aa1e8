"""
Configuration module for model-repository.

Centralized settings using Pydantic settings. All values can be overridden
via environment variables or a .env file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for logging and the SQLAlchemy model collaborator.

    Attributes:
        SERVICE_NAME: Name used for the default logger
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON lines instead of console output
        DATABASE_URL: SQLAlchemy database URL
        DATABASE_ECHO: Echo emitted SQL statements
    """

    SERVICE_NAME: str = Field(
        default="model-repository",
        description="Name used for the default logger",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=True,
        description="Render logs as JSON lines",
    )

    # Database configuration
    DATABASE_URL: str = Field(
        default="sqlite:///./model_repository.db",
        description="SQLAlchemy database URL",
    )
    DATABASE_ECHO: bool = Field(
        default=False,
        description="Echo emitted SQL statements",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        """
        Validate that the database URL is set.

        Raises:
            ValueError: If the URL is empty
        """
        value = value.strip()
        if not value:
            raise ValueError("DATABASE_URL cannot be empty")
        return value


@lru_cache()
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
