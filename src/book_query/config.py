"""Configuration management for Book Query."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BOOK_QUERY_",
    )

    log_level: str = Field(default="WARNING", description="Root level used by setup_logging")

    # Query defaults
    related_books_unique: bool = Field(
        default=False,
        description="Drop duplicate titles from related_books unless told otherwise",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
