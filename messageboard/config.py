"""
Application configuration loaded from environment variables.
"""

import sys
from functools import lru_cache

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Database
    database_url: str = "postgresql+psycopg2://localhost/pg_relationships_demo"
    database_echo: bool = False
    create_tables: bool = False

    # Application
    app_name: str = "Messageboard API"
    api_version: str = "v1"
    log_level: str = "INFO"
    users_prefix: str = "/users"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_prefix="MESSAGEBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a stderr sink at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
