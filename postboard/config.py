"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./postboard.db"

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "postboard API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Auth
    PASSWORD_PEPPER: str = ""

    # Logging; defaults to DEBUG in development and INFO elsewhere
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None

    @field_validator("API_V1_PREFIX", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Routers are mounted below the prefix, so it must not end with a slash."""
        return value.rstrip("/")


def configure_logging(environment: str = "development", level: str | None = None) -> None:
    """
    Configure structlog on top of stdlib logging.

    Handlers and the dispatcher log through structlog; repositories and
    routers log through stdlib loggers. Both end up on stdout, rendered as
    JSON in production and as colored console lines otherwise.
    """
    if level is None:
        level = "DEBUG" if environment == "development" else "INFO"

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    # SQL statements are logged by echo, not by the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if environment == "production":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
