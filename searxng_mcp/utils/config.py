"""Application configuration using Pydantic Settings."""

import logging
import sys
from typing import Literal

import httpx
import structlog
from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from searxng_mcp.utils.exceptions import ConfigurationError
from searxng_mcp.utils.models import SearxngConfig

DEFAULT_INSTANCE = "http://localhost:8080"


class Settings(BaseSettings):
    """Strongly-typed application settings.

    Read once at startup; the search path only ever sees the frozen
    ``SearxngConfig`` built from these values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # SearXNG Configuration
    searxng_instances: str = Field(
        default=DEFAULT_INSTANCE,
        description="Comma-separated SearXNG base URLs, tried in order",
    )
    searxng_user_agent: str = Field(
        default="MCP-SearXNG/1.0", description="User-Agent sent to SearXNG"
    )
    searxng_verify_tls: bool = Field(
        default=True,
        validation_alias=AliasChoices("searxng_verify_tls", "node_tls_reject_unauthorized"),
        description="Verify TLS certificates of SearXNG instances",
    )
    searxng_timeout: float = Field(
        default=5.0,
        gt=0.0,
        le=60.0,
        description="Seconds to wait for each instance before moving on",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("searxng_instances")
    @classmethod
    def _check_instances(cls, value: str) -> str:
        for instance in _split_instances(value):
            try:
                url = httpx.URL(instance)
            except httpx.InvalidURL as e:
                raise ValueError(f"Invalid SearXNG instance URL: {instance!r}") from e
            if url.scheme not in ("http", "https") or not url.host:
                raise ValueError(f"Invalid SearXNG instance URL: {instance!r}")
        return value

    @property
    def instances(self) -> tuple[str, ...]:
        """Configured instances in fallback order."""
        return tuple(_split_instances(self.searxng_instances))

    def to_search_config(self) -> SearxngConfig:
        """Build the immutable config handed to the search tool."""
        if not self.instances:
            raise ConfigurationError("SEARXNG_INSTANCES does not contain any instance URL")
        return SearxngConfig(
            instances=self.instances,
            user_agent=self.searxng_user_agent,
            timeout=self.searxng_timeout,
            verify_tls=self.searxng_verify_tls,
        )


def _split_instances(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def get_settings() -> Settings:
    """Factory function to get settings (allows mocking in tests)."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structured logging with the configured log level.

    Logs go to stderr: stdout is reserved for the stdio transport. Without
    settings the level is INFO, so startup errors raised while reading the
    settings are still routed to stderr. Calling again replaces the handler.
    """
    log_level = settings.log_level if settings else "INFO"
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
