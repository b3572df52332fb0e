"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field

from shortlinks.lib.common.url_builder import normalize_base_url


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port to listen on"
    )

    hostname: Optional[str] = Field(
        default=None,
        description="Base URL for generated shortlinks (defaults to http://localhost:<port>)"
    )

    # URL shortener settings
    default_validity_minutes: int = Field(
        default=30,
        gt=0,
        description="Validity in minutes when a request does not specify one"
    )

    short_code_length: int = Field(
        default=6,
        ge=4,
        le=10,
        description="Length of generated short codes"
    )

    max_collision_retries: int = Field(
        default=10,
        ge=1,
        description="Maximum attempts when generating a free short code"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default="access.log",
        description="Append-only request/event log (empty to disable)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @property
    def base_url(self) -> str:
        """Base URL embedded in shortlinks."""
        if self.hostname:
            return normalize_base_url(self.hostname)
        return f"http://localhost:{self.port}"


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
