"""Server configuration models."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ServerSettings(BaseSettings):
    """Whitepaper Server configuration.

    Values come from keyword overrides, then ``WHITEPAPER_*`` environment
    variables, then a ``.env`` file, then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="WHITEPAPER_",
        env_file=".env",
        extra="ignore",
    )

    # HTTP server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    api_url: str = "http://localhost:3000"

    # MCP identity
    server_name: str = "succinct-whitepaper-agent"
    server_version: str = "1.0.0"

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None

    # Search result presentation
    search_result_limit: int = Field(default=5, ge=1)
    search_content_chars: int = Field(default=1000, ge=1)

    @field_validator("host")
    @classmethod
    def validate_host(cls, v):
        """Validate host is not empty."""
        if not v or not v.strip():
            raise ValueError("Host cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is a known logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def load_from_file(cls, config_path: Path | None = None, **overrides) -> "ServerSettings":
        """Load settings from a YAML file, falling back to defaults."""
        import yaml

        if config_path is None or not config_path.exists():
            return cls(**overrides)

        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
            config_data.update(overrides)
            return cls(**config_data)
        except Exception as e:
            logger.warning(f"Ignoring invalid config file {config_path}: {e}")
            return cls(**overrides)


__all__ = ["ServerSettings"]
