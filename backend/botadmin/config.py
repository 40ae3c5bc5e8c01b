"""Configuration management for Bot Admin."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="BOTADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Bot Admin"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3001

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/config.db"

    # Paths
    data_dir: Path = Field(default_factory=lambda: Path("./data"))
    commands_file: Path = Field(default_factory=lambda: Path("../commands.js"))  # Bot's command declarations
    frontend_dir: Path | None = None  # Built admin UI, served at / when present

    # CORS - comma-separated origins, "*" allows any
    cors_origins: str = "*"

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit_default: str = "100/minute"

    @field_validator("commands_file")
    @classmethod
    def expand_commands_file(cls, v: Path) -> Path:
        """Expand ~ in the commands file path."""
        return v.expanduser()

    @field_validator("rate_limit_default")
    @classmethod
    def validate_rate_limit(cls, v: str) -> str:
        """Validate rate limit format (e.g., '100/minute')."""
        if "/" not in v:
            raise ValueError("Rate limit must be in format 'N/period' (e.g., '100/minute')")
        return v


settings = Settings()


def get_cors_origins() -> list[str]:
    """Get allowed CORS origins as a list."""
    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return origins or ["*"]


def validate_critical_settings() -> None:
    """Validate critical settings and log warnings for potential issues."""
    if not settings.commands_file.is_file():
        logger.warning(
            f"Commands file not found at {settings.commands_file} - "
            "the commands page will be empty. Set BOTADMIN_COMMANDS_FILE."
        )

    # Warn about debug mode in production-like settings
    if settings.debug and settings.host == "0.0.0.0":
        logger.warning(
            "Running in debug mode with public host binding (0.0.0.0). "
            "Disable debug mode for production deployments."
        )
