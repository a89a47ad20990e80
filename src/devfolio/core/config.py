"""Application configuration for devfolio.

Settings are read from the process environment and an optional ``.env``
file. A missing GitHub token or username never blocks startup; it is only
reported through ``warn_missing_github_config``.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from devfolio.schemas.site import NavLink
from devfolio.utils import get_logger

logger = get_logger(__name__)

DEFAULT_GITHUB_USERNAME = "N/A"


def _default_nav_links() -> list[NavLink]:
    return [
        NavLink(href="/contact", label="Contact"),
        NavLink(href="/clara", label="Clara"),
    ]


class AppSettings(BaseSettings):
    """Main application settings."""

    # Basic settings
    app_name: str = Field(default="devfolio", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # GitHub
    github_token: str = Field(
        default="",
        description="GitHub Personal Access Token for the GraphQL API",
    )
    github_username: str = Field(
        default=DEFAULT_GITHUB_USERNAME,
        description="GitHub login whose stats are displayed",
    )
    github_graphql_url: str = Field(
        default="https://api.github.com/graphql",
        description="GitHub GraphQL endpoint",
    )
    github_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for GitHub API calls",
    )

    # Stats cache
    stats_cache_ttl_seconds: int = Field(
        default=600,
        ge=1,
        le=86400,
        description="How long an assembled stats snapshot is served from memory",
    )
    stats_cache_control: str = Field(
        default="max-age=3600, s-maxage=3600",
        description="Cache-Control header sent with stats responses",
    )

    # Site
    nav_links: list[NavLink] = Field(
        default_factory=_default_nav_links,
        description="Links shown in the site navigation bar",
    )
    frontend_dist: str | None = Field(
        default=None,
        description="Directory of the built frontend (defaults to <repo>/frontend/dist)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_file: str = Field(default="logs/app.log", description="Log file path")

    # Server
    api_port: int = Field(default=8000, description="API server port")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v_upper

    @field_validator("github_username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return v.strip() or DEFAULT_GITHUB_USERNAME

    @property
    def github_username_configured(self) -> bool:
        return self.github_username != DEFAULT_GITHUB_USERNAME


def warn_missing_github_config(settings: AppSettings) -> list[str]:
    """Log a warning for every GitHub setting that is not configured.

    Args:
        settings: Settings to inspect

    Returns:
        Names of the missing environment variables
    """
    missing: list[str] = []
    if not settings.github_token:
        logger.warning(
            "GITHUB_TOKEN is not set. GitHub API calls will likely fail."
        )
        missing.append("GITHUB_TOKEN")
    if not settings.github_username_configured:
        logger.warning(
            f"GITHUB_USERNAME is not set. Using default value: '{settings.github_username}'. "
            "This may lead to API errors if this is not the intended user."
        )
        missing.append("GITHUB_USERNAME")
    return missing


@lru_cache
def get_app_settings() -> AppSettings:
    """Get cached application settings instance."""
    return AppSettings()


def reload_all_settings() -> None:
    """Clear the settings cache to reload from environment."""
    get_app_settings.cache_clear()
