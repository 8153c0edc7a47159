"""Environment-driven configuration using Pydantic Settings."""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ghlink.core.constants import DEFAULT_MAX_REDIRECTS, DEFAULT_USER_AGENT


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    All env vars are prefixed with ``GHLINK_`` and can be set via a ``.env`` file.
    Build one instance at startup and pass it down; nothing here is global.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GHLINK_",
        case_sensitive=False,
    )

    # --- GitHub basic auth ---
    github_user: str = ""
    github_password: SecretStr = SecretStr("")

    # --- HTTP ---
    user_agent: str = DEFAULT_USER_AGENT
    max_redirects: int = Field(default=DEFAULT_MAX_REDIRECTS, ge=0)
    verify_ssl: bool = True

    # --- Logging ---
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Factory that creates a Settings instance from the environment."""
    return Settings()
