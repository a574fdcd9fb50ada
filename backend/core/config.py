"""Application settings loaded from the environment."""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_SECRET_KEY_LENGTH = 32


class Settings(BaseSettings):
    """Environment-driven configuration.

    Field names map to upper-cased environment variables
    (``secret_key`` reads ``SECRET_KEY``). ``secret_key`` has no default:
    the token signing key must always come from the deployment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = "local"
    secret_key: str
    access_token_expire_minutes: int = 60
    auth_cookie_name: str = "Authorization"
    allow_insecure_http_cookies: bool = False

    database_url: str = "sqlite+aiosqlite:///./board.db"
    database_echo: bool = False

    log_level: str = "INFO"

    @field_validator("secret_key")
    @classmethod
    def _reject_short_secret(cls, value: str) -> str:
        if len(value) < MIN_SECRET_KEY_LENGTH:
            raise ValueError(
                f"SECRET_KEY must be at least {MIN_SECRET_KEY_LENGTH} characters"
            )
        return value


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()  # type: ignore[call-arg]


settings = get_settings()
