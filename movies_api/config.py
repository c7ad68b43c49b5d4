"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All credentials come from environment variables or .env (API_KEYS as JSON)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - api_keys maps bearer token -> "claim=value,claim=value"; parsed by api/identity.py
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "Movies API"
    app_version: str = "1.0.0"

    # Identity: bearer token -> comma-separated claims
    api_keys: dict[str, str] = {
        "dev-admin-token": "admin=true,trusted_member=true",
        "dev-member-token": "trusted_member=true",
    }

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
