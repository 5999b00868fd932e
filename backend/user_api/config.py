"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the service starts with no environment at all

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - API title/version mirror the published contract so /openapi.json stays stable
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API contract
    api_title: str = "User Management API"
    api_description: str = "REST API for User Management operations"
    api_version: str = "1.0.0"
    api_server_url: str = "http://localhost:8080"

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
