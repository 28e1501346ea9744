"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Hash-scheme constants (salts, iteration and round counts) are NOT settings;
      they live in core.key_schedule

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - default_legacy_id mirrors the operator workflow: a reset with no identifier
      is recorded under "reset"
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Derivation
    default_legacy_id: str = "reset"

    @field_validator("default_legacy_id")
    @classmethod
    def reject_blank_legacy_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_legacy_id cannot be blank")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
