"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a DOOMSDAY_-prefixed environment variable
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: the trainer works out-of-the-box
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOOMSDAY_", env_file=".env", case_sensitive=False,
    )

    # Trainer
    default_range: str = "Y"
    color: bool = True

    @field_validator("default_range", mode="before")
    @classmethod
    def normalize_range(cls, v: str) -> str:
        """Accept lowercase letters; the letter itself is parsed by Granularity."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
