"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the tool runs with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process
    - CLI flags override settings per run; they never mutate the cached instance

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - PASSPORT_CHECK_ prefix: avoids clashing with generic names like LOG_LEVEL
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings from PASSPORT_CHECK_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PASSPORT_CHECK_", env_file=".env", case_sensitive=False,
    )

    # Input — None means the packaged data file
    input_path: Path | None = None

    # Parallel count — 1 runs in-process
    workers: int = Field(default=1, ge=1)

    # Observability
    log_level: str = "WARNING"
    log_format: Literal["json", "text"] = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
