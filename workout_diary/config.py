"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden by a WORKOUT_DIARY_* environment variable
    - get_settings() is cached (lru_cache) — single instance per process
    - author_id_start is a positive int

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: the console script works with no configuration
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from workout_diary.core.domain_types import FIRST_AUTHOR_ID, OutputFormat


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WORKOUT_DIARY_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Console output
    output_format: OutputFormat = OutputFormat.TEXT
    seed_sample_data: bool = True

    # Identity
    author_id_start: int = Field(default=FIRST_AUTHOR_ID, ge=1)

    # Observability
    log_level: str = "INFO"
    log_format: OutputFormat = OutputFormat.TEXT

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
