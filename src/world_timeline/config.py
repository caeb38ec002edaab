"""Configuration management for world-timeline."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

YEAR_MIN = 1800
YEAR_MAX = 2025
MONTH_MIN = 1
MONTH_MAX = 12

CONTENT_DIR_NAME = "data"
FILE_EXTENSION = ".yaml"

DEFAULT_CACHE_TTL = 10 * 60


class TimelineConfig(BaseSettings):
    """Configuration for a timeline content repository."""

    # Default to ./data but allow override with env var
    content_dir: Path = Field(
        default_factory=lambda: Path.cwd() / CONTENT_DIR_NAME,
        description="Root directory holding one sub-directory per year",
    )
    cache_ttl: float = Field(
        default=DEFAULT_CACHE_TTL,
        description="Seconds a loaded record stays in the cache",
    )
    env: Literal["dev", "test", "production"] = Field(
        default="dev",
        description="Runtime environment, controls log verbosity and redaction",
    )
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="WORLD_TIMELINE_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @field_validator("cache_ttl")
    @classmethod
    def ensure_positive_ttl(cls, v: float) -> float:
        """A zero or negative TTL would make every read a miss."""
        if v <= 0:
            raise ValueError("cache_ttl must be greater than zero")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


# Load default config
config = TimelineConfig()
