"""
Configuration settings for Pool Sweep.

Uses Pydantic Settings to hold the workload constants (item count, repetitions,
thread range, await ceiling, text template) alongside logging options. The
defaults are the benchmark's fixed constants; `POOL_SWEEP_*` environment
variables may override them, no configuration file is read.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MESSAGE_COUNT = 2_500
REPETITIONS = 100_000
MIN_THREADS = 1
MAX_THREADS = 10
AWAIT_TIMEOUT_SECONDS = 5 * 60
TEXT_TEMPLATE = "The quick brown fox jumps over the lazy dog {index}"


class Settings(BaseSettings):
    # Workload
    item_count: int = Field(MESSAGE_COUNT, ge=1)
    repetitions: int = Field(REPETITIONS, ge=1)
    text_template: str = Field(TEXT_TEMPLATE)

    # Sweep
    min_threads: int = Field(MIN_THREADS, ge=1)
    max_threads: int = Field(MAX_THREADS, ge=1)
    await_timeout_seconds: float = Field(AWAIT_TIMEOUT_SECONDS, gt=0)
    warmup: bool = Field(True)

    # Application
    log_level: str = Field("INFO")
    json_logs: bool = Field(False)

    model_config = SettingsConfigDict(
        env_prefix="POOL_SWEEP_",
        extra="ignore",
    )

    @field_validator("text_template")
    @classmethod
    def _template_has_index(cls, value: str) -> str:
        if "{index}" not in value:
            raise ValueError("text_template must contain an '{index}' placeholder")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _check_thread_range(self) -> "Settings":
        if self.max_threads < self.min_threads:
            raise ValueError(
                f"max_threads ({self.max_threads}) must be >= min_threads ({self.min_threads})"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = [
    "AWAIT_TIMEOUT_SECONDS",
    "MAX_THREADS",
    "MESSAGE_COUNT",
    "MIN_THREADS",
    "REPETITIONS",
    "TEXT_TEMPLATE",
    "Settings",
    "get_settings",
]
