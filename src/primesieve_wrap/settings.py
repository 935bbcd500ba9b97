"""Process-wide configuration using Pydantic Settings.

Values come from ``PRIMESIEVE_WRAP_*`` environment variables, optionally
pre-seeded from a ``.env`` file in the working directory.  Settings are
read once, when the default engine is first needed (see
:mod:`primesieve_wrap.runtime`): configure at startup, read thereafter.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from primesieve_wrap.exceptions import ConfigurationError

_LOG_LEVELS: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class PrimesieveSettings(BaseSettings):
    """Engine and logging settings."""

    library_path: str | None = Field(
        default=None,
        description="Explicit path to the libprimesieve shared library",
    )
    sieve_size: int | None = Field(
        default=None,
        ge=1,
        le=2048,
        description="Sieve array size in KiB; engine default when unset",
    )
    num_threads: int | None = Field(
        default=None,
        ge=1,
        le=2**31 - 1,
        description="Worker threads; engine picks all CPUs when unset",
    )
    log_level: str = Field(default="WARNING", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="PRIMESIEVE_WRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> str:
        """Accept level names in any case."""
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> PrimesieveSettings:
    """Get cached settings instance.

    Raises
    ------
    ConfigurationError
        When an environment variable holds an invalid value.
    """
    try:
        return PrimesieveSettings()
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid primesieve-wrap settings: {exc.error_count()} error(s).",
            hint=str(exc),
        ) from exc
