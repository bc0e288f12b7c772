"""Library configuration.

Uses pydantic-settings for environment variable support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support.

    All settings can be overridden via environment variables prefixed
    with ``FP_UTILS_``.
    Example: FP_UTILS_LOG_LEVEL, FP_UTILS_DISPATCH_THREAD_NAME_PREFIX
    """

    model_config = SettingsConfigDict(
        env_prefix="FP_UTILS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = Field(default="fp_utils", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")

    # =========================================================================
    # Dispatch
    # =========================================================================
    dispatch_thread_name_prefix: str = Field(
        default="serial-worker",
        min_length=1,
        description="Thread name prefix of the background worker",
    )
    dispatch_shutdown_wait: bool = Field(
        default=True,
        description="Wait for pending background work when closing a dispatcher",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )

    # =========================================================================
    # Validators
    # =========================================================================
    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
