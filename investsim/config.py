"""
Application settings.

Values come from environment variables prefixed with ``INVESTSIM_`` (or a
local ``.env`` file), e.g. ``INVESTSIM_LOG_LEVEL=DEBUG``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the API."""

    model_config = SettingsConfigDict(
        env_prefix="INVESTSIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
    )
    max_years: int = Field(40, ge=2, description="Longest horizon the calculator accepts.")

    # Used when a rate request does not carry current market values.
    default_cdi_rate: float = 10.65
    default_ipca_rate: float = 4.5


@lru_cache
def get_settings() -> Settings:
    return Settings()
