"""Configuration helpers for strokes-gained services."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _Settings(BaseSettings):
    sg_cache_maxsize: int = Field(default=256, alias="SG_CACHE_MAXSIZE")
    sg_cache_ttl_seconds: float = Field(default=600.0, alias="SG_CACHE_TTL_SECONDS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached application settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


SG_TELEMETRY_ENABLED: bool = env_bool("SG_TELEMETRY_ENABLED", True)
SG_REPORT_PRECISION: int = _int_env("SG_REPORT_PRECISION", 2)
SG_SLOW_COMPUTE_MS: float = _float_env("SG_SLOW_COMPUTE_MS", 50.0)


__all__ = [
    "SG_REPORT_PRECISION",
    "SG_SLOW_COMPUTE_MS",
    "SG_TELEMETRY_ENABLED",
    "env_bool",
    "get_settings",
    "reset_settings_cache",
]
