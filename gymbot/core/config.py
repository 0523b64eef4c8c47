"""
Configuration helpers for the GYMBot backend.

Settings are read from environment variables once and cached, so routers and
services never reach into os.environ directly. Tests call
`get_settings.cache_clear()` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://localhost:5173")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    app_name: str
    app_version: str
    data_storage_path: Path
    cors_origins: tuple[str, ...]
    log_level: str


def _origins(value: str | None) -> tuple[str, ...]:
    if value is None:
        return DEFAULT_CORS_ORIGINS
    origins = [origin.strip().rstrip("/") for origin in value.split(",")]
    return tuple(origin for origin in origins if origin)


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        app_name=os.getenv("APP_NAME", "GYMBot"),
        app_version=os.getenv("APP_VERSION", "1.0.0"),
        data_storage_path=Path(os.getenv("DATA_STORAGE_PATH") or "./data"),
        cors_origins=_origins(os.getenv("CORS_ORIGINS")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
