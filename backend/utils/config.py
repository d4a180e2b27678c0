"""Environment-driven runtime settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    log_level: str
    room_capacity: int
    api_host: str
    api_port: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process; call ``get_settings.cache_clear()`` to reload."""
    return Settings(
        app_name=os.getenv("APP_NAME", "Room Distribution Service"),
        app_version=os.getenv("APP_VERSION", "1.0.0"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        room_capacity=_env_int("ROOM_CAPACITY", 4),
        api_host=os.getenv("API_HOST", "127.0.0.1"),
        api_port=_env_int("API_PORT", 8000),
    )
