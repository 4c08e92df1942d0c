from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from ..core.config import API_BASE_URL, API_TIMEOUT_SECONDS, CACHE_TTL_MINUTES, DATA_DIR, DEFAULT_LOCALE

load_dotenv()


@dataclass(frozen=True)
class ApiSettings:
    base_url: str
    timeout_seconds: float
    default_locale: str


@dataclass(frozen=True)
class CacheSettings:
    ttl: timedelta


@dataclass(frozen=True)
class LogSettings:
    level: str
    directory: Path

    @property
    def log_file(self) -> Path:
        return self.directory / "litcal_mcp.log"


@dataclass(frozen=True)
class AppSettings:
    api: ApiSettings
    cache: CacheSettings
    logging: LogSettings


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    api = ApiSettings(
        base_url=os.getenv("LITCAL_API_BASE_URL", API_BASE_URL).rstrip("/"),
        timeout_seconds=_float_from_env("LITCAL_API_TIMEOUT_SECONDS", API_TIMEOUT_SECONDS),
        default_locale=os.getenv("LITCAL_DEFAULT_LOCALE", DEFAULT_LOCALE),
    )

    cache = CacheSettings(
        ttl=timedelta(minutes=_float_from_env("LITCAL_CACHE_TTL_MINUTES", CACHE_TTL_MINUTES)),
    )

    logging = LogSettings(
        level=os.getenv("LITCAL_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("LITCAL_LOG_DIR") or DATA_DIR),
    )

    return AppSettings(api=api, cache=cache, logging=logging)
