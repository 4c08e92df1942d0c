"""Configuration models and helpers."""

from __future__ import annotations

from .settings import ApiSettings, AppSettings, CacheSettings, LogSettings, get_settings

__all__ = ["ApiSettings", "AppSettings", "CacheSettings", "LogSettings", "get_settings"]
