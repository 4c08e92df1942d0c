"""Data access layer."""

from __future__ import annotations

from .cache import CacheStats, ResponseCache
from .client import LitCalClient

__all__ = ["CacheStats", "LitCalClient", "ResponseCache"]
