from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CacheStats:
    size: int
    oldest_entry_age_minutes: Optional[int]


@dataclass
class ResponseCache:
    """In-process, time-bounded memo of upstream payloads.

    Entries are stored with the insertion time reported by ``clock`` (seconds)
    and are dropped once older than ``ttl``. There is no locking: two callers
    missing the same key at once both fetch it.
    """

    ttl: timedelta = timedelta(minutes=60)
    clock: Callable[[], float] = time.monotonic
    _entries: Dict[str, Tuple[Any, float]] = field(default_factory=dict, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        data, inserted_at = entry
        if self.clock() - inserted_at > self.ttl.total_seconds():
            del self._entries[key]
            return None
        return data

    def set(self, key: str, data: Any) -> None:
        self._entries[key] = (data, self.clock())

    def get_or_fetch(self, key: str, fetch: Callable[[], T]) -> T:
        cached = self.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached
        logger.debug("Cache miss for %s", key)
        data = fetch()
        self.set(key, data)
        return data

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> CacheStats:
        if not self._entries:
            return CacheStats(size=0, oldest_entry_age_minutes=None)
        now = self.clock()
        oldest = min(inserted_at for _, inserted_at in self._entries.values())
        return CacheStats(size=len(self._entries), oldest_entry_age_minutes=int((now - oldest) // 60))

    @staticmethod
    def calendar_key(
        kind: str,
        year: Optional[int] = None,
        locale: Optional[str] = None,
        nation: Optional[str] = None,
        diocese: Optional[str] = None,
    ) -> str:
        parts: tuple[Union[str, int, None], ...] = (kind, year, locale, nation, diocese)
        return ":".join(str(part) for part in parts if part is not None)
