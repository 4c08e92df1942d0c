from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..data import LitCalClient, ResponseCache
from .context import ServiceContext


@dataclass(slots=True)
class CalendarService:
    """Cache-aside access to the raw upstream payloads."""

    context: ServiceContext

    @property
    def cache(self) -> ResponseCache:
        return self.context.cache

    @property
    def client(self) -> LitCalClient:
        return self.context.client

    def _locale(self, locale: Optional[str]) -> str:
        return locale or self.context.settings.api.default_locale

    def general_calendar(self, year: int, locale: Optional[str] = None) -> Any:
        locale = self._locale(locale)
        key = self.cache.calendar_key("general", year, locale)
        return self.cache.get_or_fetch(key, lambda: self.client.fetch_general_calendar(year, locale))

    def national_calendar(self, nation: str, year: int, locale: Optional[str] = None) -> Any:
        locale = self._locale(locale)
        key = self.cache.calendar_key("national", year, locale, nation=nation)
        return self.cache.get_or_fetch(key, lambda: self.client.fetch_national_calendar(nation, year, locale))

    def diocesan_calendar(self, diocese: str, year: int, locale: Optional[str] = None) -> Any:
        locale = self._locale(locale)
        key = self.cache.calendar_key("diocesan", year, locale, diocese=diocese)
        return self.cache.get_or_fetch(key, lambda: self.client.fetch_diocesan_calendar(diocese, year, locale))

    def available_calendars(self) -> Any:
        return self.cache.get_or_fetch("calendars", self.client.fetch_available_calendars)

    def liturgical_events(
        self,
        calendar_type: str,
        nation: Optional[str] = None,
        diocese: Optional[str] = None,
    ) -> Any:
        key = self.cache.calendar_key(f"events-{calendar_type}", nation=nation, diocese=diocese)
        return self.cache.get_or_fetch(
            key,
            lambda: self.client.fetch_liturgical_events(calendar_type, nation=nation, diocese=diocese),
        )
