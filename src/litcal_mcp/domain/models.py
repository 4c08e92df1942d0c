from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True, slots=True)
class LiturgicalEvent:
    """A single dated celebration as returned to callers."""

    name: str
    date: Optional[str]
    grade: Any
    grade_name: str
    color: List[str] = field(default_factory=list)
    common: List[str] = field(default_factory=list)
    liturgical_year: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FiltersApplied:
    month: Optional[int] = None
    grades: Optional[List[int]] = None


@dataclass(frozen=True, slots=True)
class CalendarMetadata:
    locale: Optional[str]
    national_calendar: Optional[str]
    diocesan_calendar: Optional[str]
    year: Optional[int]
    total_events: int
    filters_applied: FiltersApplied


@dataclass(frozen=True, slots=True)
class CalendarResponse:
    metadata: CalendarMetadata
    events: List[LiturgicalEvent]


@dataclass(frozen=True, slots=True)
class EventDefinition:
    """A static event definition; absent source fields stay ``None``."""

    event_key: Optional[str]
    name: Optional[str] = None
    grade: Any = None
    grade_name: Optional[str] = None
    color: Any = None
    common: Any = None
    date: Any = None
    liturgical_year: Optional[str] = None


@dataclass(frozen=True, slots=True)
class EventsResponse:
    calendar_type: str
    nation: Optional[str]
    diocese: Optional[str]
    grades: Optional[List[int]]
    events: List[EventDefinition]

    @property
    def total_events(self) -> int:
        return len(self.events)


@dataclass(frozen=True, slots=True)
class NationalCalendar:
    calendar_id: Any
    locales: Any = None


@dataclass(frozen=True, slots=True)
class DiocesanCalendar:
    calendar_id: Any
    diocese: Any = None
    nation: Any = None
    locales: Any = None


@dataclass(frozen=True, slots=True)
class CalendarListing:
    national_calendars: List[NationalCalendar]
    diocesan_calendars: List[DiocesanCalendar]

    @property
    def total(self) -> int:
        return len(self.national_calendars) + len(self.diocesan_calendars)


@dataclass(frozen=True, slots=True)
class ErrorResult:
    error: str
