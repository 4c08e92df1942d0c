"""Domain records for liturgical calendar data."""

from __future__ import annotations

from .enums import GRADE_NAMES, Grade, lookup_grade_name
from .models import (
    CalendarListing,
    CalendarMetadata,
    CalendarResponse,
    DiocesanCalendar,
    ErrorResult,
    EventDefinition,
    EventsResponse,
    FiltersApplied,
    LiturgicalEvent,
    NationalCalendar,
)

__all__ = [
    "CalendarListing",
    "CalendarMetadata",
    "CalendarResponse",
    "DiocesanCalendar",
    "ErrorResult",
    "EventDefinition",
    "EventsResponse",
    "FiltersApplied",
    "GRADE_NAMES",
    "Grade",
    "LiturgicalEvent",
    "NationalCalendar",
    "lookup_grade_name",
]
