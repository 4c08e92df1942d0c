from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ..domain import (
    CalendarListing,
    CalendarResponse,
    DiocesanCalendar,
    ErrorResult,
    EventDefinition,
    EventsResponse,
    LiturgicalEvent,
    NationalCalendar,
)


class ErrorPayload(BaseModel):
    error: str

    @classmethod
    def from_domain(cls, result: ErrorResult) -> "ErrorPayload":
        return cls(error=result.error)


class EventPayload(BaseModel):
    name: Any
    date: Optional[str] = Field(default=None)
    grade: Any = Field(default=None)
    grade_name: str
    color: Any = Field(default_factory=list)
    common: Any = Field(default_factory=list)
    liturgical_year: Any = Field(default=None)

    @classmethod
    def from_domain(cls, event: LiturgicalEvent) -> "EventPayload":
        return cls(
            name=event.name,
            date=event.date,
            grade=event.grade,
            grade_name=event.grade_name,
            color=event.color,
            common=event.common,
            liturgical_year=event.liturgical_year,
        )


class CalendarFiltersPayload(BaseModel):
    month: Optional[int] = Field(default=None)
    grades: Optional[List[int]] = Field(default=None)


class CalendarMetadataPayload(BaseModel):
    locale: Any = Field(default=None)
    national_calendar: Any = Field(default=None)
    diocesan_calendar: Any = Field(default=None)
    year: Any = Field(default=None)
    total_events: int
    filters_applied: CalendarFiltersPayload


class CalendarResponsePayload(BaseModel):
    metadata: CalendarMetadataPayload
    events: List[EventPayload]

    @classmethod
    def from_domain(cls, response: CalendarResponse) -> "CalendarResponsePayload":
        metadata = response.metadata
        return cls(
            metadata=CalendarMetadataPayload(
                locale=metadata.locale,
                national_calendar=metadata.national_calendar,
                diocesan_calendar=metadata.diocesan_calendar,
                year=metadata.year,
                total_events=metadata.total_events,
                filters_applied=CalendarFiltersPayload(
                    month=metadata.filters_applied.month,
                    grades=metadata.filters_applied.grades,
                ),
            ),
            events=[EventPayload.from_domain(event) for event in response.events],
        )


class EventDefinitionPayload(BaseModel):
    event_key: Optional[str] = Field(default=None)
    name: Any = Field(default=None)
    grade: Any = Field(default=None)
    grade_name: Optional[str] = Field(default=None)
    color: Any = Field(default=None)
    common: Any = Field(default=None)
    date: Any = Field(default=None)
    liturgical_year: Any = Field(default=None)

    @classmethod
    def from_domain(cls, definition: EventDefinition) -> "EventDefinitionPayload":
        return cls(
            event_key=definition.event_key,
            name=definition.name,
            grade=definition.grade,
            grade_name=definition.grade_name,
            color=definition.color,
            common=definition.common,
            date=definition.date,
            liturgical_year=definition.liturgical_year,
        )


class EventsFiltersPayload(BaseModel):
    grades: Optional[List[int]] = Field(default=None)


class EventsResponsePayload(BaseModel):
    calendar_type: str
    nation: Optional[str] = Field(default=None)
    diocese: Optional[str] = Field(default=None)
    filters_applied: EventsFiltersPayload
    total_events: int
    events: List[EventDefinitionPayload]

    @classmethod
    def from_domain(cls, response: EventsResponse) -> "EventsResponsePayload":
        return cls(
            calendar_type=response.calendar_type,
            nation=response.nation,
            diocese=response.diocese,
            filters_applied=EventsFiltersPayload(grades=response.grades),
            total_events=response.total_events,
            events=[EventDefinitionPayload.from_domain(event) for event in response.events],
        )


class NationalCalendarPayload(BaseModel):
    calendar_id: Any = Field(default=None)
    locales: Any = Field(default=None)

    @classmethod
    def from_domain(cls, calendar: NationalCalendar) -> "NationalCalendarPayload":
        return cls(calendar_id=calendar.calendar_id, locales=calendar.locales)


class DiocesanCalendarPayload(BaseModel):
    calendar_id: Any = Field(default=None)
    diocese: Any = Field(default=None)
    nation: Any = Field(default=None)
    locales: Any = Field(default=None)

    @classmethod
    def from_domain(cls, calendar: DiocesanCalendar) -> "DiocesanCalendarPayload":
        return cls(
            calendar_id=calendar.calendar_id,
            diocese=calendar.diocese,
            nation=calendar.nation,
            locales=calendar.locales,
        )


class CalendarListingPayload(BaseModel):
    national_calendars: List[NationalCalendarPayload]
    diocesan_calendars: List[DiocesanCalendarPayload]
    total: int

    @classmethod
    def from_domain(cls, listing: CalendarListing) -> "CalendarListingPayload":
        return cls(
            national_calendars=[NationalCalendarPayload.from_domain(item) for item in listing.national_calendars],
            diocesan_calendars=[DiocesanCalendarPayload.from_domain(item) for item in listing.diocesan_calendars],
            total=listing.total,
        )
