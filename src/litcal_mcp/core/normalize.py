"""Turn raw upstream payloads into canonical, filtered and sorted records.

The upstream ``litcal`` and ``litcal_events`` collections arrive either as a
list or as a keyed mapping. That ambiguity is resolved here, once, so that
filtering and sorting only ever see a plain list.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, Union

from ..domain.enums import lookup_grade_name
from ..domain.models import (
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
from .dates import normalize_date
from .errors import MalformedDataError

logger = logging.getLogger(__name__)

NO_CALENDAR_DATA = "No calendar data available"
NO_EVENTS_DATA = "No events data available"
NO_CALENDAR_METADATA = "No calendar metadata available"


def _as_list(collection: Any, field_name: str) -> List[Any]:
    if isinstance(collection, Mapping):
        return list(collection.values())
    if isinstance(collection, (list, tuple)):
        return list(collection)
    raise MalformedDataError(f"'{field_name}' must be a list or an object, got {type(collection).__name__}")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return not value and not isinstance(value, (Mapping, list, tuple))


def _settings_value(settings: Any, key: str) -> Any:
    if not isinstance(settings, Mapping):
        return None
    return settings.get(key) or None


def to_liturgical_event(raw: Any) -> LiturgicalEvent:
    """Map one raw ``litcal`` entry to a :class:`LiturgicalEvent`."""

    try:
        grade = raw.get("grade")
        return LiturgicalEvent(
            name=raw.get("name") or "Unknown",
            date=normalize_date(raw.get("date")),
            grade=grade,
            grade_name=lookup_grade_name(grade) or "Unknown",
            color=raw.get("color") or [],
            common=raw.get("common") or [],
            liturgical_year=raw.get("liturgical_year") or None,
        )
    except Exception as exc:
        event_key = raw.get("event_key") if isinstance(raw, Mapping) else None
        logger.error("Error formatting event %s: %s", event_key, exc)
        raise MalformedDataError(f"Invalid event {event_key!r}: {exc}") from exc


def _event_month(event: LiturgicalEvent) -> Optional[int]:
    if not event.date:
        return None
    return int(event.date[5:7])


def _grade_rank(grade: Any) -> float:
    if isinstance(grade, (int, float)) and not isinstance(grade, bool):
        return -grade
    return float("inf")


def _sort_key(event: LiturgicalEvent) -> tuple:
    # Undated events share one key so their relative order is kept.
    if not event.date:
        return (1, "", 0)
    return (0, event.date, _grade_rank(event.grade))


def sort_events(events: Iterable[LiturgicalEvent]) -> List[LiturgicalEvent]:
    """Order by date ascending, then grade descending; undated events go last."""

    return sorted(events, key=_sort_key)


def filter_events(
    events: Iterable[LiturgicalEvent],
    month_filter: Optional[int] = None,
    grade_filter: Optional[Sequence[int]] = None,
) -> List[LiturgicalEvent]:
    selected = list(events)
    if month_filter is not None:
        selected = [event for event in selected if _event_month(event) == month_filter]
    if grade_filter:
        selected = [event for event in selected if event.grade in grade_filter]
    return selected


def normalize_calendar_response(
    raw: Any,
    month_filter: Optional[int] = None,
    grade_filter: Optional[Sequence[int]] = None,
) -> Union[CalendarResponse, ErrorResult]:
    """Build a :class:`CalendarResponse` from a raw calendar payload.

    Never raises: missing data and malformed events are returned as an
    :class:`ErrorResult`.
    """

    if not isinstance(raw, Mapping) or _is_missing(raw.get("litcal")):
        return ErrorResult(error=NO_CALENDAR_DATA)

    try:
        events = [to_liturgical_event(item) for item in _as_list(raw["litcal"], "litcal")]
        events = sort_events(filter_events(events, month_filter, grade_filter))
        settings = raw.get("settings")
        metadata = CalendarMetadata(
            locale=_settings_value(settings, "locale"),
            national_calendar=_settings_value(settings, "national_calendar"),
            diocesan_calendar=_settings_value(settings, "diocesan_calendar"),
            year=_settings_value(settings, "year"),
            total_events=len(events),
            filters_applied=FiltersApplied(
                month=month_filter or None,
                grades=list(grade_filter) if grade_filter else None,
            ),
        )
        return CalendarResponse(metadata=metadata, events=events)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Calendar payload could not be normalized: %s", exc)
        return ErrorResult(error=f"Error formatting calendar: {exc}")


def _to_event_definition(event_key: Any, definition: Any) -> EventDefinition:
    if not isinstance(definition, Mapping):
        definition = {}
    grade = definition.get("grade")
    return EventDefinition(
        event_key=str(event_key) if event_key is not None else None,
        name=definition.get("name") or None,
        grade=grade,
        grade_name=lookup_grade_name(grade) if grade is not None else None,
        color=definition.get("color") or None,
        common=definition.get("common") or None,
        date=definition.get("date") or None,
        liturgical_year=definition.get("liturgical_year") or None,
    )


def _definition_items(collection: Any) -> List[tuple]:
    if isinstance(collection, Mapping):
        return list(collection.items())
    return [
        (item.get("event_key") if isinstance(item, Mapping) else None, item)
        for item in _as_list(collection, "litcal_events")
    ]


def normalize_events_response(
    raw: Any,
    calendar_type: str,
    nation: Optional[str] = None,
    diocese: Optional[str] = None,
    grade_filter: Optional[Sequence[int]] = None,
) -> Union[EventsResponse, ErrorResult]:
    """Build an :class:`EventsResponse` from an "all possible events" payload."""

    if not isinstance(raw, Mapping) or _is_missing(raw.get("litcal_events")):
        return ErrorResult(error=NO_EVENTS_DATA)

    try:
        events = [
            _to_event_definition(key, definition)
            for key, definition in _definition_items(raw["litcal_events"])
        ]
        if grade_filter:
            events = [event for event in events if event.grade is not None and event.grade in grade_filter]
        return EventsResponse(
            calendar_type=calendar_type,
            nation=nation or None,
            diocese=diocese or None,
            grades=list(grade_filter) if grade_filter else None,
            events=events,
        )
    except Exception as exc:  # noqa: BLE001
        logger.warning("Events payload could not be normalized: %s", exc)
        return ErrorResult(error=f"Error formatting events: {exc}")


def normalize_calendar_listing(raw: Any) -> Union[CalendarListing, ErrorResult]:
    """Project the ``/calendars`` metadata onto national and diocesan entries."""

    metadata = raw.get("litcal_metadata") if isinstance(raw, Mapping) else None
    if not isinstance(metadata, Mapping):
        return ErrorResult(error=NO_CALENDAR_METADATA)

    try:
        national = [
            NationalCalendar(calendar_id=item.get("calendar_id"), locales=item.get("locales"))
            for item in _as_list(metadata.get("national_calendars") or [], "national_calendars")
        ]
        diocesan = [
            DiocesanCalendar(
                calendar_id=item.get("calendar_id"),
                diocese=item.get("diocese"),
                nation=item.get("nation"),
                locales=item.get("locales"),
            )
            for item in _as_list(metadata.get("diocesan_calendars") or [], "diocesan_calendars")
        ]
        return CalendarListing(national_calendars=national, diocesan_calendars=diocesan)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Calendar metadata could not be normalized: %s", exc)
        return ErrorResult(error=f"Error formatting calendars: {exc}")
