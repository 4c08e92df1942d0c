from __future__ import annotations

import logging
from typing import Annotated, Optional, Union

from pydantic import Field

from ..core import (
    LitCalError,
    normalize_calendar_listing,
    normalize_calendar_response,
    normalize_events_response,
    parse_grade_filter,
    parse_month_filter,
    validate_year,
)
from .registry import register_api
from .serializers import serialize_error, serialize_result
from .state import api_state

logger = logging.getLogger(__name__)

NATION_REQUIRED = "Nation code is required (e.g., IT, US, NL, VA, CA)"
DIOCESE_REQUIRED = "Diocese code is required (e.g., ROME-IT, BOSTON-US)"
CALENDAR_TYPES = ("general", "national", "diocesan")

GRADE_HELP = (
    "Filter by grade(s). Single value or comma-separated (e.g., '2' for Optional Memorials, "
    "'2,3' for Optional Memorials and Memorials). Optional."
)

Year = Annotated[Optional[Union[str, int]], Field(description="Year (1970-9999). Defaults to current year.")]
Locale = Annotated[Optional[str], Field(description="Locale (e.g., en, es, it, fr). Default: en")]
Month = Annotated[Optional[Union[str, int]], Field(description="Filter by month (1-12). Optional.")]
GradeFilter = Annotated[Optional[Union[str, int]], Field(description=GRADE_HELP)]
Nation = Annotated[Optional[str], Field(description="Nation code (e.g., IT, US, NL, VA, CA).")]
Diocese = Annotated[Optional[str], Field(description="Diocese code (e.g., ROME-IT, BOSTON-US).")]


def _clean(value: Optional[str]) -> str:
    return str(value).strip() if value is not None else ""


def _error(exc: LitCalError) -> str:
    logger.info("Tool call failed: %s", exc)
    return serialize_error(str(exc))


@register_api(
    "get_general_calendar",
    description=(
        "Retrieve the General Roman Calendar for a specific year. Returns structured JSON with all events. "
        "Filter by month (1-12) or grade (0=Weekday, 1=Commemoration, 2=Optional Memorial, 3=Memorial, "
        "4=Feast, 5=Feast of the Lord, 6=Solemnity, 7=Higher Solemnity). Multiple grades can be comma-separated."
    ),
    category="calendar",
    tags=("calendar", "general"),
)
def get_general_calendar(
    year: Year = None,
    locale: Locale = None,
    month: Month = None,
    grade: GradeFilter = None,
) -> str:
    try:
        resolved_year = validate_year(year)
        raw = api_state.calendar.general_calendar(resolved_year, locale)
    except LitCalError as exc:
        return _error(exc)
    result = normalize_calendar_response(raw, parse_month_filter(month), parse_grade_filter(grade))
    return serialize_result(result)


@register_api(
    "get_national_calendar",
    description=(
        "Retrieve the liturgical calendar for a specific nation and year. Returns structured JSON with all "
        "events. Filter by month (1-12) or grade (0-7). Multiple grades can be comma-separated."
    ),
    category="calendar",
    tags=("calendar", "national"),
    required=("nation",),
)
def get_national_calendar(
    nation: Nation = None,
    year: Year = None,
    locale: Locale = None,
    month: Month = None,
    grade: GradeFilter = None,
) -> str:
    nation_code = _clean(nation).upper()
    if not nation_code:
        return serialize_error(NATION_REQUIRED)
    try:
        resolved_year = validate_year(year)
        raw = api_state.calendar.national_calendar(nation_code, resolved_year, locale)
    except LitCalError as exc:
        return _error(exc)
    result = normalize_calendar_response(raw, parse_month_filter(month), parse_grade_filter(grade))
    return serialize_result(result)


@register_api(
    "get_diocesan_calendar",
    description=(
        "Retrieve the liturgical calendar for a specific diocese and year. Returns structured JSON with all "
        "events. Filter by month (1-12) or grade (0-7). Multiple grades can be comma-separated."
    ),
    category="calendar",
    tags=("calendar", "diocesan"),
    required=("diocese",),
)
def get_diocesan_calendar(
    diocese: Diocese = None,
    year: Year = None,
    locale: Locale = None,
    month: Month = None,
    grade: GradeFilter = None,
) -> str:
    diocese_code = _clean(diocese)
    if not diocese_code:
        return serialize_error(DIOCESE_REQUIRED)
    try:
        resolved_year = validate_year(year)
        raw = api_state.calendar.diocesan_calendar(diocese_code, resolved_year, locale)
    except LitCalError as exc:
        return _error(exc)
    result = normalize_calendar_response(raw, parse_month_filter(month), parse_grade_filter(grade))
    return serialize_result(result)


@register_api(
    "list_available_calendars",
    description="List all available national and diocesan calendars with their locales. Returns structured JSON.",
    category="metadata",
    tags=("calendars", "metadata"),
)
def list_available_calendars() -> str:
    try:
        raw = api_state.calendar.available_calendars()
    except LitCalError as exc:
        return _error(exc)
    return serialize_result(normalize_calendar_listing(raw))


@register_api(
    "get_liturgical_events",
    description=(
        "Retrieve all possible liturgical events for a calendar type (general, national, or diocesan). "
        "Returns structured JSON with event definitions. Filter by grade (0-7, comma-separated)."
    ),
    category="events",
    tags=("events", "metadata"),
)
def get_liturgical_events(
    calendarType: Annotated[  # noqa: N803 - public tool parameter name
        Optional[str], Field(description="Type: 'general', 'national', or 'diocesan'")
    ] = "general",
    nation: Annotated[Optional[str], Field(description="Nation code (required if calendarType is 'national')")] = None,
    diocese: Annotated[
        Optional[str], Field(description="Diocese code (required if calendarType is 'diocesan')")
    ] = None,
    grade: GradeFilter = None,
) -> str:
    calendar_type = _clean(calendarType).lower() or "general"
    if calendar_type not in CALENDAR_TYPES:
        return serialize_error(f"calendarType must be one of: {', '.join(CALENDAR_TYPES)}")
    nation_code = _clean(nation).upper() or None
    diocese_code = _clean(diocese) or None
    if calendar_type == "national" and not nation_code:
        return serialize_error(NATION_REQUIRED)
    if calendar_type == "diocesan" and not diocese_code:
        return serialize_error(DIOCESE_REQUIRED)
    try:
        raw = api_state.calendar.liturgical_events(calendar_type, nation=nation_code, diocese=diocese_code)
    except LitCalError as exc:
        return _error(exc)
    result = normalize_events_response(raw, calendar_type, nation_code, diocese_code, parse_grade_filter(grade))
    return serialize_result(result)
