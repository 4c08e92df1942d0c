"""Date, filter, and normalization rules for liturgical calendar payloads."""

from .config import (
    API_BASE_URL,
    API_TIMEOUT_SECONDS,
    APP_NAME,
    CACHE_TTL_MINUTES,
    DATA_DIR,
    DEFAULT_LOCALE,
    ensure_data_dir,
)
from .dates import MAX_YEAR, MIN_YEAR, normalize_date, validate_year
from .errors import LitCalError, MalformedDataError, UpstreamError, ValidationError
from .filters import parse_grade_filter, parse_month_filter
from .normalize import (
    normalize_calendar_listing,
    normalize_calendar_response,
    normalize_events_response,
    sort_events,
)

__all__ = [
    "API_BASE_URL",
    "API_TIMEOUT_SECONDS",
    "APP_NAME",
    "CACHE_TTL_MINUTES",
    "DATA_DIR",
    "DEFAULT_LOCALE",
    "LitCalError",
    "MAX_YEAR",
    "MIN_YEAR",
    "MalformedDataError",
    "UpstreamError",
    "ValidationError",
    "ensure_data_dir",
    "normalize_calendar_listing",
    "normalize_calendar_response",
    "normalize_date",
    "normalize_events_response",
    "parse_grade_filter",
    "parse_month_filter",
    "sort_events",
    "validate_year",
]
