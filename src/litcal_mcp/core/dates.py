"""Date helpers for upstream liturgical calendar values.

The upstream API reports event dates either as epoch seconds or as ISO 8601
strings depending on the calendar being queried. Everything is reduced to a
``YYYY-MM-DD`` string in UTC.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Union

from .errors import ValidationError
from .filters import leading_int

MIN_YEAR = 1970
MAX_YEAR = 9999

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def normalize_date(value: Any) -> Optional[str]:
    """Format an epoch-seconds number or ISO string as ``YYYY-MM-DD``.

    Returns ``None`` for anything that is not a valid date. Falsy input,
    including a numeric ``0``, counts as absent.
    """

    if isinstance(value, bool) or not value:
        return None
    if isinstance(value, (int, float)):
        return _from_epoch_seconds(value)
    if isinstance(value, str):
        return _from_iso_string(value)
    return None


def _from_epoch_seconds(seconds: Union[int, float]) -> Optional[str]:
    if isinstance(seconds, float) and not math.isfinite(seconds):
        return None
    try:
        moment = _EPOCH + timedelta(seconds=seconds)
    except (OverflowError, ValueError):
        return None
    return moment.date().isoformat()


def _from_iso_string(text: str) -> Optional[str]:
    cleaned = text.strip()
    if cleaned[-1:] in ("Z", "z"):
        cleaned = cleaned[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(cleaned)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc)
        except OverflowError:
            return None
    return parsed.date().isoformat()


def validate_year(value: Optional[Union[str, int]] = None) -> int:
    """Return the requested calendar year, defaulting to the current one.

    Raises :class:`ValidationError` when the year cannot be parsed or lies
    outside 1970..9999.
    """

    text = str(value).strip() if value is not None else ""
    if not text:
        text = str(date.today().year)
    year = leading_int(text)
    if year is None or not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
    return year
