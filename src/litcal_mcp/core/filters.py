from __future__ import annotations

import re
from typing import List, Optional, Union

from ..domain.enums import MAX_GRADE, MIN_GRADE

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def leading_int(text: str) -> Optional[int]:
    """Parse the integer prefix of ``text`` (``"12.9"`` -> 12, ``"5 "`` -> 5)."""

    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def parse_month_filter(value: Optional[Union[str, int, float]]) -> Optional[int]:
    """Return a month in 1..12, or ``None`` meaning "no month restriction".

    Unparseable and out-of-range values are dropped rather than reported.
    """

    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not text:
        return None
    month = leading_int(text)
    if month is None or not 1 <= month <= 12:
        return None
    return month


def parse_grade_filter(value: Optional[Union[str, int, float]]) -> Optional[List[int]]:
    """Parse a single grade or a comma separated list of grades.

    Invalid pieces are skipped and duplicates are kept. When nothing valid
    remains the result is ``None`` so that an unrecognised filter never
    hides every event.
    """

    if not value or isinstance(value, bool):
        return None
    grades: list[int] = []
    for piece in str(value).split(","):
        grade = leading_int(piece.strip())
        if grade is not None and MIN_GRADE <= grade <= MAX_GRADE:
            grades.append(grade)
    return grades or None
