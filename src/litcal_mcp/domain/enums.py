from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional


class Grade(IntEnum):
    WEEKDAY = 0
    COMMEMORATION = 1
    OPTIONAL_MEMORIAL = 2
    MEMORIAL = 3
    FEAST = 4
    FEAST_OF_THE_LORD = 5
    SOLEMNITY = 6
    HIGHER_SOLEMNITY = 7


GRADE_NAMES: Dict[int, str] = {
    Grade.WEEKDAY: "Weekday",
    Grade.COMMEMORATION: "Commemoration",
    Grade.OPTIONAL_MEMORIAL: "Optional Memorial",
    Grade.MEMORIAL: "Memorial",
    Grade.FEAST: "Feast",
    Grade.FEAST_OF_THE_LORD: "Feast of the Lord",
    Grade.SOLEMNITY: "Solemnity",
    Grade.HIGHER_SOLEMNITY: "Higher Solemnity",
}

MIN_GRADE = min(Grade)
MAX_GRADE = max(Grade)


def lookup_grade_name(grade: Any) -> Optional[str]:
    """Return the display name for ``grade`` or ``None`` when it is not in the table."""

    if isinstance(grade, bool):
        return None
    if isinstance(grade, float) and grade.is_integer():
        grade = int(grade)
    if not isinstance(grade, int):
        return None
    return GRADE_NAMES.get(grade)
