"""Domain helpers for calendar-date strings (parsing, ranges, merging)."""
from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Iterable

DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
ONE_DAY = timedelta(days=1)


class InvalidDateError(ValueError):
    """Raised when a value is not a YYYY-MM-DD calendar date."""


def parse_date(value: str | None) -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a date."""
    if not isinstance(value, str):
        raise InvalidDateError(f"Expected a date string, got {type(value).__name__}")
    match = DATE_PATTERN.fullmatch(value)
    if not match:
        raise InvalidDateError(f"Invalid date format: {value!r}")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid calendar date: {value!r}") from exc


def format_date(value: date) -> str:
    return value.isoformat()


def is_valid_date(value: str | None) -> bool:
    """Return True when value names a real calendar day in YYYY-MM-DD form."""
    try:
        parse_date(value)
    except InvalidDateError:
        return False
    return True


def date_range(start: date, end: date) -> list[str]:
    """
    Every day from start through end inclusive, ascending.

    Returns an empty list when start is after end.
    """
    days: list[str] = []
    current = start
    while current <= end:
        days.append(format_date(current))
        # date.max has no successor
        if current == end:
            break
        current += ONE_DAY
    return days


def merge_unique(existing: Iterable[str], extra: Iterable[str]) -> list[str]:
    """Union of both sequences, first occurrence wins the position."""
    return list(dict.fromkeys([*existing, *extra]))
