"""
ISO 8601 instant helpers: year padding, formatting, validation and
calendar math for the proleptic Gregorian calendar, including year 0 and
negative (BCE) years.
"""

from __future__ import annotations

import calendar
from typing import Optional, Tuple

from finna_dates.dates.patterns import (
    END_TIME,
    ISO8601_INSTANT_RE,
    START_TIME,
    YEAR_PREFIX_RE,
)
from finna_dates.ir import Role

InstantKey = Tuple[int, int, int, int, int, int]


def format_year(year: int) -> str:
    """Zero-pad a year to four digits, keeping the sign (-25 -> -0025)."""
    if year < 0:
        return "-%04d" % -year
    return "%04d" % year


def days_in_month(year: int, month: int) -> int:
    # calendar.monthrange() goes through datetime, which rejects year < 1
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]


def last_day_of_month(year: int, month: int) -> Optional[int]:
    if not 1 <= month <= 12:
        return None
    return days_in_month(year, month)


def is_valid_date(year: int, month: int, day: int) -> bool:
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def format_instant(year: int, month: int, day: int, role: Role = Role.START) -> str:
    """Build YYYY-MM-DDThh:mm:ssZ, with 00:00:00 for starts and 23:59:59 for ends."""
    time = END_TIME if role == Role.END else START_TIME
    return "%s-%02d-%02dT%sZ" % (format_year(year), month, day, time)


def year_start(year: int) -> str:
    return format_instant(year, 1, 1, Role.START)


def year_end(year: int) -> str:
    return format_instant(year, 12, 31, Role.END)


def validate_iso8601(value: Optional[str]) -> Optional[InstantKey]:
    """
    Validate a full instant and return its chronological sort key.

    Returns None unless the value is YYYY-MM-DDThh:mm:ssZ with a legal
    calendar date and time. The key orders negative years correctly, which
    plain string comparison does not.
    """
    if not value or not isinstance(value, str):
        return None
    match = ISO8601_INSTANT_RE.match(value)
    if not match:
        return None
    year, month, day, hour, minute, second = (int(g) for g in match.groups())
    if not is_valid_date(year, month, day):
        return None
    if hour > 23 or minute > 59 or second > 59:
        return None
    return year, month, day, hour, minute, second


def validate_date(value: Optional[str]) -> Optional[str]:
    """Return the instant unchanged if it is valid, otherwise None."""
    return value if validate_iso8601(value) is not None else None


def extract_year(value) -> str:
    """
    Return the first signed four-digit year in a value, or "".

    Lists are reduced to their first element.
    """
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    if not value:
        return ""
    match = YEAR_PREFIX_RE.search(str(value))
    return match.group(1) if match else ""


def instant_year(value: str) -> Optional[int]:
    year = extract_year(value)
    return int(year) if year else None
