"""
Date completion and rounding.

Turns partial dates into full instants for a range start or end, resolves
wildcard digits and expands decade/century shorthand.
"""

from __future__ import annotations

from typing import Optional, Tuple

from finna_dates.dates.context import ParseContext
from finna_dates.dates.instant import (
    format_instant,
    is_valid_date,
    last_day_of_month,
    validate_iso8601,
)
from finna_dates.dates.patterns import (
    CENTURY_OFFSETS,
    DECADE_OFFSETS,
    PARTIAL_DATE_RE,
    TWO_DIGIT_YEAR_CENTURY,
    WILDCARD_END_DIGIT,
    WILDCARD_RE,
    WILDCARD_START_DIGIT,
)
from finna_dates.ir import PartialDate, Role

UNKNOWN_START_YEAR = 0
UNKNOWN_END_YEAR = 9999


def resolve_wildcards(text: str, role: Role) -> str:
    """Replace u/x placeholders with 0 for a start or 9 for an end (195u -> 1950/1959)."""
    digit = WILDCARD_END_DIGIT if role == Role.END else WILDCARD_START_DIGIT
    return WILDCARD_RE.sub(digit, text)


def unknown_date(role: Role) -> PartialDate:
    year = UNKNOWN_END_YEAR if role == Role.END else UNKNOWN_START_YEAR
    return PartialDate(year=year, unknown=True)


def complete(partial: PartialDate, role: Role) -> Optional[str]:
    """
    Complete a partial date to an instant.

    Starts default to month 01 and day 01, ends to month 12 and the last
    day of the month. Returns None if the result is not a calendar date.
    """
    if partial.month is not None:
        month = partial.month
    else:
        month = 12 if role == Role.END else 1

    if partial.day is not None:
        day = partial.day
    elif role == Role.END:
        day = last_day_of_month(partial.year, month)
        if day is None:
            return None
    else:
        day = 1

    if not is_valid_date(partial.year, month, day):
        return None
    return format_instant(partial.year, month, day, role)


def month_span(year: int, month: int) -> Optional[Tuple[str, str]]:
    """First and last instant of a month, or None for an invalid month."""
    last = last_day_of_month(year, month)
    if last is None:
        return None
    return format_instant(year, month, 1, Role.START), format_instant(year, month, last, Role.END)


def day_span(year: int, month: int, day: int) -> Tuple[str, str]:
    # Not validated here; reconciliation rejects impossible dates
    return format_instant(year, month, day, Role.START), format_instant(year, month, day, Role.END)


def period_span(year: int, part: str) -> Tuple[int, int]:
    """
    Sub-range of the decade or century starting at year.

    A year divisible by 100 is a century, by 10 a decade; any other year
    spans only itself.
    """
    if year % 100 == 0:
        low, high = CENTURY_OFFSETS[part]
    elif year % 10 == 0:
        low, high = DECADE_OFFSETS[part]
    else:
        return year, year
    return year + low, year + high


def expand_year_tokens(start: str, end: str) -> Tuple[int, int]:
    """
    Interpret raw year tokens of a free-text range.

    A two-digit start is read as 19xx. A two-digit end takes its century
    from a non-negative start ("1930-45" -> 1930, 1945).
    """
    start_year = int(start)
    if start_year >= 0 and len(start) == 2:
        start_year += TWO_DIGIT_YEAR_CENTURY

    end_year = int(end)
    if end_year >= 0 and len(end) == 2 and start_year >= 0:
        end_year += start_year // 100 * 100
    return start_year, end_year


def complete_partial_string(value: str, role: Role, ctx: Optional[ParseContext] = None) -> Optional[str]:
    """
    Complete Y, YY, YYY, YYYY, YYYY-MM or YYYY-MM-DD (optionally negative).

    Full instants pass through when valid. Anything else gives None and an
    "invalid date" warning.
    """
    value = (value or "").strip()
    if validate_iso8601(value) is not None:
        return value

    match = PARTIAL_DATE_RE.match(value)
    result = None
    if match:
        sign, year, month, day = match.groups()
        partial = PartialDate(
            year=-int(year) if sign else int(year),
            month=int(month) if month else None,
            day=int(day) if day else None,
        )
        result = complete(partial, role)

    if result is None and ctx is not None:
        ctx.warn("invalid date", f"{value!r} ({role.value})")
    return result
