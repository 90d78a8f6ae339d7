"""
Canonical range strings for the search index.

A range renders as "[YYYY-MM-DD TO YYYY-MM-DD]", or as a bare
"YYYY-MM-DD" when both ends fall on the same day.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

from finna_dates.dates.instant import format_instant, is_valid_date
from finna_dates.dates.patterns import CANONICAL_RANGE_RE, ISO8601_DATE_RE
from finna_dates.ir import DateRange, Role

RangeLike = Union[DateRange, Sequence[str], None]


def _date_part(value) -> Optional[Tuple[str, Tuple[int, int, int]]]:
    if not isinstance(value, str):
        return None
    match = ISO8601_DATE_RE.match(value.strip())
    if not match:
        return None
    year, month, day = int(match.group(1)), int(match.group(2)), int(match.group(3))
    if not is_valid_date(year, month, day):
        return None
    return value.strip()[: match.end(3)], (year, month, day)


def date_range_to_str(date_range: RangeLike) -> Optional[str]:
    """
    Render a range as its canonical string.

    Accepts a DateRange or a (start, end) pair of dates or instants.
    Returns None for an empty or malformed range, or when end < start.
    """
    if not date_range:
        return None
    if isinstance(date_range, DateRange):
        start, end = date_range.as_pair()
    else:
        if isinstance(date_range, str) or len(date_range) < 2:
            return None
        start, end = date_range[0], date_range[1]

    start_part = _date_part(start)
    end_part = _date_part(end)
    if start_part is None or end_part is None:
        return None
    if end_part[1] < start_part[1]:
        return None
    if start_part[0] == end_part[0]:
        return start_part[0]
    return f"[{start_part[0]} TO {end_part[0]}]"


def parse_canonical_range(text: str) -> Optional[DateRange]:
    """Read a canonical string back into a DateRange spanning whole days."""
    if not text:
        return None
    text = text.strip()
    match = CANONICAL_RANGE_RE.match(text)
    start_text, end_text = match.groups() if match else (text, text)

    start_part = _date_part(start_text)
    end_part = _date_part(end_text)
    if start_part is None or end_part is None or end_part[1] < start_part[1]:
        return None
    return DateRange(
        start=format_instant(*start_part[1], Role.START),
        end=format_instant(*end_part[1], Role.END),
    )
