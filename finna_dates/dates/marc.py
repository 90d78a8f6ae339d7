"""
MARC publication date ranges.

The range comes from the 008 control field when it holds valid dates,
otherwise from the publication year in 260$c, and finally from 264$c of
publication statements (second indicator 1).
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from finna_dates.dates.context import ParseContext, safe_parse
from finna_dates.dates.instant import validate_iso8601
from finna_dates.dates.patterns import (
    BRACKETED_RE,
    FOUR_DIGIT_YEAR_RE,
    MARC_008_CONTINUING_TYPES,
    MARC_008_DATE1,
    MARC_008_DATE2,
    MARC_008_DAY,
    MARC_008_DETAILED_TYPES,
    MARC_008_MONTH,
    MARC_008_RANGE_TYPES,
    MARC_008_SINGLE_TYPES,
    MARC_008_TYPE_POS,
    MARC_OPEN_END,
    YEAR_RANGE_PATTERNS,
)
from finna_dates.dates.reconcile import reconcile
from finna_dates.ir import DateRange

INVALID_008_RANGE = "invalid date range in 008"

Pair = Tuple[str, str]


def _year_pair(start_year: str, end_year: str) -> Pair:
    return f"{start_year}-01-01T00:00:00Z", f"{end_year}-12-31T23:59:59Z"


def _is_valid(pair: Optional[Pair]) -> bool:
    return (
        pair is not None
        and validate_iso8601(pair[0]) is not None
        and validate_iso8601(pair[1]) is not None
    )


def decode_008(field_008: Optional[str]) -> Optional[Pair]:
    """
    Decode the date type and dates of an 008 field.

    The result is not validated; "19uu" style dates give invalid instants
    that make the caller fall back to other fields.
    """
    if not field_008 or len(field_008) <= MARC_008_TYPE_POS:
        return None
    date_type = field_008[MARC_008_TYPE_POS]
    date1 = field_008[MARC_008_DATE1]

    if date_type in MARC_008_CONTINUING_TYPES:
        return f"{date1}-01-01T00:00:00Z", MARC_OPEN_END
    if date_type in MARC_008_RANGE_TYPES:
        date2 = field_008[MARC_008_DATE2]
        if date1.isdigit() and date2.isdigit() and date2 < date1:
            return _year_pair(date2, date1)
        return _year_pair(date1, date2)
    if date_type in MARC_008_DETAILED_TYPES:
        day = f"{date1}-{field_008[MARC_008_MONTH]}-{field_008[MARC_008_DAY]}"
        return f"{day}T00:00:00Z", f"{day}T23:59:59Z"
    if date_type in MARC_008_SINGLE_TYPES:
        return _year_pair(date1, date1)
    return None


def first_year(text: Optional[str]) -> str:
    """The first four-digit number in text, or ""."""
    match = FOUR_DIGIT_YEAR_RE.search(text or "")
    return match.group(1) if match else ""


def extract_year_range(text: Optional[str]) -> Optional[Pair]:
    """
    Find a "between X and Y" style year range.

    Text in square brackets is tried before the whole value.
    """
    if not text:
        return None
    subjects = []
    bracketed = BRACKETED_RE.search(text)
    if bracketed:
        subjects.append(bracketed.group(1))
    subjects.append(text)

    for subject in subjects:
        for pattern in YEAR_RANGE_PATTERNS:
            match = pattern.search(subject)
            if match:
                return match.group("begin"), match.group("end")
    return None


def _statement_pair(text: Optional[str]) -> Optional[Pair]:
    years = extract_year_range(text)
    if years:
        return _year_pair(*years)
    year = first_year(text)
    if year:
        return _year_pair(year, year)
    return None


def publication_date_range(
    field_008: Optional[str],
    field_260_c: Optional[str],
    fields_264_c: Iterable[str],
    ctx: ParseContext,
) -> Optional[DateRange]:
    """
    Resolve the publication date range of a record.

    Args:
        field_008: the 008 control field
        field_260_c: subfield c of the first 260 field, None without one
        fields_264_c: subfield c of 264 fields with second indicator 1
        ctx: parse context

    Returns:
        the DateRange, or None when no source holds a valid date
    """
    pair = decode_008(field_008)

    if not _is_valid(pair) and field_260_c is not None:
        year = first_year(field_260_c)
        if year:
            pair = _year_pair(year, year)

    if not _is_valid(pair):
        for statement in fields_264_c:
            found = _statement_pair(statement)
            if found:
                pair = found
                break

    if not _is_valid(pair):
        return None
    return reconcile(pair[0], pair[1], ctx, warning_kind=INVALID_008_RANGE)


@safe_parse
def parse_date_range(raw: str, ctx: ParseContext) -> Optional[DateRange]:
    """Parse a publication statement such as "[vuosien 1931 ja 1943 välillä]"."""
    pair = _statement_pair(raw)
    if not _is_valid(pair):
        return None
    return reconcile(pair[0], pair[1], ctx, warning_kind=INVALID_008_RANGE)
