"""
EAD3 normalized date parsing.

Dates are "start/end" pairs of ISO-like partial dates. Either end may be
"open" or "unknown", and any year digit may be a u/x wildcard:

    1985-02-02/1995-12-01  -> 1985-02-02 .. 1995-12-01
    195u/1960-01-01        -> 1950-01-01 .. 1960-01-01
    uuuu-12-uu/unknown     -> 0000-12-01 .. 9999-12-31
"""

from __future__ import annotations

from typing import Optional, Tuple

from finna_dates.dates.completion import complete, resolve_wildcards, unknown_date
from finna_dates.dates.context import ParseContext, safe_parse
from finna_dates.dates.patterns import (
    EAD3_MONTH_DAY_RE,
    EAD3_RANGE_SEPARATOR,
    EAD3_UNKNOWN_BOUNDS,
    EAD3_UNKNOWN_COMPONENTS,
    EAD3_YEAR_RE,
)
from finna_dates.dates.reconcile import INVALID_END_DATE, INVALID_START_DATE, reconcile
from finna_dates.ir import DateRange, PartialDate, Role


def _component(parts, index: int) -> Optional[str]:
    if len(parts) <= index:
        return None
    value = parts[index].strip()
    if value.lower() in EAD3_UNKNOWN_COMPONENTS:
        return None
    return value


def parse_bound(text: str, role: Role) -> Optional[PartialDate]:
    """
    Parse one side of an EAD3 range into a PartialDate.

    Unknown month/day components are left out so that completion fills in
    the role default. Returns None for a malformed value.
    """
    text = (text or "").strip()
    if text.lower() in EAD3_UNKNOWN_BOUNDS:
        return unknown_date(role)

    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    parts = text.split("-")

    unknown = parts[0].strip().lower() in EAD3_UNKNOWN_COMPONENTS
    year = sign + resolve_wildcards(parts[0].strip(), role)
    month = _component(parts, 1)
    day = _component(parts, 2)

    if not EAD3_YEAR_RE.match(year):
        return None
    for value in (month, day):
        if value is not None and not EAD3_MONTH_DAY_RE.match(value):
            return None

    return PartialDate(
        year=int(year),
        month=int(month) if month is not None else None,
        day=int(day) if day is not None else None,
        unknown=unknown,
    )


def resolve_bound(text: str, role: Role) -> Optional[Tuple[str, bool]]:
    """Instant and unknown flag for one side of a range, or None."""
    partial = parse_bound(text, role)
    if partial is None:
        return None
    instant = complete(partial, role)
    if instant is None:
        return None
    return instant, partial.unknown


@safe_parse
def parse_date_range(raw: str, ctx: ParseContext) -> Optional[DateRange]:
    """
    Parse an EAD3 "start/end" date.

    Returns None when the separator is missing or either side is invalid;
    an inverted range is repaired to end on Dec 31 of the start year.
    """
    if not raw or EAD3_RANGE_SEPARATOR not in raw:
        return None
    start_text, end_text = raw.split(EAD3_RANGE_SEPARATOR)[:2]

    start = resolve_bound(start_text, Role.START)
    if start is None:
        ctx.warn(INVALID_START_DATE, raw)
        return None
    end = resolve_bound(end_text, Role.END)
    if end is None:
        ctx.warn(INVALID_END_DATE, raw)
        return None

    return reconcile(
        start[0],
        end[0],
        ctx,
        start_unknown=start[1],
        end_unknown=end[1],
    )
