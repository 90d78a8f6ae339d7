"""
Range reconciliation: calendar validity, ordering and the future-date guard.
"""

from __future__ import annotations

from typing import Optional

from finna_dates.dates.context import ParseContext
from finna_dates.dates.instant import instant_year, validate_iso8601, year_end, year_start
from finna_dates.ir import DateRange

INVALID_DATE_RANGE = "invalid date range"
INVALID_START_DATE = "invalid start date"
INVALID_END_DATE = "invalid end date"


def is_future(value: str, ctx: ParseContext) -> bool:
    year = instant_year(value)
    return year is not None and year > ctx.current_year


def reconcile(
    start: str,
    end: str,
    ctx: ParseContext,
    reject_future: bool = False,
    repair_invalid: bool = False,
    warning_kind: str = INVALID_DATE_RANGE,
    start_unknown: bool = False,
    end_unknown: bool = False,
) -> Optional[DateRange]:
    """
    Validate a start/end pair and build a DateRange.

    Args:
        start: start instant
        end: end instant
        ctx: parse context receiving warnings
        reject_future: silently drop ranges with a year after ctx.current_year
        repair_invalid: rebuild a single invalid bound from the other one's
            year instead of rejecting the range
        warning_kind: warning kind reported for an inverted range
        start_unknown: carried over to the result
        end_unknown: carried over to the result

    Returns:
        the DateRange, with an inverted end collapsed to Dec 31 of the start
        year, or None
    """
    if reject_future and (is_future(start, ctx) or is_future(end, ctx)):
        return None

    start_key = validate_iso8601(start)
    end_key = validate_iso8601(end)

    if start_key is None or end_key is None:
        if not repair_invalid:
            if start_key is None:
                ctx.warn(INVALID_START_DATE, start)
            else:
                ctx.warn(INVALID_END_DATE, end)
            return None
        if start_key is None and end_key is None:
            ctx.warn(INVALID_DATE_RANGE, f"{start} - {end}")
            return None
        if end_key is None:
            ctx.warn(INVALID_DATE_RANGE, f"invalid end {end}, using start year")
            end = year_end(instant_year(start))
        else:
            ctx.warn(INVALID_DATE_RANGE, f"invalid start {start}, using end year")
            start = year_start(instant_year(end))
        start_key = validate_iso8601(start)
        end_key = validate_iso8601(end)

    if end_key < start_key:
        ctx.warn(warning_kind, f"{start} - {end}")
        end = year_end(instant_year(start))

    return DateRange(start=start, end=end, start_unknown=start_unknown, end_unknown=end_unknown)
