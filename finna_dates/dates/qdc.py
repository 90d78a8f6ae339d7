"""
Qualified Dublin Core date ranges (also used for LRMI and Aipa).

Each date or issued element yields one year range spanning from the
earliest to the latest year it mentions.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from finna_dates.dates.context import ParseContext, safe_parse
from finna_dates.dates.instant import year_end, year_start
from finna_dates.dates.reconcile import reconcile
from finna_dates.dates.years import year_span_from_string
from finna_dates.ir import DateRange


@safe_parse
def parse_date_range(raw: str, ctx: ParseContext) -> Optional[DateRange]:
    """Year range of a date element ("1800-1801", "-2020 - 15", "2021-05-03")."""
    span = year_span_from_string(raw)
    if span is None:
        return None
    return reconcile(year_start(span[0]), year_end(span[1]), ctx)


def publication_date_ranges(values: Iterable[str], ctx: ParseContext) -> List[DateRange]:
    """Parse every value and drop duplicates, keeping the first occurrence."""
    ranges: List[DateRange] = []
    for value in values:
        date_range = parse_date_range(value, ctx)
        if date_range is not None and date_range not in ranges:
            ranges.append(date_range)
    return ranges
