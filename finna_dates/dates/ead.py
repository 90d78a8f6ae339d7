"""
EAD (2002) unitdate parsing.

Free-text unit dates such as "1.1.1920-31.12.1930", "3.1920 - 5.1930",
"1920-1930" or "1920" are matched against EAD_RULES in order.
"""

from __future__ import annotations

from typing import Optional

from finna_dates.dates.completion import day_span, month_span
from finna_dates.dates.context import ParseContext, safe_parse
from finna_dates.dates.instant import format_instant, year_end, year_start
from finna_dates.dates.patterns import (
    EAD_DMY_RE,
    EAD_DMY_TO_DMY_RE,
    EAD_MONTH_YEAR_RE,
    EAD_MONTH_YEAR_TO_MONTH_YEAR_RE,
    EAD_NO_DATE,
    EAD_NUMBER_TO_NUMBER_RE,
    EAD_YEAR_RE,
    EAD_YEAR_TO_YEAR_RE,
    EAD_YMD_RE,
)
from finna_dates.dates.reconcile import INVALID_END_DATE, reconcile
from finna_dates.dates.rules import DateRule, InstantSpan, match_rule
from finna_dates.ir import DateRange, Role
from finna_dates.logger import get_logger

logger = get_logger(__name__)


def _ints(match, *groups):
    return [int(match.group(g)) for g in groups]


def _dmy_to_dmy(match, ctx: ParseContext):
    d1, m1, y1, d2, m2, y2 = _ints(match, 1, 2, 3, 4, 5, 6)
    return InstantSpan(format_instant(y1, m1, d1, Role.START), format_instant(y2, m2, d2, Role.END))


def _month_year_to_month_year(match, ctx: ParseContext):
    m1, y1, m2, y2 = _ints(match, 1, 2, 3, 4)
    end = month_span(y2, m2)
    if end is None:
        ctx.warn(INVALID_END_DATE, match.group(0))
        return None
    return InstantSpan(format_instant(y1, m1, 1, Role.START), end[1])


def _year_to_year(match, ctx: ParseContext):
    y1, y2 = _ints(match, 1, 2)
    return InstantSpan(year_start(y1), year_end(y2))


def _ymd(match, ctx: ParseContext):
    y, m, d = _ints(match, 1, 2, 3)
    return InstantSpan(*day_span(y, m, d))


def _dmy(match, ctx: ParseContext):
    d, m, y = _ints(match, 1, 2, 3)
    return InstantSpan(*day_span(y, m, d))


def _month_year(match, ctx: ParseContext):
    m, y = _ints(match, 1, 2)
    span = month_span(y, m)
    if span is None:
        ctx.warn(INVALID_END_DATE, match.group(0))
        return None
    return InstantSpan(*span)


def _year(match, ctx: ParseContext):
    y = int(match.group(1))
    return InstantSpan(year_start(y), year_end(y))


EAD_RULES = [
    DateRule("dmy_to_dmy", EAD_DMY_TO_DMY_RE, _dmy_to_dmy),
    DateRule("month_year_to_month_year", EAD_MONTH_YEAR_TO_MONTH_YEAR_RE, _month_year_to_month_year),
    DateRule("year_to_year", EAD_YEAR_TO_YEAR_RE, _year_to_year),
    DateRule("ymd", EAD_YMD_RE, _ymd),
    DateRule("dmy", EAD_DMY_RE, _dmy),
    DateRule("month_year", EAD_MONTH_YEAR_RE, _month_year),
    DateRule("number_to_number", EAD_NUMBER_TO_NUMBER_RE, _year_to_year),
    DateRule("year", EAD_YEAR_RE, _year),
]


@safe_parse
def parse_date_range(raw: str, ctx: ParseContext) -> Optional[DateRange]:
    """
    Parse an EAD unitdate.

    Returns None for empty input, "-" and text without a recognizable date.
    """
    text = (raw or "").strip()
    if not text or text == EAD_NO_DATE:
        return None

    hit = match_rule(EAD_RULES, text)
    if hit is None:
        return None
    logger.debug("EAD unitdate %r matched rule %s", text, hit.name)

    span = hit.build(ctx)
    if span is None:
        return None
    return reconcile(span.start, span.end, ctx)
