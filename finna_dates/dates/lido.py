"""
LIDO date parsing.

Display dates and period names are free Finnish text ("1930-luku",
"1800-luvun loppupuoli", "150 ekr - 100 jkr", "1930 kesäkuu",
"kivikausi"). Named eras are looked up first, then LIDO_RULES is tried
in order. Earliest/latest dates of events and subjects are completed
directly and only fall back to the free text when missing.
"""

from __future__ import annotations

from typing import Optional

from finna_dates.dates.completion import (
    complete_partial_string,
    day_span,
    expand_year_tokens,
    month_span,
    period_span,
)
from finna_dates.dates.context import ParseContext, safe_parse
from finna_dates.dates.instant import format_instant, validate_iso8601, year_end, year_start
from finna_dates.dates.patterns import (
    AFTER_YEAR_SPAN,
    FINNISH_MONTHS,
    LIDO_AFTER_YEAR_RE,
    LIDO_BCE_TO_BCE_RE,
    LIDO_BCE_TO_CE_RE,
    LIDO_DECADE_RE,
    LIDO_DMY_RE,
    LIDO_DMY_TO_DMY_RE,
    LIDO_DMY_TO_YEAR_RE,
    LIDO_EARLY_DECADE_RE,
    LIDO_ERA_RANGES,
    LIDO_LATE_DECADE_RE,
    LIDO_MID_DECADE_RE,
    LIDO_MONTH_YEAR_RE,
    LIDO_SIGNED_YEAR_TO_YEAR_RE,
    LIDO_SPACED_YEAR_TO_YEAR_RE,
    LIDO_UNCERTAIN_YEAR_RE,
    LIDO_YEAR_RE,
    LIDO_YEAR_TEXT_MONTH_RE,
    LIDO_YEAR_TO_DMY_RE,
    LIDO_YEAR_TO_YEAR_RE,
    LIDO_YEARS_TO_LATE_DECADE_RE,
    LIDO_YM_COMPACT_RE,
    LIDO_YM_TO_YM_COMPACT_RE,
    LIDO_YMD_COMPACT_RE,
    LIDO_YMD_RE,
    LIDO_YMD_TO_YMD_COMPACT_RE,
    LIDO_YMD_TO_YMD_RE,
    PERIOD_EARLY,
    PERIOD_LATE,
    PERIOD_MID,
    PERIOD_WHOLE,
    YEAR_RANGE_PATTERNS,
)
from finna_dates.dates.reconcile import INVALID_DATE_RANGE, INVALID_END_DATE, reconcile
from finna_dates.dates.rules import DateRule, InstantSpan, YearSpan, match_rule
from finna_dates.ir import DateRange, Role
from finna_dates.logger import get_logger

logger = get_logger(__name__)


def _ints(match, *groups):
    return [int(match.group(g)) for g in groups]


def _same_width(value: int, token: str) -> str:
    # Keeps two-digit tokens two digits wide for the 19xx rule
    if value < 0:
        return str(value)
    return str(value).zfill(len(token.lstrip("-")))


# ---------------------------------------------------------------------------
# Full dates
# ---------------------------------------------------------------------------

def _dmy_to_dmy(match, ctx: ParseContext):
    d1, m1, y1, d2, m2, y2 = _ints(match, 1, 2, 3, 4, 5, 6)
    return InstantSpan(format_instant(y1, m1, d1, Role.START), format_instant(y2, m2, d2, Role.END))


def _year_to_dmy(match, ctx: ParseContext):
    y1, d2, m2, y2 = _ints(match, 1, 2, 3, 4)
    return InstantSpan(year_start(y1), format_instant(y2, m2, d2, Role.END))


def _dmy_to_year(match, ctx: ParseContext):
    d1, m1, y1, y2 = _ints(match, 1, 2, 3, 4)
    return InstantSpan(format_instant(y1, m1, d1, Role.START), year_end(y2))


def _ymd_to_ymd(match, ctx: ParseContext):
    y1, m1, d1, y2, m2, d2 = _ints(match, 1, 2, 3, 4, 5, 6)
    return InstantSpan(format_instant(y1, m1, d1, Role.START), format_instant(y2, m2, d2, Role.END))


def _ym_to_ym(match, ctx: ParseContext):
    y1, m1, y2, m2 = _ints(match, 1, 2, 3, 4)
    end = month_span(y2, m2)
    if end is None:
        ctx.warn(INVALID_END_DATE, match.group(0))
        return None
    return InstantSpan(format_instant(y1, m1, 1, Role.START), end[1])


def _ymd(match, ctx: ParseContext):
    y, m, d = _ints(match, 1, 2, 3)
    return InstantSpan(*day_span(y, m, d))


def _dmy(match, ctx: ParseContext):
    d, m, y = _ints(match, 1, 2, 3)
    return InstantSpan(*day_span(y, m, d))


def _ym(match, ctx: ParseContext):
    y, m = _ints(match, 1, 2)
    span = month_span(y, m)
    if span is None:
        ctx.warn(INVALID_END_DATE, match.group(0))
        return None
    return InstantSpan(*span)


def _month_year(match, ctx: ParseContext):
    m, y = _ints(match, 1, 2)
    span = month_span(y, m)
    if span is None:
        ctx.warn(INVALID_END_DATE, match.group(0))
        return None
    return InstantSpan(*span)


def _year_text_month(match, ctx: ParseContext):
    year = int(match.group(1))
    month = FINNISH_MONTHS.index(match.group(2)) + 1
    return InstantSpan(*month_span(year, month))


# ---------------------------------------------------------------------------
# Year ranges and decade/century shorthand
# ---------------------------------------------------------------------------

def _years_to_late_decade(match, ctx: ParseContext):
    end = int(match.group(2))
    if end % 100 == 0:
        end += 99
    elif end % 10 == 0:
        end += 9
    return YearSpan(match.group(1), _same_width(end, match.group(2)))


def _year_to_year(match, ctx: ParseContext):
    end_token = match.group(3)
    end = int(end_token)
    if match.group(4) and end % 10 == 0:
        end += 9
    # group 5 marks the range as uncertain, which does not change it
    return YearSpan(match.group(1), _same_width(end, end_token))


def _period(part: str):
    def build(match, ctx: ParseContext):
        token = match.group(1)
        start, end = period_span(int(token), part)
        return YearSpan(_same_width(start, token), _same_width(end, token))
    return build


def _bce_to_bce(match, ctx: ParseContext):
    return YearSpan("-" + match.group(1), "-" + match.group(2))


def _bce_to_ce(match, ctx: ParseContext):
    return YearSpan("-" + match.group(1), match.group(2))


def _between_years(match, ctx: ParseContext):
    return YearSpan(match.group("begin"), match.group("end"))


def _after_year(match, ctx: ParseContext):
    token = match.group(1)
    return YearSpan(token, _same_width(int(token) + AFTER_YEAR_SPAN, token))


def _year_pair(match, ctx: ParseContext):
    return YearSpan(match.group(1), match.group(2))


def _single_year(match, ctx: ParseContext):
    return YearSpan(match.group(1), match.group(1))


LIDO_RULES = [
    DateRule("dmy_to_dmy", LIDO_DMY_TO_DMY_RE, _dmy_to_dmy),
    DateRule("year_to_dmy", LIDO_YEAR_TO_DMY_RE, _year_to_dmy),
    DateRule("dmy_to_year", LIDO_DMY_TO_YEAR_RE, _dmy_to_year),
    DateRule("ymd_to_ymd", LIDO_YMD_TO_YMD_RE, _ymd_to_ymd),
    DateRule("ymd_to_ymd_compact", LIDO_YMD_TO_YMD_COMPACT_RE, _ymd_to_ymd),
    DateRule("ym_to_ym_compact", LIDO_YM_TO_YM_COMPACT_RE, _ym_to_ym),
    DateRule("ymd", LIDO_YMD_RE, _ymd),
    DateRule("years_to_late_decade", LIDO_YEARS_TO_LATE_DECADE_RE, _years_to_late_decade),
    DateRule("year_to_year", LIDO_YEAR_TO_YEAR_RE, _year_to_year),
    DateRule("year_text_month", LIDO_YEAR_TEXT_MONTH_RE, _year_text_month),
    DateRule("ymd_compact", LIDO_YMD_COMPACT_RE, _ymd),
    DateRule("ym_compact", LIDO_YM_COMPACT_RE, _ym),
    DateRule("dmy", LIDO_DMY_RE, _dmy),
    DateRule("month_year", LIDO_MONTH_YEAR_RE, _month_year),
    DateRule("early_decade", LIDO_EARLY_DECADE_RE, _period(PERIOD_EARLY)),
    DateRule("mid_decade", LIDO_MID_DECADE_RE, _period(PERIOD_MID)),
    DateRule("late_decade", LIDO_LATE_DECADE_RE, _period(PERIOD_LATE)),
    DateRule("decade", LIDO_DECADE_RE, _period(PERIOD_WHOLE)),
    DateRule("bce_to_bce", LIDO_BCE_TO_BCE_RE, _bce_to_bce),
    DateRule("bce_to_ce", LIDO_BCE_TO_CE_RE, _bce_to_ce),
    DateRule("between_years", YEAR_RANGE_PATTERNS[0], _between_years),
    DateRule("between_years_fi", YEAR_RANGE_PATTERNS[1], _between_years),
    DateRule("after_year", LIDO_AFTER_YEAR_RE, _after_year),
    DateRule("signed_year_to_year", LIDO_SIGNED_YEAR_TO_YEAR_RE, _year_pair),
    DateRule("spaced_year_to_year", LIDO_SPACED_YEAR_TO_YEAR_RE, _year_pair),
    DateRule("uncertain_year", LIDO_UNCERTAIN_YEAR_RE, _single_year),
    DateRule("year", LIDO_YEAR_RE, _single_year),
]


@safe_parse
def parse_date_range(raw: str, ctx: ParseContext) -> Optional[DateRange]:
    """
    Parse a LIDO display date or period name.

    Returns None for undated terms, unrecognized text and ranges reaching
    past the current year.
    """
    text = (raw or "").strip().lower()
    if not text:
        return None

    for term, era in LIDO_ERA_RANGES:
        if term in text:
            if era is None:
                return None
            return DateRange(start=era[0], end=era[1])

    text = text.split(",", 1)[0]
    hit = match_rule(LIDO_RULES, text)
    if hit is None:
        return None
    logger.debug("LIDO date %r matched rule %s", text, hit.name)

    span = hit.build(ctx)
    if span is None:
        return None
    if isinstance(span, YearSpan):
        start_year, end_year = expand_year_tokens(span.start, span.end)
        start, end = year_start(start_year), year_end(end_year)
    else:
        start, end = span.start, span.end

    return reconcile(start, end, ctx, reject_future=True, repair_invalid=True)


def resolve_date_values(
    earliest: Optional[str],
    latest: Optional[str],
    display_date: Optional[str],
    period_name: Optional[str],
    ctx: ParseContext,
) -> Optional[DateRange]:
    """
    Resolve an event or subject date.

    Earliest/latest values are completed as partial dates (1930, 1930-05,
    1930-05-12). Without them the display date, then the period name, is
    parsed as free text.
    """
    if earliest:
        latest = latest or earliest
        start = complete_partial_string(earliest, Role.START, ctx)
        end = complete_partial_string(latest, Role.END, ctx)
        if start is None or end is None:
            return None
        if validate_iso8601(end) < validate_iso8601(start):
            ctx.warn(INVALID_DATE_RANGE, f"{earliest} - {latest}")
            end = complete_partial_string(earliest, Role.END, ctx)
            if end is None:
                return None
        return DateRange(start=start, end=end)

    if display_date:
        return parse_date_range(display_date, ctx)
    if period_name:
        return parse_date_range(period_name, ctx)
    return None
