"""
Date range normalization shared by all record formats.
"""

from finna_dates.dates.context import ParseContext, current_year, safe_parse
from finna_dates.dates.formatter import date_range_to_str, parse_canonical_range
from finna_dates.dates.instant import extract_year, format_year, validate_date, validate_iso8601
from finna_dates.dates.reconcile import reconcile
from finna_dates.dates.years import year_span_from_string, years_from_string

__all__ = [
    "ParseContext",
    "current_year",
    "date_range_to_str",
    "extract_year",
    "format_year",
    "parse_canonical_range",
    "reconcile",
    "safe_parse",
    "validate_date",
    "validate_iso8601",
    "year_span_from_string",
    "years_from_string",
]
