"""
Year ranges appended to display titles.
"""

from __future__ import annotations

from typing import Any, Dict, List

from finna_dates.dates.instant import extract_year
from finna_dates.dates.patterns import (
    LEFT_TO_RIGHT_MARK,
    TITLE_FIELDS,
    UNKNOWN_END_YEAR,
    UNKNOWN_START_YEAR,
    YEAR_RANGE_JOINER,
)
from finna_dates.dates.years import year_strings_from_string
from finna_dates.ir import DateRange


def _unique(values: List[str]) -> List[str]:
    result: List[str] = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


def range_years(date_range: DateRange) -> List[str]:
    """[start year, end year], with open bounds (-9999/9999) as ""."""
    start_year = extract_year(date_range.start)
    end_year = extract_year(date_range.end)
    return [
        start_year if start_year != UNKNOWN_START_YEAR else "",
        end_year if end_year != UNKNOWN_END_YEAR else "",
    ]


def _should_append(policy: str, years: List[str], title: str) -> bool:
    found = year_strings_from_string(title)
    if policy == "always":
        return True
    if policy == "no_year_exists":
        return not found
    if policy == "no_match_exists":
        return not any(year in found for year in years)
    if policy == "no_matches_exist":
        wanted = [year for year in _unique(years) if year]
        return [year for year in wanted if year in found] != wanted
    return False


def enrich_titles_with_year_range(fields: Dict[str, Any], date_range: DateRange, policy: str) -> Dict[str, Any]:
    """
    Append "<LRM> (1985–1995)" to the title fields under a policy.

    Policies:
        always: always append
        never: never append
        no_year_exists: append when the title mentions no year at all
        no_match_exists: append when the title mentions neither range year
        no_matches_exist: append unless the title mentions every range year

    Nothing is appended when the start of the range is unknown.
    """
    if policy == "never" or date_range.start_unknown:
        return fields

    years = range_years(date_range)
    display = YEAR_RANGE_JOINER.join(_unique(years)).strip()
    if not display:
        return fields
    suffix = f"{LEFT_TO_RIGHT_MARK} ({display})"

    for name in TITLE_FIELDS:
        title = fields.get(name)
        if title is None:
            continue
        if _should_append(policy, years, str(title)):
            fields[name] = f"{title}{suffix}"
    return fields


def append_year_range_suffix(fields: Dict[str, Any], date_range: DateRange) -> Dict[str, Any]:
    """
    Append " (1920-1930)" to titles that do not already end with the range.

    Used by EAD 2002 records. Open bounds are left out ("1920-").
    """
    start_year = extract_year(date_range.start)
    end_year = extract_year(date_range.end)
    year_range = start_year if start_year != UNKNOWN_START_YEAR else ""
    if end_year != start_year:
        year_range += "-"
        if end_year != UNKNOWN_END_YEAR:
            year_range += end_year
    if not year_range:
        return fields

    for name in TITLE_FIELDS:
        title = fields.get(name)
        if title is None:
            continue
        title = str(title)
        if not title.endswith(year_range) and not title.endswith(f"({year_range})"):
            fields[name] = f"{title} ({year_range})"
    return fields
