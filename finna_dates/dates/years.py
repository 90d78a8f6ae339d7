"""
Years mentioned in free text, e.g. in titles or Dublin Core dates.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from finna_dates.dates.instant import format_year
from finna_dates.dates.patterns import (
    DMY_DATE_IN_TEXT_RE,
    ISO_DATE_IN_TEXT_RE,
    YEAR_TOKEN_RE,
)


def years_from_string(text: str) -> List[int]:
    """
    Return every year (1-4 digits, optionally negative) found in text.

    Full dates such as 2021-05-03 or 3.5.2021 count only as their year.
    """
    if not text:
        return []
    text = ISO_DATE_IN_TEXT_RE.sub(lambda m: m.group(1), str(text))
    text = DMY_DATE_IN_TEXT_RE.sub(lambda m: m.group(1), text)
    return [int(token) for token in YEAR_TOKEN_RE.findall(text)]


def year_strings_from_string(text: str) -> List[str]:
    return [format_year(year) for year in years_from_string(text)]


def year_span_from_string(text: str) -> Optional[Tuple[int, int]]:
    """Earliest and latest year mentioned in text, or None."""
    years = years_from_string(text)
    if not years:
        return None
    return min(years), max(years)
