"""
Centralised patterns and vocabulary for date parsing.

All regexes, Finnish date vocabulary and the fixed rounding offsets live
here. The per-format rule tables refer to these by name; their order is
defined where the tables are built.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

# ---------------------------------------------------------------------------
# Instants
# ---------------------------------------------------------------------------

ISO8601_INSTANT_RE = re.compile(r"^(-?\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z$")
ISO8601_DATE_RE = re.compile(r"^(-?\d{4})-(\d{2})-(\d{2})(?:T(\d{2}):(\d{2}):(\d{2})Z)?$")
YEAR_PREFIX_RE = re.compile(r"(-?\d{4})")
CANONICAL_RANGE_RE = re.compile(r"^\[(\S+) TO (\S+)\]$")

START_TIME = "00:00:00"
END_TIME = "23:59:59"

# Wildcard digit placeholders and the digit they stand for per role
WILDCARD_RE = re.compile(r"[ux]", re.IGNORECASE)
WILDCARD_START_DIGIT = "0"
WILDCARD_END_DIGIT = "9"

# Partial dates accepted by earliest/latest style fields
PARTIAL_DATE_RE = re.compile(r"^(-?)(\d{1,4})(?:-(\d{2})(?:-(\d{2}))?)?$")

# ---------------------------------------------------------------------------
# Decade / century rounding offsets
# ---------------------------------------------------------------------------

PERIOD_EARLY = "early"
PERIOD_MID = "mid"
PERIOD_LATE = "late"
PERIOD_WHOLE = "whole"

DECADE_OFFSETS: Dict[str, Tuple[int, int]] = {
    PERIOD_EARLY: (0, 3),
    PERIOD_MID: (3, 7),
    PERIOD_LATE: (7, 9),
    PERIOD_WHOLE: (0, 9),
}

CENTURY_OFFSETS: Dict[str, Tuple[int, int]] = {
    PERIOD_EARLY: (0, 29),
    PERIOD_MID: (29, 70),
    PERIOD_LATE: (70, 99),
    PERIOD_WHOLE: (0, 99),
}

# "X jälkeen" (after X) covers the following decade
AFTER_YEAR_SPAN = 9

# ---------------------------------------------------------------------------
# EAD (2002) free-text unitdate
# ---------------------------------------------------------------------------

EAD_DMY_TO_DMY_RE = re.compile(r"(\d\d?).(\d\d?).(\d\d\d\d) ?- ?(\d\d?).(\d\d?).(\d\d\d\d)")
EAD_MONTH_YEAR_TO_MONTH_YEAR_RE = re.compile(r"(\d\d?).(\d\d\d\d) ?- ?(\d\d?).(\d\d\d\d)")
EAD_YEAR_TO_YEAR_RE = re.compile(r"(\d\d\d\d) ?- ?(\d\d\d\d)")
EAD_YMD_RE = re.compile(r"(\d\d\d\d)-(\d\d?)-(\d\d?)")
EAD_DMY_RE = re.compile(r"(\d\d?).(\d\d?).(\d\d\d\d)")
EAD_MONTH_YEAR_RE = re.compile(r"(\d\d?)\.(\d\d\d\d)")
EAD_NUMBER_TO_NUMBER_RE = re.compile(r"(\d+) ?- ?(\d+)")
EAD_YEAR_RE = re.compile(r"(\d\d\d\d)")

EAD_NO_DATE = "-"

# ---------------------------------------------------------------------------
# EAD3 normalized dates
# ---------------------------------------------------------------------------

EAD3_RANGE_SEPARATOR = "/"
EAD3_UNKNOWN_BOUNDS = frozenset({"open", "unknown"})
EAD3_UNKNOWN_COMPONENTS = frozenset({"uu", "xx", "uuuu", "xxxx"})
EAD3_YEAR_RE = re.compile(r"^-?\d{1,4}$")
EAD3_MONTH_DAY_RE = re.compile(r"^\d{1,2}$")
EAD3_COVERAGE_LABEL = "Ajallinen kattavuus"
EAD3_TEXT_DATE_SEPARATOR = ", "

# ---------------------------------------------------------------------------
# LIDO free-text display dates
# ---------------------------------------------------------------------------

# Named eras, matched by substring before any numeric rule. None = undated.
LIDO_ERA_RANGES: List[Tuple[str, Optional[Tuple[str, str]]]] = [
    ("kivikausi", ("-8600-01-01T00:00:00Z", "-1501-12-31T23:59:59Z")),
    ("pronssikausi", ("-1500-01-01T00:00:00Z", "-0501-12-31T23:59:59Z")),
    ("rautakausi", ("-0500-01-01T00:00:00Z", "1299-12-31T23:59:59Z")),
    ("keskiaika", ("1300-01-01T00:00:00Z", "1550-12-31T23:59:59Z")),
    ("ajoittamaton", None),
    ("tuntematon", None),
]

FINNISH_MONTHS: List[str] = [
    "tammikuu",
    "helmikuu",
    "maaliskuu",
    "huhtikuu",
    "toukokuu",
    "kesäkuu",
    "heinäkuu",
    "elokuu",
    "syyskuu",
    "lokakuu",
    "marraskuu",
    "joulukuu",
]

LIDO_DMY_TO_DMY_RE = re.compile(
    r"(\d\d?)\s*.\s*(\d\d?)\s*.\s*(\d\d\d\d)\s*-\s*(\d\d?)\s*.\s*(\d\d?)\s*.\s*(\d\d\d\d)"
)
LIDO_YEAR_TO_DMY_RE = re.compile(r"(\d\d\d\d)\s*-\s*(\d\d?)\s*.\s*(\d\d?)\s*.\s*(\d\d\d\d)")
LIDO_DMY_TO_YEAR_RE = re.compile(r"(\d\d?)\s*.\s*(\d\d?)\s*.\s*(\d\d\d\d)\s*-\s*(\d\d\d\d)")
LIDO_YMD_TO_YMD_RE = re.compile(
    r"(\d\d\d\d)\s*.\s*(\d\d?)\s*.\s*(\d\d?)\s*-\s*(\d\d\d\d)\s*.\s*(\d\d?)\s*.\s*(\d\d?)"
)
LIDO_YMD_TO_YMD_COMPACT_RE = re.compile(r"(\d\d\d\d)(\d\d?)(\d\d?)\s*-\s*(\d\d\d\d)(\d\d?)(\d\d?)")
LIDO_YM_TO_YM_COMPACT_RE = re.compile(r"(\d\d\d\d)(\d\d?)\s*-\s*(\d\d\d\d)(\d\d?)")
LIDO_YMD_RE = re.compile(r"(\d\d\d\d)-(\d\d?)-(\d\d?)")
LIDO_YEARS_TO_LATE_DECADE_RE = re.compile(
    r"(\d\d\d\d)\s*-\s*(\d\d\d\d)\s*(-luvun|-l)\s+(loppupuoli|loppu)"
)
LIDO_YEAR_TO_YEAR_RE = re.compile(
    r"(\d?\d?\d\d)\s*(-|~)\s*(\d?\d?\d\d)\s*(-luku|-l)?\s*(\(?\?\)?)?"
)
LIDO_YEAR_TEXT_MONTH_RE = re.compile(r"(\d?\d?\d\d)\s+(" + "|".join(FINNISH_MONTHS) + r")")
LIDO_YMD_COMPACT_RE = re.compile(r"(\d\d\d\d)(\d\d)(\d\d)")
LIDO_YM_COMPACT_RE = re.compile(r"(\d\d\d\d)(\d\d)")
LIDO_DMY_RE = re.compile(r"(\d\d?)\s*\.\s*(\d\d?)\s*\.\s*(\d\d\d\d)")
LIDO_MONTH_YEAR_RE = re.compile(r"(\d\d?)\s*\.\s*(\d\d\d\d)")
LIDO_EARLY_DECADE_RE = re.compile(
    r"(\d?\d?\d\d)\s*-(luvun|luku)\s+(alkupuolelta|alkupuoli|alku|alusta)"
)
LIDO_MID_DECADE_RE = re.compile(r"(\d?\d?\d\d)\s*-(luvun|luku)\s+(puoliväli)")
LIDO_LATE_DECADE_RE = re.compile(
    r"(\d?\d?\d\d)\s*(-luvun|-l)\s+(loppupuoli|loppu|lopulta|loppupuolelta)"
)
LIDO_DECADE_RE = re.compile(r"(-?\d?\d?\d\d)\s*-(luku|luvulta|l)")
LIDO_BCE_TO_BCE_RE = re.compile(r"(\d?\d?\d\d)\s*ekr.?\s*\-\s*(\d?\d?\d\d)\s*ekr.?")
LIDO_BCE_TO_CE_RE = re.compile(r"(\d?\d?\d\d)\s*ekr.?\s*\-\s*(\d?\d?\d\d)\s*jkr.?")
LIDO_AFTER_YEAR_RE = re.compile(r"(-?\d?\d?\d\d) jälkeen")
LIDO_SIGNED_YEAR_TO_YEAR_RE = re.compile(r"(-?\d\d\d\d)\s*-\s*(-?\d\d\d\d)")
LIDO_SPACED_YEAR_TO_YEAR_RE = re.compile(r"(-?\d{1,4})\s+-\s+(-?\d{1,4})")
LIDO_UNCERTAIN_YEAR_RE = re.compile(r"(-?\d?\d?\d\d)\s*\?")
LIDO_YEAR_RE = re.compile(r"(-?\d?\d?\d\d)\b")

# A two-digit start year belongs to this century
TWO_DIGIT_YEAR_CENTURY = 1900

# ---------------------------------------------------------------------------
# Publication statements ("between X and Y"), shared by MARC and LIDO
# ---------------------------------------------------------------------------

BRACKETED_RE = re.compile(r"\[(.+)\]")
YEAR_RANGE_PATTERNS: List[re.Pattern] = [
    re.compile(r"between\s+(?P<begin>\d{4})\s+and\s+(?P<end>\d{4})"),
    re.compile(r"vuosien\s+(?P<begin>\d{4})\s+ja\s+(?P<end>\d{4})\s+välillä"),
    re.compile(r"(?P<begin>\d{4})\s+-\s+(?P<end>\d{4})"),
]
FOUR_DIGIT_YEAR_RE = re.compile(r"(\d{4})")

# ---------------------------------------------------------------------------
# MARC 008 positions
# ---------------------------------------------------------------------------

MARC_008_TYPE_POS = 6
MARC_008_DATE1 = slice(7, 11)
MARC_008_DATE2 = slice(11, 15)
MARC_008_MONTH = slice(11, 13)
MARC_008_DAY = slice(13, 15)
MARC_008_CONTINUING_TYPES = frozenset({"c"})
MARC_008_RANGE_TYPES = frozenset({"d", "i", "k", "m", "q"})
MARC_008_DETAILED_TYPES = frozenset({"e"})
MARC_008_SINGLE_TYPES = frozenset({"s", "t", "u"})
MARC_OPEN_END = "9999-12-31T23:59:59Z"

# ---------------------------------------------------------------------------
# Years in free text (titles, Dublin Core dates)
# ---------------------------------------------------------------------------

# Full and year-month dates reduced to their year before year tokens are
# collected; the month must be 1-12 so "1800-1801" and "1985-95" stay ranges
ISO_DATE_IN_TEXT_RE = re.compile(
    r"(?<!\d)(-?\d{4})-(?:0?[1-9]|1[0-2])(?:-\d{1,2})?(?:T[\d:.]+Z?)?(?!\d)"
)
DMY_DATE_IN_TEXT_RE = re.compile(r"(?<![\d.])\d{1,2}\.\d{1,2}\.(\d{4})(?!\d)")
YEAR_TOKEN_RE = re.compile(r"(?<![\w.])-\d{1,4}(?!\d)|(?<!\d)\d{1,4}(?!\d)")

# ---------------------------------------------------------------------------
# Title enrichment
# ---------------------------------------------------------------------------

TITLE_FIELDS: List[str] = ["title_full", "title_sort", "title", "title_short"]
LEFT_TO_RIGHT_MARK = "\u200e"
YEAR_RANGE_JOINER = "\u2013"
UNKNOWN_START_YEAR = "-9999"
UNKNOWN_END_YEAR = "9999"
