"""
Intermediate Representation Module
==================================

Core data structures shared by the date library and the record drivers:
PartialDate, DateRange, Record and the per-format date field models.
"""

from typing import Any, Dict, List, Optional, Tuple
from enum import Enum
from pydantic import BaseModel, Field


class Role(str, Enum):
    """
    Which end of a range a date is completed for.

    Starts round down (Jan 1, 00:00:00), ends round up (Dec 31 or the last
    day of the month, 23:59:59).
    """
    START = "start"
    END = "end"


class PartialDate(BaseModel):
    """
    A date with optional month and day.

    Attributes:
        year: year, negative for BCE
        month: 1-12, or None when not given
        day: 1-31, or None when not given
        unknown: the year could not be determined and a default was used
    """
    year: int
    month: Optional[int] = None
    day: Optional[int] = None
    unknown: bool = False

    class Config:
        frozen = True


class DateRange(BaseModel):
    """
    A resolved start/end pair of ISO 8601 instants.

    Attributes:
        start: YYYY-MM-DDThh:mm:ssZ, negative years as -YYYY
        end: same form as start, never before it
        start_unknown: the start was synthesized from a wildcard
        end_unknown: the end was synthesized from a wildcard
    """
    start: str
    end: str
    start_unknown: bool = False
    end_unknown: bool = False

    class Config:
        frozen = True

    def as_pair(self) -> Tuple[str, str]:
        return self.start, self.end


class Record(BaseModel):
    """
    A metadata record as handed over by the format-specific base driver.

    Attributes:
        source: data source identifier, used in warnings
        record_id: record identifier within the source
        record_format: format name (ead, ead3, lido, marc, qdc, lrmi, aipa)
        fields: raw date-bearing fields, keyed by field name
        driver_params: per-source driver parameters
    """
    source: str = ""
    record_id: str = ""
    record_format: str
    fields: Dict[str, Any] = Field(default_factory=dict)
    driver_params: Dict[str, Any] = Field(default_factory=dict)

    def get_field(self, name: str) -> List[Any]:
        """Return the values of a field as a list; absent fields give []."""
        value = self.fields.get(name)
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]

    def get_first(self, name: str, default: Any = None) -> Any:
        values = self.get_field(name)
        return values[0] if values else default


# ---------------------------------------------------------------------------
# EAD3 date elements
# ---------------------------------------------------------------------------

class Ead3DateRangeElement(BaseModel):
    """<daterange> with a fromdate and one or more todate values."""
    fromdate: Optional[str] = None
    todate: List[str] = Field(default_factory=list)


class Ead3StructuredDate(BaseModel):
    """<unitdatestructured>: either a daterange or a datesingle."""
    daterange: Optional[Ead3DateRangeElement] = None
    datesingle: Optional[str] = None


class Ead3UnitDate(BaseModel):
    """<unitdate> with its text content and label/normal attributes."""
    text: str = ""
    label: Optional[str] = None
    normal: Optional[str] = None


# ---------------------------------------------------------------------------
# LIDO events and subjects
# ---------------------------------------------------------------------------

class LidoEvent(BaseModel):
    """
    A LIDO event reduced to its date information.

    Attributes:
        event_type: event type term, e.g. "valmistus"
        earliest: eventDate/date/earliestDate
        latest: eventDate/date/latestDate
        display_date: eventDate/displayDate
        period_name: periodName/term
    """
    event_type: str = ""
    earliest: Optional[str] = None
    latest: Optional[str] = None
    display_date: Optional[str] = None
    period_name: Optional[str] = None


class LidoSubjectDate(BaseModel):
    """subjectDate with earliest/latest and display date."""
    earliest: Optional[str] = None
    latest: Optional[str] = None
    display_date: Optional[str] = None


# ---------------------------------------------------------------------------
# MARC data fields
# ---------------------------------------------------------------------------

class MarcField(BaseModel):
    """A MARC data field with indicators and repeatable subfields."""
    tag: str = ""
    ind1: str = " "
    ind2: str = " "
    subfields: Dict[str, List[str]] = Field(default_factory=dict)

    def get_subfield(self, code: str) -> str:
        values = self.subfields.get(code) or []
        return values[0] if values else ""
