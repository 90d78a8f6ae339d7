"""
EAD 2002 driver: unit date of an archival description.
"""

from typing import Any, Dict, Optional

from finna_dates.dates import ead as ead_dates
from finna_dates.dates.context import ParseContext
from finna_dates.dates.formatter import date_range_to_str
from finna_dates.dates.instant import extract_year, validate_date
from finna_dates.drivers.base import SEARCH_DATERANGE_FIELD, BaseDriver
from finna_dates.drivers.titles import append_year_range_suffix
from finna_dates.ir import DateRange, Record


class EadDriver(BaseDriver):
    """Maps did/unitdate to the unit date range and the title suffix."""

    record_format = "ead"
    UNITDATE_FIELD = "unitdate"

    def parse_date_range(self, raw: str, ctx: Optional[ParseContext] = None) -> Optional[DateRange]:
        return ead_dates.parse_date_range(raw, ctx)

    def to_field_map(
        self,
        record: Record,
        ctx: ParseContext,
        base_fields: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        fields = dict(base_fields or {})
        unitdate = record.get_first(self.UNITDATE_FIELD, "")
        date_range = self.parse_date_range(str(unitdate), ctx)
        if date_range is None:
            return fields

        canonical = date_range_to_str(date_range)
        if canonical:
            fields[SEARCH_DATERANGE_FIELD] = [canonical]
            fields["unit_daterange"] = canonical
        fields["main_date_str"] = extract_year(date_range.start)
        main_date = validate_date(date_range.start)
        if main_date:
            fields["main_date"] = main_date
        return append_year_range_suffix(fields, date_range)
