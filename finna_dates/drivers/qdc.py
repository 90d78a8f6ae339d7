"""
Qualified Dublin Core driver, shared by the LRMI and Aipa formats.
"""

from typing import Any, Dict, Optional

from finna_dates.dates import qdc as qdc_dates
from finna_dates.dates.context import ParseContext
from finna_dates.dates.formatter import date_range_to_str
from finna_dates.dates.instant import extract_year, validate_date
from finna_dates.drivers.base import BaseDriver
from finna_dates.ir import DateRange, Record


class QdcDriver(BaseDriver):
    """Maps date and issued elements to publication date ranges."""

    record_format = "qdc"
    DATE_FIELDS = ("date", "issued")

    def __init__(self, settings=None, record_format: Optional[str] = None):
        super().__init__(settings)
        if record_format:
            self.record_format = record_format

    def parse_date_range(self, raw: str, ctx: Optional[ParseContext] = None) -> Optional[DateRange]:
        return qdc_dates.parse_date_range(raw, ctx)

    def to_field_map(
        self,
        record: Record,
        ctx: ParseContext,
        base_fields: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        fields = dict(base_fields or {})

        publish_year = extract_year(fields.get("publishDate"))
        if publish_year:
            fields["main_date_str"] = publish_year
            main_date = validate_date(f"{publish_year}-01-01T00:00:00Z")
            if main_date:
                fields["main_date"] = main_date

        values = []
        for name in self.DATE_FIELDS:
            values.extend(str(value) for value in record.get_field(name))
        ranges = qdc_dates.publication_date_ranges(values, ctx)
        if ranges:
            fields["publication_daterange"] = date_range_to_str(ranges[0])
            for date_range in ranges:
                self.add_search_range(fields, date_range)
        return fields
