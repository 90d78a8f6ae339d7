"""
MARC driver: publication date range from 008, 260 and 264.
"""

from typing import Any, Dict, Optional

from finna_dates.dates import marc as marc_dates
from finna_dates.dates.context import ParseContext
from finna_dates.dates.instant import extract_year, validate_date
from finna_dates.drivers.base import BaseDriver
from finna_dates.ir import DateRange, MarcField, Record

PUBLICATION_STATEMENT_IND2 = "1"


class MarcDriver(BaseDriver):
    """Maps the publication dates of a bibliographic record."""

    record_format = "marc"

    def parse_date_range(self, raw: str, ctx: Optional[ParseContext] = None) -> Optional[DateRange]:
        return marc_dates.parse_date_range(raw, ctx)

    def get_publication_date_range(self, record: Record, ctx: ParseContext) -> Optional[DateRange]:
        field_008 = record.get_first("008")
        fields_260 = self.load_models(MarcField, record.get_field("260"))
        fields_264 = self.load_models(MarcField, record.get_field("264"))

        field_260_c = fields_260[0].get_subfield("c") if fields_260 else None
        fields_264_c = [
            field.get_subfield("c")
            for field in fields_264
            if field.ind2 == PUBLICATION_STATEMENT_IND2
        ]
        return marc_dates.publication_date_range(field_008, field_260_c, fields_264_c, ctx)

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

        date_range = self.get_publication_date_range(record, ctx)
        canonical = self.add_search_range(fields, date_range)
        if canonical:
            fields["publication_daterange"] = canonical
        return fields
