"""
EAD3 driver: structured and normalized unit dates.
"""

from typing import Any, Dict, List, Optional

from finna_dates.dates import ead3 as ead3_dates
from finna_dates.dates.context import ParseContext
from finna_dates.dates.instant import extract_year, validate_date
from finna_dates.dates.patterns import (
    EAD3_COVERAGE_LABEL,
    EAD3_RANGE_SEPARATOR,
    EAD3_TEXT_DATE_SEPARATOR,
)
from finna_dates.drivers.base import BaseDriver
from finna_dates.drivers.titles import enrich_titles_with_year_range
from finna_dates.ir import DateRange, Ead3StructuredDate, Ead3UnitDate, Record
from finna_dates.logger import get_logger

logger = get_logger(__name__)


class Ead3Driver(BaseDriver):
    """
    Maps unitdatestructured/unitdate elements to date range fields.

    The first range also gives the main date and the title year range.
    """

    record_format = "ead3"
    STRUCTURED_FIELD = "unitdatestructured"
    UNITDATE_FIELD = "unitdate"
    POLICY_PARAM = "enrichTitleWithYearRange"

    def parse_date_range(self, raw: str, ctx: Optional[ParseContext] = None) -> Optional[DateRange]:
        return ead3_dates.parse_date_range(raw, ctx)

    def _structured_ranges(self, record: Record, ctx: ParseContext) -> List[Optional[DateRange]]:
        result: List[Optional[DateRange]] = []
        for date in self.load_models(Ead3StructuredDate, record.get_field(self.STRUCTURED_FIELD)):
            if date.daterange is not None:
                element = date.daterange
                if element.fromdate is None or not element.todate:
                    continue
                # Several todate values in one daterange: the last one wins
                to_date = element.todate[-1]
                result.append(self.parse_date_range(f"{element.fromdate}/{to_date}", ctx))
            elif date.datesingle is not None:
                result.append(self.parse_date_range(f"{date.datesingle}/{date.datesingle}", ctx))
        return result

    def _unitdate_ranges(self, record: Record, ctx: ParseContext) -> List[Optional[DateRange]]:
        primary: List[DateRange] = []
        result: List[Optional[DateRange]] = []
        for unitdate in self.load_models(Ead3UnitDate, record.get_field(self.UNITDATE_FIELD)):
            if unitdate.label == EAD3_COVERAGE_LABEL and unitdate.normal:
                date_range = self.parse_date_range(unitdate.normal, ctx)
                if date_range and not date_range.start_unknown and not date_range.end_unknown:
                    primary.append(date_range)
                    continue
            if unitdate.normal:
                result.append(self.parse_date_range(unitdate.normal, ctx))
                continue
            for single in unitdate.text.split(EAD3_TEXT_DATE_SEPARATOR):
                if not single.strip():
                    continue
                value = single.strip().replace("-", EAD3_RANGE_SEPARATOR)
                if EAD3_RANGE_SEPARATOR not in value:
                    value = f"{value}/{value}"
                result.append(self.parse_date_range(value, ctx))
        return primary + result

    def get_date_ranges(self, record: Record, ctx: ParseContext) -> List[DateRange]:
        """
        Collect the record's date ranges.

        Structured dates win; unit dates are only used without them, with a
        fully known "Ajallinen kattavuus" range first.
        """
        ranges = self._structured_ranges(record, ctx)
        if not ranges:
            ranges = self._unitdate_ranges(record, ctx)
        return [r for r in ranges if r is not None]

    def title_policy(self, record: Record) -> str:
        policy = self.driver_param(record, self.POLICY_PARAM, self.settings.TITLE_YEAR_RANGE_POLICY)
        return str(policy).strip().lower()

    def to_field_map(
        self,
        record: Record,
        ctx: ParseContext,
        base_fields: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        fields = dict(base_fields or {})
        ranges = self.get_date_ranges(record, ctx)
        for index, date_range in enumerate(ranges):
            canonical = self.add_search_range(fields, date_range)
            if canonical:
                fields["unit_daterange"] = canonical
            if index == 0:
                fields["main_date_str"] = fields["era_facet"] = extract_year(date_range.start)
                main_date = validate_date(date_range.start)
                if main_date:
                    fields["main_date"] = main_date
                enrich_titles_with_year_range(fields, date_range, self.title_policy(record))
        logger.debug("EAD3 %s/%s: %d date ranges", record.source, record.record_id, len(ranges))
        return fields
