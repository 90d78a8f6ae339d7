"""
LIDO driver: subject dates and event dates of museum objects.
"""

from typing import Any, Dict, List, Optional

from finna_dates.dates import lido as lido_dates
from finna_dates.dates.context import ParseContext
from finna_dates.dates.formatter import date_range_to_str
from finna_dates.dates.instant import extract_year, validate_date
from finna_dates.drivers.base import SEARCH_DATERANGE_FIELD, BaseDriver
from finna_dates.ir import DateRange, LidoEvent, LidoSubjectDate, Record

CREATION_EVENT = "valmistus"

# Used in this order when there is no creation event
SECONDARY_EVENTS = [
    ("suunnittelu", "design"),
    ("tuotanto", "production"),
    ("kuvaus", "photography"),
]

USE_EVENT = "käyttö"
FINDING_EVENT = "löytyminen"


class LidoDriver(BaseDriver):
    """Maps LIDO subject and event dates to date range fields."""

    record_format = "lido"
    EVENTS_FIELD = "events"
    SUBJECTS_FIELD = "subject_dates"

    def parse_date_range(self, raw: str, ctx: Optional[ParseContext] = None) -> Optional[DateRange]:
        return lido_dates.parse_date_range(raw, ctx)

    def get_date_range(
        self,
        events: List[LidoEvent],
        ctx: ParseContext,
        event_type: Optional[str] = None,
    ) -> Optional[DateRange]:
        """
        Date range of the events of a type (all events when None).

        The first event with both earliest and latest dates wins; the first
        display date and period name are the fallbacks.
        """
        earliest = latest = display_date = period_name = None
        for event in events:
            if event_type is not None and event.event_type.strip().lower() != event_type:
                continue
            if not earliest and event.earliest and event.latest:
                earliest, latest = event.earliest, event.latest
            if not display_date and event.display_date:
                display_date = event.display_date
            if not period_name and event.period_name:
                period_name = event.period_name
        return lido_dates.resolve_date_values(earliest, latest, display_date, period_name, ctx)

    def get_subject_date_ranges(self, subjects: List[LidoSubjectDate], ctx: ParseContext) -> List[DateRange]:
        ranges = []
        for subject in subjects:
            earliest = latest = None
            if subject.earliest and subject.latest:
                earliest, latest = subject.earliest, subject.latest
            date_range = lido_dates.resolve_date_values(earliest, latest, subject.display_date, None, ctx)
            if date_range is not None:
                ranges.append(date_range)
        return ranges

    @staticmethod
    def _set_main_date(fields: Dict[str, Any], date_range: DateRange) -> None:
        if "main_date_str" in fields:
            return
        fields["main_date_str"] = extract_year(date_range.start)
        main_date = validate_date(date_range.start)
        if main_date:
            fields["main_date"] = main_date

    def to_field_map(
        self,
        record: Record,
        ctx: ParseContext,
        base_fields: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        fields = dict(base_fields or {})
        events = self.load_models(LidoEvent, record.get_field(self.EVENTS_FIELD))
        subjects = self.load_models(LidoSubjectDate, record.get_field(self.SUBJECTS_FIELD))

        for date_range in self.get_subject_date_ranges(subjects, ctx):
            self._set_main_date(fields, date_range)
            self.add_search_range(fields, date_range)

        creation = self.get_date_range(events, ctx, CREATION_EVENT)
        if creation is not None:
            self._set_main_date(fields, creation)
            canonical = self.add_search_range(fields, creation)
            if canonical:
                fields["creation_daterange"] = canonical
        else:
            for event_type, prefix in SECONDARY_EVENTS:
                date_range = self.get_date_range(events, ctx, event_type)
                if date_range is None:
                    continue
                canonical = date_range_to_str(date_range)
                if canonical:
                    fields[f"{prefix}_daterange"] = canonical
                    if SEARCH_DATERANGE_FIELD not in fields:
                        fields[SEARCH_DATERANGE_FIELD] = [canonical]
                self._set_main_date(fields, date_range)

        for event_type, name in ((USE_EVENT, "use_daterange"), (FINDING_EVENT, "finding_daterange")):
            date_range = self.get_date_range(events, ctx, event_type)
            canonical = date_range_to_str(date_range)
            if canonical:
                fields[name] = canonical
        return fields
