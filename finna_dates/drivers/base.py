"""
Base Driver Module
==================

Shared interface and error handling for all record format drivers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel

from finna_dates.config import Settings, get_settings
from finna_dates.dates.context import ParseContext
from finna_dates.dates.formatter import date_range_to_str
from finna_dates.ir import DateRange, Record
from finna_dates.logger import get_logger
from finna_dates.sink import WarningSink

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

SEARCH_DATERANGE_FIELD = "search_daterange_mv"


class BaseDriver(ABC):
    """
    Abstract base class of all format drivers.

    Provides:
    - parse_date_range(): abstract, parses one raw date value
    - to_field_map(): abstract, maps a record's dates to output fields
    - safe_to_field_map(): wrapper that never raises
    """

    record_format: str = ""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Args:
            settings: processing settings; the global settings by default
        """
        self.settings = settings or get_settings()

    @abstractmethod
    def parse_date_range(self, raw: str, ctx: Optional[ParseContext] = None) -> Optional[DateRange]:
        """
        Parse a single raw date value of this format.

        Args:
            raw: date text as found in the record
            ctx: parse context; a fresh one is used when omitted

        Returns:
            the DateRange, or None when the value holds no usable date
        """
        pass

    @abstractmethod
    def to_field_map(
        self,
        record: Record,
        ctx: ParseContext,
        base_fields: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Add the record's date fields to the base field map.

        Args:
            record: record with raw date fields
            ctx: parse context for warnings
            base_fields: fields produced by the base driver (titles,
                publishDate); copied, not modified

        Returns:
            the updated field map

        Raises:
            Exception: on unexpected failures (caught by safe_to_field_map)
        """
        pass

    def create_context(self, record: Record, sink: Optional[WarningSink] = None) -> ParseContext:
        ctx = ParseContext(
            source=record.source,
            record_id=record.record_id,
            sink=sink if sink is not None else WarningSink(),
        )
        if self.settings.CURRENT_YEAR is not None:
            ctx.current_year = self.settings.CURRENT_YEAR
        return ctx

    def safe_to_field_map(
        self,
        record: Record,
        base_fields: Optional[Dict[str, Any]] = None,
        sink: Optional[WarningSink] = None,
    ) -> Dict[str, Any]:
        """
        Map dates without letting a failure escape.

        On failure the error is logged, a "date mapping failed" warning is
        recorded and the base fields are returned unchanged.
        """
        ctx = self.create_context(record, sink)
        try:
            return self.to_field_map(record, ctx, base_fields)
        except Exception as e:
            logger.error(
                "Date mapping failed for %s record %s/%s: %s",
                self.record_format, record.source, record.record_id, e, exc_info=True,
            )
            ctx.warn("date mapping failed", str(e))
            return dict(base_fields or {})

    def driver_param(self, record: Record, name: str, default: Any = None) -> Any:
        value = record.driver_params.get(name)
        return default if value in (None, "") else value

    @staticmethod
    def load_models(model: Type[M], values: List[Any]) -> List[M]:
        """Accept model instances or plain dicts for structured fields."""
        return [v if isinstance(v, model) else model.model_validate(v) for v in values]

    @staticmethod
    def add_search_range(fields: Dict[str, Any], date_range: Optional[DateRange]) -> Optional[str]:
        """Append a range to search_daterange_mv and return its canonical string."""
        canonical = date_range_to_str(date_range)
        if canonical:
            fields.setdefault(SEARCH_DATERANGE_FIELD, []).append(canonical)
        return canonical
