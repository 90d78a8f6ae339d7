"""
Driver Registry Module
======================

Maps a record format to the driver that normalizes its dates. Callers only
name the format; the registry picks the driver.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from finna_dates.config import Settings, get_settings
from finna_dates.dates.context import ParseContext
from finna_dates.drivers.base import BaseDriver
from finna_dates.drivers.ead import EadDriver
from finna_dates.drivers.ead3 import Ead3Driver
from finna_dates.drivers.lido import LidoDriver
from finna_dates.drivers.marc import MarcDriver
from finna_dates.drivers.qdc import QdcDriver
from finna_dates.ir import DateRange, Record
from finna_dates.logger import get_logger
from finna_dates.sink import WarningSink

logger = get_logger(__name__)


# Signature: (settings) -> BaseDriver
DriverFactory = Callable[[Settings], BaseDriver]


class DriverRegistry:
    """
    Driver registry: record format -> driver.

    Built-in drivers are registered on construction; callers may override or
    extend them with register.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._drivers: Dict[str, BaseDriver] = {}
        self._register_defaults()

    # -- public API ----------------------------------------------------------

    def register(self, record_format: str, factory: DriverFactory) -> None:
        """Register or replace the driver of a record format."""
        self._drivers[record_format.lower()] = factory(self._settings)

    def get(self, record_format: str) -> Optional[BaseDriver]:
        return self._drivers.get((record_format or "").lower())

    def formats(self) -> List[str]:
        return sorted(self._drivers)

    def parse_date_range(
        self,
        record_format: str,
        raw: str,
        ctx: Optional[ParseContext] = None,
    ) -> Optional[DateRange]:
        """Parse one raw date value with the driver of a format."""
        driver = self.get(record_format)
        if driver is None:
            logger.warning("No driver for record_format=%s", record_format)
            return None
        return driver.parse_date_range(raw, ctx)

    def to_field_map(
        self,
        record: Record,
        base_fields: Optional[Dict[str, Any]] = None,
        sink: Optional[WarningSink] = None,
    ) -> Dict[str, Any]:
        """Dispatch a record to its driver; unknown formats keep the base fields."""
        driver = self.get(record.record_format)
        if driver is None:
            logger.warning(
                "No driver for record_format=%s (%s/%s)",
                record.record_format, record.source, record.record_id,
            )
            return dict(base_fields or {})
        return driver.safe_to_field_map(record, base_fields, sink)

    # -- built-in drivers ----------------------------------------------------

    def _register_defaults(self) -> None:
        self.register("ead", EadDriver)
        self.register("ead3", Ead3Driver)
        self.register("lido", LidoDriver)
        self.register("marc", MarcDriver)
        for record_format in ("qdc", "lrmi", "aipa"):
            self.register(record_format, lambda settings, f=record_format: QdcDriver(settings, f))
