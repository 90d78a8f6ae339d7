"""
Date range normalization for library, archive and museum metadata records.
"""

from finna_dates.config import Settings, get_settings
from finna_dates.drivers import DriverRegistry
from finna_dates.ir import DateRange, Record
from finna_dates.sink import ProcessingWarning, WarningSink

__version__ = "0.1.0"

__all__ = [
    "DateRange",
    "DriverRegistry",
    "ProcessingWarning",
    "Record",
    "Settings",
    "WarningSink",
    "get_settings",
]
