"""
Format drivers: map a record's raw date elements to output fields.
"""

from finna_dates.drivers.base import SEARCH_DATERANGE_FIELD, BaseDriver
from finna_dates.drivers.ead import EadDriver
from finna_dates.drivers.ead3 import Ead3Driver
from finna_dates.drivers.lido import LidoDriver
from finna_dates.drivers.marc import MarcDriver
from finna_dates.drivers.qdc import QdcDriver
from finna_dates.drivers.registry import DriverRegistry

__all__ = [
    "SEARCH_DATERANGE_FIELD",
    "BaseDriver",
    "DriverRegistry",
    "EadDriver",
    "Ead3Driver",
    "LidoDriver",
    "MarcDriver",
    "QdcDriver",
]
