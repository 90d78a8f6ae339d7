"""
Pytest configuration and shared fixtures.
"""
import logging
import os
import sys
import pytest

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from finna_dates.config import Settings, reset_settings
from finna_dates.dates.context import ParseContext
from finna_dates.logger import DEFAULT_LEVEL, WARNINGS_LOGGER_NAME, set_console_stream, set_level
from finna_dates.sink import WarningSink

# Fixed "now" for the future-date guard
TEST_CURRENT_YEAR = 2026


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test starts and ends with an unloaded settings singleton."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def fresh_logging():
    """Undo logging changes made by the command line tool."""
    yield
    set_console_stream("stdout")
    set_level(DEFAULT_LEVEL)
    set_level(logging.NOTSET, WARNINGS_LOGGER_NAME)


@pytest.fixture
def sink():
    return WarningSink()


@pytest.fixture
def ctx(sink):
    """Parse context for a test record with a fixed current year."""
    return ParseContext(source="test", record_id="rec1", sink=sink, current_year=TEST_CURRENT_YEAR)


@pytest.fixture
def settings():
    return Settings(TITLE_YEAR_RANGE_POLICY="no_match_exists", CURRENT_YEAR=TEST_CURRENT_YEAR)


@pytest.fixture
def marc_008():
    """Build an 008 field from a date type and the 8 date characters."""
    def build(date_type: str, dates: str) -> str:
        return ("000000" + date_type + dates).ljust(40)
    return build
