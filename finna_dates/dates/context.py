"""
Per-call parse context and the never-raise boundary for parse entry points.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional, TypeVar

from pydantic import ValidationError

from finna_dates.config import get_settings
from finna_dates.logger import get_logger
from finna_dates.sink import WarningSink

logger = get_logger(__name__)

T = TypeVar("T")


def current_year() -> int:
    """
    The configured CURRENT_YEAR, or the current UTC year.

    Settings that fail validation do not stop date parsing; the UTC year is
    used and the failure is logged.
    """
    try:
        configured = get_settings().CURRENT_YEAR
    except ValidationError as e:
        logger.warning("Settings could not be loaded, using the UTC year: %s", e)
        configured = None
    if configured is not None:
        return configured
    return datetime.now(timezone.utc).year


@dataclass
class ParseContext:
    """
    Everything a parse call needs besides its input.

    Attributes:
        source: data source identifier, for warnings
        record_id: record identifier, for warnings
        sink: receives non-fatal warnings
        current_year: upper bound for the future-date guard
    """
    source: str = ""
    record_id: str = ""
    sink: WarningSink = field(default_factory=WarningSink)
    current_year: int = field(default_factory=current_year)

    def warn(self, kind: str, message: str = "") -> None:
        self.sink.log_warning(self.source, self.record_id, kind, message)


def safe_parse(func: Callable[..., Optional[T]]) -> Callable[..., Optional[T]]:
    """
    Wrap a parse entry point so that it never raises.

    The wrapped function takes (raw, ctx=None); a missing context is created.
    An unexpected exception is logged, reported as a "date parsing failed"
    warning and turned into None.
    """

    @functools.wraps(func)
    def wrapper(raw, ctx: Optional[ParseContext] = None, *args, **kwargs):
        if ctx is None:
            ctx = ParseContext()
        try:
            return func(raw, ctx, *args, **kwargs)
        except Exception as e:
            logger.error("Date parsing failed for %r (%s/%s): %s", raw, ctx.source, ctx.record_id, e, exc_info=True)
            ctx.warn("date parsing failed", f"{raw!r}: {e}")
            return None

    return wrapper
