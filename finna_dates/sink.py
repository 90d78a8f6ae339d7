"""
Warning sink for non-fatal processing issues.

Each record conversion gets its own sink; parsers report through it and
never raise to their caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from finna_dates.logger import get_warnings_logger

logger = get_warnings_logger()


@dataclass(frozen=True)
class ProcessingWarning:
    """
    A single warning recorded while converting a record.

    Attributes:
        source: data source identifier
        record_id: record identifier
        kind: short machine-readable kind, e.g. "invalid date range"
        message: details, usually including the offending value
    """
    source: str
    record_id: str
    kind: str
    message: str = ""


@dataclass
class WarningSink:
    """Append-only collector of ProcessingWarning entries."""

    warnings: List[ProcessingWarning] = field(default_factory=list)

    def log_warning(self, source: str, record_id: str, kind: str, message: str = "") -> None:
        self.warnings.append(ProcessingWarning(source or "", record_id or "", kind, message or ""))
        logger.debug("%s/%s: %s: %s", source, record_id, kind, message)

    def kinds(self) -> List[str]:
        return [w.kind for w in self.warnings]

    def clear(self) -> None:
        self.warnings.clear()
