"""Public model exports for zaptouch."""

from __future__ import annotations

from .file_time_spec import FileTimeSpec
from .instant import MAX_SECONDS, MIN_SECONDS, NANOS_PER_SECOND, Adjustment, Instant
from .results import FileResult, FileStatus, RunResult

__all__ = [
    "Instant",
    "Adjustment",
    "FileTimeSpec",
    "FileStatus",
    "FileResult",
    "RunResult",
    "MIN_SECONDS",
    "MAX_SECONDS",
    "NANOS_PER_SECOND",
]
