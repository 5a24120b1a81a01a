"""zaptouch public API."""

from __future__ import annotations

__version__ = "0.1.2"

from zaptouch.config import ZapConfig
from zaptouch.errors import (
    AccessDeniedError,
    AdjustmentOverflowError,
    AdjustmentUnderflowError,
    FileSystemError,
    LocalTimeError,
    PathNotFoundError,
    ReferenceFileNotFoundError,
    TemplateNotFoundError,
    TemplateRenderError,
    TimeParseError,
    TimeRangeError,
    TimeSyntaxError,
    ZapError,
)
from zaptouch.executor import Executor
from zaptouch.fs import FileState, set_file_times
from zaptouch.models import Adjustment, FileResult, FileTimeSpec, Instant, RunResult
from zaptouch.parsing import parse_adjustment, parse_date, parse_timestamp
from zaptouch.plan import (
    Action,
    FileOperation,
    FileOperationKind,
    Planner,
    PlannerOptions,
    TimeOperation,
    TimeOperationKind,
    plan_action,
)
from zaptouch.templates import PluginRegistry, TemplateRenderer

__all__ = [
    "__version__",
    # High-level
    "Executor",
    "Planner",
    "PlannerOptions",
    "plan_action",
    "ZapConfig",
    # Time model / parsing
    "Instant",
    "Adjustment",
    "FileTimeSpec",
    "parse_date",
    "parse_timestamp",
    "parse_adjustment",
    # Plan / Models
    "Action",
    "FileOperation",
    "FileOperationKind",
    "TimeOperation",
    "TimeOperationKind",
    "FileState",
    "FileResult",
    "RunResult",
    "set_file_times",
    # Templates
    "TemplateRenderer",
    "PluginRegistry",
    # Errors
    "ZapError",
    "TimeParseError",
    "TimeSyntaxError",
    "TimeRangeError",
    "LocalTimeError",
    "AdjustmentOverflowError",
    "AdjustmentUnderflowError",
    "FileSystemError",
    "ReferenceFileNotFoundError",
    "PathNotFoundError",
    "AccessDeniedError",
    "TemplateNotFoundError",
    "TemplateRenderError",
]
