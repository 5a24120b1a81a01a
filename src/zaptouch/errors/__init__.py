"""Public error exports for zaptouch."""

from __future__ import annotations

from .exceptions import (
    AccessDeniedError,
    AdjustmentOverflowError,
    AdjustmentUnderflowError,
    ConfigDirNotFoundError,
    EditorCommandError,
    EditorError,
    EditorExitError,
    EditorNotSetError,
    EditorSpawnError,
    FileSystemError,
    LocalTimeError,
    PathNotFoundError,
    PluginLoadError,
    ReferenceFileNotFoundError,
    SetTimesError,
    TemplateError,
    TemplateNotFoundError,
    TemplateRenderError,
    TimeArithmeticError,
    TimeParseError,
    TimeRangeError,
    TimeSyntaxError,
    ZapError,
    map_os_error,
)

__all__ = [
    "ZapError",
    "TimeParseError",
    "TimeSyntaxError",
    "TimeRangeError",
    "LocalTimeError",
    "TimeArithmeticError",
    "AdjustmentOverflowError",
    "AdjustmentUnderflowError",
    "FileSystemError",
    "ReferenceFileNotFoundError",
    "PathNotFoundError",
    "AccessDeniedError",
    "SetTimesError",
    "ConfigDirNotFoundError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateRenderError",
    "PluginLoadError",
    "EditorError",
    "EditorNotSetError",
    "EditorCommandError",
    "EditorSpawnError",
    "EditorExitError",
    "map_os_error",
]
