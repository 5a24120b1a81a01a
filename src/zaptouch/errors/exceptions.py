"""Exception hierarchy and OS error mapping for zaptouch."""

from __future__ import annotations

import errno
from typing import Any, Optional


class ZapError(Exception):
    """
    Base exception for zaptouch.

    Attributes:
        details: Optional structured information (e.g., path, offending input).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


# ----------------------------
# Time parsing
# ----------------------------
class TimeParseError(ZapError):
    """
    Raised when a date, timestamp or adjustment string cannot be parsed.

    The message always names the offending input and a human reason.
    """

    def __init__(
        self,
        value: str,
        reason: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        merged = {"value": value, "reason": reason}
        if details:
            merged.update(details)
        super().__init__(f"invalid time '{value}': {reason}", details=merged, cause=cause)
        self.value = value
        self.reason = reason


class TimeSyntaxError(TimeParseError):
    """Raised when the input does not match the expected format."""


class TimeRangeError(TimeParseError):
    """Raised when a numeric component is out of range (month 13, Feb 30, ...)."""


class LocalTimeError(TimeParseError):
    """Raised when a local wall-clock time is ambiguous or does not exist."""


# ----------------------------
# Time arithmetic
# ----------------------------
class TimeArithmeticError(ZapError):
    """Raised when shifting a time leaves the representable range."""


class AdjustmentOverflowError(TimeArithmeticError):
    """Raised when a time or adjustment grows past the maximum."""


class AdjustmentUnderflowError(TimeArithmeticError):
    """Raised when a time shrinks past the minimum."""


# ----------------------------
# Filesystem
# ----------------------------
class FileSystemError(ZapError):
    """Raised for filesystem failures while processing a path."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        merged: dict[str, Any] = {}
        if path is not None:
            merged["path"] = path
        if details:
            merged.update(details)
        super().__init__(message, details=merged, cause=cause)
        self.path = path


class ReferenceFileNotFoundError(FileSystemError):
    """Raised when the -r reference file does not exist."""


class PathNotFoundError(FileSystemError):
    """Raised when a path (or one of its parents) does not exist."""


class AccessDeniedError(FileSystemError):
    """Raised when the OS refuses access (EACCES/EPERM/EROFS)."""


class SetTimesError(FileSystemError):
    """Raised when file times could not be set."""


class ConfigDirNotFoundError(FileSystemError):
    """Raised when no configuration directory can be determined."""


# ----------------------------
# Templates / plugins
# ----------------------------
class TemplateError(ZapError):
    """Base class for template failures."""


class TemplateNotFoundError(TemplateError):
    """Raised when the named template does not exist."""


class TemplateRenderError(TemplateError):
    """Raised when the template exists but fails to render."""


class PluginLoadError(ZapError):
    """Raised when a template plugin cannot be loaded (logged, never fatal)."""


# ----------------------------
# Editor
# ----------------------------
class EditorError(ZapError):
    """Base class for failures launching $EDITOR."""


class EditorNotSetError(EditorError):
    """Raised when EDITOR is not set."""


class EditorCommandError(EditorError):
    """Raised when EDITOR cannot be parsed into a command."""


class EditorSpawnError(EditorError):
    """Raised when the editor process cannot be started."""


class EditorExitError(EditorError):
    """Raised when the editor exits with a non-zero status."""


_NOT_FOUND_ERRNOS: frozenset[int] = frozenset({errno.ENOENT, errno.ENOTDIR})
_DENIED_ERRNOS: frozenset[int] = frozenset({errno.EACCES, errno.EPERM, errno.EROFS})


def map_os_error(exc: OSError, path: Optional[str] = None) -> FileSystemError:
    """
    Map an OSError to a zaptouch filesystem exception.

    Policy:
        - ENOENT/ENOTDIR -> PathNotFoundError
        - EACCES/EPERM/EROFS -> AccessDeniedError
        - otherwise -> FileSystemError
    """
    target = path if path is not None else (exc.filename and str(exc.filename))
    message = exc.strerror or str(exc)
    details = {"errno": exc.errno}

    if exc.errno in _NOT_FOUND_ERRNOS:
        return PathNotFoundError(message, path=target, details=details, cause=exc)
    if exc.errno in _DENIED_ERRNOS:
        return AccessDeniedError(message, path=target, details=details, cause=exc)

    return FileSystemError(message, path=target, details=details, cause=exc)
