"""Reading and writing file timestamps."""

from __future__ import annotations

import logging
import os

from zaptouch.errors import ReferenceFileNotFoundError, SetTimesError, map_os_error
from zaptouch.models import FileTimeSpec

logger = logging.getLogger(__name__)


def read_file_times(path: str, *, follow_symlinks: bool = True) -> FileTimeSpec:
    """Read the current access/modification times of path (fresh stat)."""
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as exc:
        raise map_os_error(exc, path) from exc
    return FileTimeSpec.from_stat(st)


def read_reference_times(path: str) -> FileTimeSpec:
    """
    Read times from a -r reference file.

    Raises:
        ReferenceFileNotFoundError: if path does not exist.
    """
    if not os.path.exists(path):
        raise ReferenceFileNotFoundError(f"reference file not found: {path}", path=path)
    return read_file_times(path)


def set_file_times(path: str, times: FileTimeSpec, *, symlink_only: bool = False) -> None:
    """
    Set exactly the present fields of times on path.

    Notes:
        - Both present: a single os.utime call.
        - One present: the other is carried over from the current on-disk value.
        - None present: no-op.
    """
    if times.is_empty:
        return

    follow = not symlink_only
    if times.is_combined:
        access, modification = times.access, times.modification
    else:
        current = read_file_times(path, follow_symlinks=follow)
        access = times.access if times.access is not None else current.access
        modification = (
            times.modification if times.modification is not None else current.modification
        )

    ns = (access.to_ns(), modification.to_ns())  # type: ignore[union-attr]
    logger.debug("utime %s ns=%s follow_symlinks=%s", path, ns, follow)
    try:
        os.utime(path, ns=ns, follow_symlinks=follow)
    except NotImplementedError as exc:
        raise SetTimesError(
            "changing symlink times is not supported on this platform",
            path=path,
            cause=exc,
        ) from exc
    except OverflowError as exc:
        raise SetTimesError(
            "time is out of range for this filesystem",
            path=path,
            cause=exc,
        ) from exc
    except OSError as exc:
        raise map_os_error(exc, path) from exc
