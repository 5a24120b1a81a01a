"""FileState: a one-time snapshot of a target path taken at planning time."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from zaptouch.errors import map_os_error
from zaptouch.models import FileTimeSpec


@dataclass(frozen=True, slots=True)
class FileState:
    """
    Existence and metadata of a path, captured once.

    Notes:
        - The planner never re-queries the filesystem; it works on this value.
        - With follow_symlinks=False a dangling symlink counts as existing.
    """

    path: str
    exists: bool
    is_symlink: bool = False
    times: Optional[FileTimeSpec] = None

    @classmethod
    def capture(cls, path: str, *, follow_symlinks: bool = True) -> FileState:
        """
        Stat path once.

        Raises:
            FileSystemError: for failures other than "does not exist".
        """
        is_symlink = os.path.islink(path)
        try:
            st = os.stat(path, follow_symlinks=follow_symlinks)
        except (FileNotFoundError, NotADirectoryError):
            return cls(path=path, exists=False, is_symlink=is_symlink)
        except OSError as exc:
            raise map_os_error(exc, path) from exc

        return cls(
            path=path,
            exists=True,
            is_symlink=is_symlink,
            times=FileTimeSpec.from_stat(st),
        )

    @classmethod
    def absent(cls, path: str) -> FileState:
        return cls(path=path, exists=False)

    @classmethod
    def present(cls, path: str, times: Optional[FileTimeSpec] = None) -> FileState:
        return cls(path=path, exists=True, times=times)
