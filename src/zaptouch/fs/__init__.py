"""Public filesystem exports for zaptouch."""

from __future__ import annotations

from .file_times import read_file_times, read_reference_times, set_file_times
from .snapshot import FileState

__all__ = [
    "FileState",
    "read_file_times",
    "read_reference_times",
    "set_file_times",
]
