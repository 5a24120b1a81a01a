"""Plan step models (explicit fields; no args dict)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from zaptouch.models import Adjustment, FileTimeSpec

from .actions import CREATING_KINDS, TEMPLATE_KINDS, FileOperationKind, TimeOperationKind


@dataclass(frozen=True, slots=True)
class FileOperation:
    """The single file-content step of an Action."""

    kind: FileOperationKind

    reason: Optional[str] = None
    template_name: Optional[str] = None
    template_context: Optional[str] = None
    create_intermediate_dirs: bool = False

    @property
    def writes_content(self) -> bool:
        return self.kind in CREATING_KINDS

    def validate_required_fields(self) -> None:
        """Validate required fields according to kind. Raises ValueError."""
        if self.kind is FileOperationKind.SKIP:
            _require(self.reason, "reason")
            return

        if self.kind in TEMPLATE_KINDS:
            _require(self.template_name, "template_name")
            return

        if self.kind in (FileOperationKind.CREATE_EMPTY, FileOperationKind.NONE):
            return

        raise ValueError(f"Unsupported file operation: {self.kind}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "reason": self.reason,
            "template_name": self.template_name,
            "template_context": self.template_context,
            "create_intermediate_dirs": self.create_intermediate_dirs,
        }


@dataclass(frozen=True, slots=True)
class TimeOperation:
    """
    A timestamp step of an Action.

    SET_TIMES carries the already-selected FileTimeSpec. ADJUST_TIMES carries
    the delta and the selection; the executor reads the current on-disk times
    right before applying it.
    """

    kind: TimeOperationKind

    times: Optional[FileTimeSpec] = None
    adjustment: Optional[Adjustment] = None
    update_access: bool = True
    update_modification: bool = True
    symlink_only: bool = False

    def validate_required_fields(self) -> None:
        """Validate required fields according to kind. Raises ValueError."""
        if self.kind is TimeOperationKind.SET_TIMES:
            _require(self.times, "times")
            return

        if self.kind is TimeOperationKind.ADJUST_TIMES:
            _require(self.adjustment, "adjustment")
            return

        raise ValueError(f"Unsupported time operation: {self.kind}")

    def to_dict(self) -> dict[str, Any]:
        times = None
        if self.times is not None:
            times = {
                "access": self.times.access.isoformat() if self.times.access else None,
                "modification": (
                    self.times.modification.isoformat() if self.times.modification else None
                ),
            }
        return {
            "kind": self.kind.value,
            "times": times,
            "adjustment": self.adjustment.seconds if self.adjustment else None,
            "update_access": self.update_access,
            "update_modification": self.update_modification,
            "symlink_only": self.symlink_only,
        }


def _require(value: object, field_name: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"Missing required field: {field_name}")
