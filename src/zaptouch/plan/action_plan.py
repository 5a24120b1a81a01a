"""Action: the ordered plan for one target path."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .actions import TimeOperationKind
from .operation import FileOperation, TimeOperation


@dataclass(slots=True)
class Action:
    """One file operation followed by zero or more time operations, in order."""

    path: str
    file_operation: FileOperation
    time_operations: list[TimeOperation] = field(default_factory=list)

    def count(self, kind: TimeOperationKind) -> int:
        return sum(1 for op in self.time_operations if op.kind is kind)

    def validate_required_fields(self) -> None:
        """Validate every step. Raises ValueError."""
        self.file_operation.validate_required_fields()
        for op in self.time_operations:
            op.validate_required_fields()

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "file_operation": self.file_operation.to_dict(),
            "time_operations": [op.to_dict() for op in self.time_operations],
        }
