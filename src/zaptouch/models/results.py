"""Result models for executing plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional


FileStatus = Literal["success", "skipped", "declined", "failed"]


@dataclass(slots=True)
class FileResult:
    """Result for a single target path."""

    path: str
    status: FileStatus
    file_operation: str

    message: Optional[str] = None
    completed_steps: int = 0

    error_type: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[dict[str, Any]] = None

    @property
    def failed(self) -> bool:
        return self.status == "failed"


@dataclass(slots=True)
class RunResult:
    """Aggregate result for a run over several paths."""

    results: list[FileResult] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        """Non-zero if any file failed outright (declines and skips are not failures)."""
        return 1 if any(r.failed for r in self.results) else 0

    @property
    def summary(self) -> dict[str, int]:
        summary: dict[str, int] = {"success": 0, "skipped": 0, "declined": 0, "failed": 0}
        for r in self.results:
            summary[r.status] = summary.get(r.status, 0) + 1
        return summary
