"""Public plan exports for zaptouch."""

from __future__ import annotations

from .action_plan import Action
from .actions import CREATING_KINDS, TEMPLATE_KINDS, FileOperationKind, TimeOperationKind
from .operation import FileOperation, TimeOperation
from .planner import (
    FILE_DECISIONS,
    SKIP_REASON,
    Planner,
    PlannerOptions,
    decide_file_operation,
    plan_action,
)

__all__ = [
    "Action",
    "FileOperation",
    "TimeOperation",
    "FileOperationKind",
    "TimeOperationKind",
    "CREATING_KINDS",
    "TEMPLATE_KINDS",
    "FILE_DECISIONS",
    "SKIP_REASON",
    "Planner",
    "PlannerOptions",
    "decide_file_operation",
    "plan_action",
]
