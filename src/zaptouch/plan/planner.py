"""Planner: flags + file state -> ordered Action (no I/O beyond the snapshot)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from zaptouch.fs import FileState
from zaptouch.models import Adjustment, FileTimeSpec, Instant

from .action_plan import Action
from .actions import FileOperationKind, TimeOperationKind
from .operation import FileOperation, TimeOperation

logger = logging.getLogger(__name__)

SKIP_REASON: str = "does not exist and creation suppressed"

# (exists, no_create, has_template) -> file operation.
# Every combination is listed so no input falls through.
FILE_DECISIONS: dict[tuple[bool, bool, bool], FileOperationKind] = {
    (False, True, False): FileOperationKind.SKIP,
    (False, True, True): FileOperationKind.SKIP,
    (False, False, True): FileOperationKind.CREATE_WITH_TEMPLATE,
    (False, False, False): FileOperationKind.CREATE_EMPTY,
    (True, True, True): FileOperationKind.OVERWRITE_WITH_TEMPLATE,
    (True, False, True): FileOperationKind.OVERWRITE_WITH_TEMPLATE,
    (True, True, False): FileOperationKind.NONE,
    (True, False, False): FileOperationKind.NONE,
}


@dataclass(frozen=True, slots=True)
class PlannerOptions:
    """Recognized flags that shape a plan."""

    no_create: bool = False
    adjust: Optional[Adjustment] = None
    template_name: Optional[str] = None
    template_context: Optional[str] = None
    update_access: bool = True
    update_modification: bool = True
    symlink_only: bool = False
    create_intermediate_dirs: bool = False

    @staticmethod
    def selection_from_flags(access_only: bool, modification_only: bool) -> tuple[bool, bool]:
        """Map -a/-m to (update_access, update_modification); neither or both means both."""
        return (access_only or not modification_only, modification_only or not access_only)


def decide_file_operation(
    exists: bool,
    no_create: bool,
    has_template: bool,
) -> FileOperationKind:
    return FILE_DECISIONS[(exists, no_create, has_template)]


def plan_action(
    state: FileState,
    options: PlannerOptions,
    explicit_times: Optional[FileTimeSpec] = None,
    *,
    clock: Callable[[], Instant] = Instant.now,
) -> Action:
    """
    Build the Action for one path.

    Args:
        state: Snapshot of the path taken once before planning.
        options: Flags.
        explicit_times: Resolved -d/-t/-r time source, or None for "now".
        clock: Source of "now" when no explicit time is given.

    Rules:
        - SKIP has no time operations.
        - Creation/overwrite always sets times.
        - An existing untouched file sets times unless only an adjustment
          was requested.
        - An adjustment is always the last step.
    """
    has_template = bool(options.template_name)
    kind = decide_file_operation(state.exists, options.no_create, has_template)

    if kind is FileOperationKind.SKIP:
        action = Action(
            path=state.path,
            file_operation=FileOperation(kind=kind, reason=SKIP_REASON),
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("planned %s", action.to_dict())
        return action

    file_op = FileOperation(
        kind=kind,
        template_name=options.template_name if has_template else None,
        template_context=options.template_context if has_template else None,
        create_intermediate_dirs=options.create_intermediate_dirs,
    )

    time_ops: list[TimeOperation] = []
    wants_set = (
        file_op.writes_content
        or options.adjust is None
        or explicit_times is not None
    )
    if wants_set:
        base = explicit_times if explicit_times is not None else FileTimeSpec.from_instant(clock())
        time_ops.append(
            TimeOperation(
                kind=TimeOperationKind.SET_TIMES,
                times=base.with_selection(options.update_access, options.update_modification),
                update_access=options.update_access,
                update_modification=options.update_modification,
                symlink_only=options.symlink_only,
            )
        )

    if options.adjust is not None:
        time_ops.append(
            TimeOperation(
                kind=TimeOperationKind.ADJUST_TIMES,
                adjustment=options.adjust,
                update_access=options.update_access,
                update_modification=options.update_modification,
                symlink_only=options.symlink_only,
            )
        )

    action = Action(path=state.path, file_operation=file_op, time_operations=time_ops)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("planned %s", action.to_dict())
    return action


class Planner:
    """Binds PlannerOptions; snapshots each path once and plans it."""

    def __init__(
        self,
        options: PlannerOptions,
        *,
        clock: Callable[[], Instant] = Instant.now,
    ) -> None:
        self.options = options
        self._clock = clock

    def snapshot(self, path: str) -> FileState:
        return FileState.capture(path, follow_symlinks=not self.options.symlink_only)

    def plan(self, path: str, explicit_times: Optional[FileTimeSpec] = None) -> Action:
        return plan_action(
            self.snapshot(path),
            self.options,
            explicit_times,
            clock=self._clock,
        )
