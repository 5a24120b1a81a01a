"""Executor: walks a planned Action and performs its effects in order."""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterable, Optional

from zaptouch.errors import FileSystemError, ZapError, map_os_error
from zaptouch.fs import read_file_times, set_file_times
from zaptouch.models import FileResult, FileTimeSpec, RunResult
from zaptouch.plan import (
    Action,
    FileOperation,
    FileOperationKind,
    Planner,
    TimeOperation,
    TimeOperationKind,
)
from zaptouch.templates import TemplateRenderer, parse_context

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]
RendererFactory = Callable[[], TemplateRenderer]


class Executor:
    """
    Plan -> execute, one path at a time.

    Policy:
        - A failure aborts the remaining steps for that path only.
        - A "no" at a confirmation prompt is a declined outcome, not a failure.
        - run() always continues with the next path.
    """

    def __init__(
        self,
        planner: Planner,
        *,
        confirm: ConfirmFn,
        renderer_factory: Optional[RendererFactory] = None,
    ) -> None:
        self.planner = planner
        self._confirm = confirm
        self._renderer_factory = renderer_factory
        self._renderer: Optional[TemplateRenderer] = None

    def run(
        self,
        paths: Iterable[str],
        explicit_times: Optional[FileTimeSpec] = None,
    ) -> RunResult:
        run = RunResult()
        for path in paths:
            run.results.append(self.process(path, explicit_times))
        return run

    def process(self, path: str, explicit_times: Optional[FileTimeSpec] = None) -> FileResult:
        """Snapshot, plan and execute one path."""
        try:
            action = self.planner.plan(path, explicit_times)
        except ZapError as exc:
            return _failed_result(path, "UNPLANNED", exc, 0)
        return self.execute(action)

    def execute(self, action: Action) -> FileResult:
        """Execute one Action. Raises ValueError only for a malformed Action."""
        action.validate_required_fields()
        file_op = action.file_operation
        path = action.path

        if file_op.kind is FileOperationKind.SKIP:
            logger.info("Skipping %s: %s", path, file_op.reason)
            return FileResult(
                path=path,
                status="skipped",
                file_operation=file_op.kind.value,
                message=file_op.reason,
            )

        completed = 0
        try:
            declined = self._apply_file_operation(path, file_op)
            if declined is not None:
                logger.info("Declined %s: %s", path, declined)
                return FileResult(
                    path=path,
                    status="declined",
                    file_operation=file_op.kind.value,
                    message=declined,
                )
            if file_op.kind is not FileOperationKind.NONE:
                completed += 1

            for op in action.time_operations:
                self._apply_time_operation(path, op)
                completed += 1
        except ZapError as exc:
            return _failed_result(path, file_op.kind.value, exc, completed)
        except OSError as exc:
            return _failed_result(path, file_op.kind.value, map_os_error(exc, path), completed)

        return FileResult(
            path=path,
            status="success",
            file_operation=file_op.kind.value,
            completed_steps=completed,
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _apply_file_operation(self, path: str, op: FileOperation) -> Optional[str]:
        """Perform the file step. Returns a message if the user declined."""
        if op.kind is FileOperationKind.NONE:
            return None

        if op.kind is FileOperationKind.OVERWRITE_WITH_TEMPLATE:
            if not self._confirm(f"File '{path}' already exists. Do you want to overwrite it?"):
                return "overwrite declined"
            self._write_template(path, op)
            return None

        declined = self._ensure_parent_directory(path, op.create_intermediate_dirs)
        if declined is not None:
            return declined

        if op.kind is FileOperationKind.CREATE_EMPTY:
            logger.debug("Creating empty file %s", path)
            with open(path, "ab"):
                pass
            return None

        if op.kind is FileOperationKind.CREATE_WITH_TEMPLATE:
            self._write_template(path, op)
            return None

        raise ValueError(f"Unsupported file operation: {op.kind}")

    def _apply_time_operation(self, path: str, op: TimeOperation) -> None:
        if op.kind is TimeOperationKind.SET_TIMES:
            set_file_times(path, op.times, symlink_only=op.symlink_only)  # type: ignore[arg-type]
            return

        if op.kind is TimeOperationKind.ADJUST_TIMES:
            # Always relative to what is on disk now, not to earlier steps' inputs.
            current = read_file_times(path, follow_symlinks=not op.symlink_only)
            adjusted = current.with_selection(op.update_access, op.update_modification).adjusted_by(
                op.adjustment  # type: ignore[arg-type]
            )
            set_file_times(path, adjusted, symlink_only=op.symlink_only)
            return

        raise ValueError(f"Unsupported time operation: {op.kind}")

    def _ensure_parent_directory(self, path: str, force: bool) -> Optional[str]:
        parent = os.path.dirname(path)
        if not parent or os.path.isdir(parent):
            return None
        if os.path.exists(parent):
            raise FileSystemError(
                f"parent path is not a directory: {parent}",
                path=parent,
                details={"target": path},
            )

        if not force and not self._confirm(f"The directory '{parent}' doesn't exist. Create it?"):
            return f"directory creation declined: {parent}"

        logger.debug("Creating directory %s", parent)
        os.makedirs(parent, exist_ok=True)
        return None

    def _write_template(self, path: str, op: FileOperation) -> None:
        # Render before touching the file so a bad template leaves it alone.
        text = self._get_renderer().render(
            op.template_name,  # type: ignore[arg-type]
            parse_context(op.template_context),
        )
        logger.debug("Writing template %s to %s", op.template_name, path)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)

    def _get_renderer(self) -> TemplateRenderer:
        if self._renderer is None:
            if self._renderer_factory is None:
                raise ZapError("templates are not configured")
            self._renderer = self._renderer_factory()
        return self._renderer


def _failed_result(path: str, file_operation: str, exc: ZapError, completed: int) -> FileResult:
    return FileResult(
        path=path,
        status="failed",
        file_operation=file_operation,
        completed_steps=completed,
        message=str(exc),
        error_type=exc.__class__.__name__,
        error_message=str(exc),
        error_details=getattr(exc, "details", None),
    )
