"""Open files in $EDITOR."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import Callable, Mapping, Optional, Sequence

from zaptouch.errors import (
    EditorCommandError,
    EditorExitError,
    EditorNotSetError,
    EditorSpawnError,
)

logger = logging.getLogger(__name__)


def open_in_editor(
    paths: Sequence[str],
    *,
    environ: Optional[Mapping[str, str]] = None,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> None:
    """
    Run $EDITOR with all paths and wait for it to exit.

    Raises:
        EditorNotSetError: EDITOR is unset or blank.
        EditorCommandError: EDITOR does not parse into a command.
        EditorSpawnError: the process could not be started.
        EditorExitError: the editor exited with a non-zero status.
    """
    env = os.environ if environ is None else environ
    editor = env.get("EDITOR", "").strip()
    if not editor:
        raise EditorNotSetError("EDITOR environment variable not set")

    try:
        argv = shlex.split(editor)
    except ValueError as exc:
        raise EditorCommandError(
            f"EDITOR command '{editor}' could not be parsed",
            details={"editor": editor},
            cause=exc,
        ) from exc
    if not argv:
        raise EditorCommandError(
            f"EDITOR command '{editor}' could not be parsed (is it empty?)",
            details={"editor": editor},
        )

    logger.debug("Launching editor %s for %d file(s)", argv[0], len(paths))
    try:
        completed = runner([*argv, *paths], check=False)
    except OSError as exc:
        raise EditorSpawnError(
            f"failed to spawn editor '{editor}': {exc}",
            details={"editor": editor},
            cause=exc,
        ) from exc

    if completed.returncode != 0:
        raise EditorExitError(
            f"editor '{editor}' exited with non-zero status: {completed.returncode}",
            details={"editor": editor, "returncode": completed.returncode},
        )
