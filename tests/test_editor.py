import subprocess
import unittest

from zaptouch.editor import open_in_editor
from zaptouch.errors import (
    EditorCommandError,
    EditorError,
    EditorExitError,
    EditorNotSetError,
    EditorSpawnError,
)


class _Runner:
    def __init__(self, returncode: int = 0, exc: Exception | None = None) -> None:
        self.calls: list[list[str]] = []
        self._returncode = returncode
        self._exc = exc

    def __call__(self, argv, check=False):
        self.calls.append(list(argv))
        if self._exc is not None:
            raise self._exc
        return subprocess.CompletedProcess(argv, self._returncode)


class TestOpenInEditor(unittest.TestCase):
    def test_runs_editor_with_all_paths(self) -> None:
        runner = _Runner()
        open_in_editor(["a", "b"], environ={"EDITOR": "code --wait"}, runner=runner)
        self.assertEqual(runner.calls, [["code", "--wait", "a", "b"]])

    def test_quoted_editor_path(self) -> None:
        runner = _Runner()
        open_in_editor(["a"], environ={"EDITOR": "'/opt/my editor/bin/ed' -n"}, runner=runner)
        self.assertEqual(runner.calls, [["/opt/my editor/bin/ed", "-n", "a"]])

    def test_not_set(self) -> None:
        for env in ({}, {"EDITOR": ""}, {"EDITOR": "   "}):
            with self.subTest(env=env):
                with self.assertRaises(EditorNotSetError):
                    open_in_editor(["a"], environ=env, runner=_Runner())

    def test_unparseable(self) -> None:
        with self.assertRaises(EditorCommandError):
            open_in_editor(["a"], environ={"EDITOR": "vim 'unterminated"}, runner=_Runner())

    def test_spawn_failure(self) -> None:
        runner = _Runner(exc=FileNotFoundError(2, "No such file or directory"))
        with self.assertRaises(EditorSpawnError) as cm:
            open_in_editor(["a"], environ={"EDITOR": "nope"}, runner=runner)
        self.assertIsInstance(cm.exception, EditorError)

    def test_non_zero_exit(self) -> None:
        with self.assertRaises(EditorExitError) as cm:
            open_in_editor(["a"], environ={"EDITOR": "false"}, runner=_Runner(returncode=3))
        self.assertEqual(cm.exception.details["returncode"], 3)


if __name__ == "__main__":
    unittest.main()
