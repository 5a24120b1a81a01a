import os
import tempfile
import time
import unittest
from unittest import mock

from zaptouch.config import ZapConfig
from zaptouch.executor import Executor
from zaptouch.models import MAX_SECONDS, Adjustment, FileTimeSpec, Instant
from zaptouch.plan import Planner, PlannerOptions
from zaptouch.templates import TemplateRenderer


class _Confirm:
    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, message: str) -> bool:
        self.prompts.append(message)
        return self.answers.pop(0)


class TestExecutor(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name
        self.config = ZapConfig(config_dir=os.path.join(self.tmp, "config"))
        os.makedirs(self.config.templates_dir)
        with open(self.config.template_path("hello.txt"), "w", encoding="utf-8") as fh:
            fh.write("Hello, {{ name }}!\n")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def path(self, *parts: str) -> str:
        return os.path.join(self.tmp, *parts)

    def make_file(self, name: str, text: str = "", ns: tuple[int, int] = (1_000_000_000, 2_000_000_000)) -> str:
        path = self.path(name)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.utime(path, ns=ns)
        return path

    def executor(self, confirm=None, **options) -> Executor:
        return Executor(
            Planner(PlannerOptions(**options)),
            confirm=confirm or _Confirm(),
            renderer_factory=lambda: TemplateRenderer.from_config(self.config),
        )

    def test_creates_empty_file_with_current_time(self) -> None:
        target = self.path("new.txt")
        before = time.time_ns()
        result = self.executor().process(target)
        after = time.time_ns()

        self.assertEqual(result.status, "success")
        self.assertEqual(result.file_operation, "CREATE_EMPTY")
        self.assertEqual(os.path.getsize(target), 0)
        st = os.stat(target)
        self.assertEqual(st.st_atime_ns, st.st_mtime_ns)
        self.assertLessEqual(before // 1_000_000_000, st.st_mtime_ns // 1_000_000_000)
        self.assertLessEqual(st.st_mtime_ns // 1_000_000_000, after // 1_000_000_000)

    def test_existing_file_content_untouched(self) -> None:
        target = self.make_file("a.txt", "keep")
        explicit = FileTimeSpec.from_instant(Instant(1_600_000_000))
        result = self.executor().process(target, explicit)

        self.assertEqual(result.status, "success")
        self.assertEqual(result.completed_steps, 1)
        with open(target, encoding="utf-8") as fh:
            self.assertEqual(fh.read(), "keep")
        self.assertEqual(os.stat(target).st_mtime_ns, 1_600_000_000 * 1_000_000_000)

    def test_adjust_access_only(self) -> None:
        target = self.make_file("a.txt")
        executor = self.executor(
            adjust=Adjustment(3600), update_access=True, update_modification=False
        )
        result = executor.process(target)

        self.assertEqual(result.status, "success")
        st = os.stat(target)
        self.assertEqual(st.st_atime_ns, 3601_000_000_000)
        self.assertEqual(st.st_mtime_ns, 2_000_000_000)

    def test_explicit_time_then_adjust(self) -> None:
        target = self.make_file("a.txt")
        explicit = FileTimeSpec.from_instant(Instant(1_000_000))
        result = self.executor(adjust=Adjustment(-60)).process(target, explicit)

        self.assertEqual(result.completed_steps, 2)
        st = os.stat(target)
        self.assertEqual(st.st_atime_ns, 999_940 * 1_000_000_000)
        self.assertEqual(st.st_mtime_ns, 999_940 * 1_000_000_000)

    def test_no_create_skips(self) -> None:
        target = self.path("missing.txt")
        result = self.executor(no_create=True).process(target)
        self.assertEqual(result.status, "skipped")
        self.assertEqual(result.message, "does not exist and creation suppressed")
        self.assertFalse(os.path.exists(target))

    def test_create_with_template(self) -> None:
        target = self.path("greeting.txt")
        result = self.executor(template_name="hello.txt", template_context="name=world").process(target)
        self.assertEqual(result.status, "success")
        self.assertEqual(result.file_operation, "CREATE_WITH_TEMPLATE")
        with open(target, encoding="utf-8") as fh:
            self.assertEqual(fh.read(), "Hello, world!\n")

    def test_overwrite_confirmed(self) -> None:
        target = self.make_file("a.txt", "old")
        confirm = _Confirm(True)
        result = self.executor(confirm, template_name="hello.txt", template_context="name=x").process(target)

        self.assertEqual(result.status, "success")
        self.assertIn("already exists", confirm.prompts[0])
        with open(target, encoding="utf-8") as fh:
            self.assertEqual(fh.read(), "Hello, x!\n")

    def test_overwrite_declined_leaves_file(self) -> None:
        target = self.make_file("a.txt", "old")
        result = self.executor(_Confirm(False), template_name="hello.txt").process(target)

        self.assertEqual(result.status, "declined")
        self.assertEqual(result.message, "overwrite declined")
        with open(target, encoding="utf-8") as fh:
            self.assertEqual(fh.read(), "old")
        self.assertEqual(os.stat(target).st_mtime_ns, 2_000_000_000)

    def test_parent_directory_prompt(self) -> None:
        target = self.path("sub", "dir", "new.txt")
        confirm = _Confirm(True)
        result = self.executor(confirm).process(target)
        self.assertEqual(result.status, "success")
        self.assertIn("doesn't exist", confirm.prompts[0])
        self.assertTrue(os.path.isfile(target))

    def test_parent_directory_declined(self) -> None:
        target = self.path("sub", "new.txt")
        result = self.executor(_Confirm(False)).process(target)
        self.assertEqual(result.status, "declined")
        self.assertFalse(os.path.exists(self.path("sub")))

    def test_create_intermediate_dirs_does_not_prompt(self) -> None:
        target = self.path("a", "b", "c.txt")
        confirm = _Confirm()
        result = self.executor(confirm, create_intermediate_dirs=True).process(target)
        self.assertEqual(result.status, "success")
        self.assertEqual(confirm.prompts, [])
        self.assertTrue(os.path.isfile(target))

    def test_template_not_found_creates_nothing(self) -> None:
        target = self.path("x.txt")
        result = self.executor(template_name="missing").process(target)
        self.assertEqual(result.status, "failed")
        self.assertEqual(result.error_type, "TemplateNotFoundError")
        self.assertEqual(result.completed_steps, 0)
        self.assertFalse(os.path.exists(target))

    def test_adjust_overflow_is_reported(self) -> None:
        target = self.make_file("a.txt")
        on_disk = FileTimeSpec.from_instant(Instant(MAX_SECONDS - 10))
        with mock.patch("zaptouch.executor.read_file_times", return_value=on_disk):
            result = self.executor(adjust=Adjustment(60)).process(target)

        self.assertEqual(result.status, "failed")
        self.assertEqual(result.error_type, "AdjustmentOverflowError")
        self.assertEqual(result.completed_steps, 0)
        self.assertEqual(os.stat(target).st_mtime_ns, 2_000_000_000)

    def test_undecodable_template_fails_each_path(self) -> None:
        with open(self.config.template_path("bad"), "wb") as fh:
            fh.write(b"\xff\xfe hello")
        first, second = self.path("a.txt"), self.path("b.txt")

        run = self.executor(template_name="bad").run([first, second])

        self.assertEqual([r.status for r in run.results], ["failed", "failed"])
        self.assertEqual(run.results[0].error_type, "TemplateRenderError")
        self.assertFalse(os.path.exists(first))
        self.assertFalse(os.path.exists(second))

    def test_parent_that_is_a_file_fails_without_prompt(self) -> None:
        self.make_file("blocker")
        confirm = _Confirm()
        result = self.executor(confirm).process(self.path("blocker", "child.txt"))

        self.assertEqual(result.status, "failed")
        self.assertEqual(result.error_type, "FileSystemError")
        self.assertEqual(confirm.prompts, [])

    def test_run_continues_after_failure(self) -> None:
        good = self.path("good.txt")
        bad = self.path("blocker", "child.txt")
        self.make_file("blocker")
        run = self.executor(create_intermediate_dirs=True).run([bad, good])

        self.assertEqual([r.status for r in run.results], ["failed", "success"])
        self.assertEqual(run.exit_code, 1)
        self.assertTrue(os.path.exists(good))


if __name__ == "__main__":
    unittest.main()
