import os
import tempfile
import unittest

from zaptouch.errors import AdjustmentOverflowError
from zaptouch.models import MAX_SECONDS, Adjustment, FileTimeSpec, Instant


class TestFileTimeSpec(unittest.TestCase):
    def test_from_instant_sets_both(self) -> None:
        inst = Instant(100, 1)
        spec = FileTimeSpec.from_instant(inst)
        self.assertEqual(spec.access, inst)
        self.assertEqual(spec.modification, inst)
        self.assertTrue(spec.is_combined)
        self.assertFalse(spec.is_empty)

    def test_now_fields_are_equal(self) -> None:
        spec = FileTimeSpec.now()
        self.assertIsNotNone(spec.access)
        self.assertEqual(spec.access, spec.modification)

    def test_from_stat_keeps_distinct_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "ref")
            open(path, "w").close()
            os.utime(path, ns=(1_000_000_000_123, 2_000_000_000_456))

            spec = FileTimeSpec.from_stat(os.stat(path))

        self.assertEqual(spec.access, Instant.from_ns(1_000_000_000_123))
        self.assertEqual(spec.modification, Instant.from_ns(2_000_000_000_456))

    def test_with_selection_clears_modification(self) -> None:
        spec = FileTimeSpec(Instant(1), Instant(2))
        selected = spec.with_selection(True, False)
        self.assertEqual(selected, FileTimeSpec(Instant(1), None))
        self.assertEqual(selected.with_selection(True, False), selected)

    def test_with_selection_clears_access(self) -> None:
        spec = FileTimeSpec(Instant(1), Instant(2))
        self.assertEqual(spec.with_selection(False, True), FileTimeSpec(None, Instant(2)))
        self.assertTrue(spec.with_selection(False, False).is_empty)

    def test_with_selection_never_fills_absent(self) -> None:
        spec = FileTimeSpec(None, Instant(2))
        self.assertEqual(spec.with_selection(True, True), spec)

    def test_adjusted_by_shifts_present_only(self) -> None:
        spec = FileTimeSpec(Instant(10, 5), None)
        adjusted = spec.adjusted_by(Adjustment(-3))
        self.assertEqual(adjusted, FileTimeSpec(Instant(7, 5), None))

    def test_selection_and_adjustment_commute(self) -> None:
        spec = FileTimeSpec(Instant(10), Instant(20))
        adj = Adjustment(3600)
        self.assertEqual(
            spec.with_selection(True, False).adjusted_by(adj),
            spec.adjusted_by(adj).with_selection(True, False),
        )

    def test_adjusted_by_propagates_overflow(self) -> None:
        spec = FileTimeSpec(Instant(0), Instant(MAX_SECONDS))
        with self.assertRaises(AdjustmentOverflowError):
            spec.adjusted_by(Adjustment(1))


if __name__ == "__main__":
    unittest.main()
