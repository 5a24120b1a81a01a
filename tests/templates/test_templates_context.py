import unittest

from zaptouch.templates import parse_context


class TestParseContext(unittest.TestCase):
    def test_pairs(self) -> None:
        self.assertEqual(parse_context("name=world, greeting = hi"), {"name": "world", "greeting": "hi"})

    def test_splits_on_first_equals(self) -> None:
        self.assertEqual(parse_context("expr=a=b"), {"expr": "a=b"})

    def test_skips_pairs_without_equals(self) -> None:
        self.assertEqual(parse_context("a=1,junk,,b=2"), {"a": "1", "b": "2"})

    def test_empty(self) -> None:
        self.assertEqual(parse_context(None), {})
        self.assertEqual(parse_context(""), {})

    def test_last_value_wins(self) -> None:
        self.assertEqual(parse_context("a=1,a=2"), {"a": "2"})


if __name__ == "__main__":
    unittest.main()
