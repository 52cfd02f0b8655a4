from __future__ import annotations

import numbers
import unittest

from dict_blocks import BlockMapping, BlockArgumentError, ValueKind


class BlockMappingTests(unittest.TestCase):
    def test_construction_keeps_insertion_order(self) -> None:
        m = BlockMapping({"b": 2, "a": 1}, c=3)
        self.assertEqual(list(m), ["b", "a", "c"])
        self.assertEqual(len(m), 3)
        self.assertIn("a", m)
        self.assertEqual(m["c"], 3)

    def test_source_changes_do_not_leak_in(self) -> None:
        source = {"a": 1}
        m = BlockMapping(source)
        source["b"] = 2
        self.assertNotIn("b", m)

    def test_is_read_only(self) -> None:
        m = BlockMapping(a=1)
        with self.assertRaises(TypeError):
            m["a"] = 2  # type: ignore[index]
        with self.assertRaises(AttributeError):
            m.extra = 1  # type: ignore[attr-defined]

    def test_equality_and_hash(self) -> None:
        self.assertEqual(BlockMapping(a=1), {"a": 1})
        self.assertEqual(hash(BlockMapping(a=1, b=2)), hash(BlockMapping(b=2, a=1)))
        with self.assertRaises(TypeError):
            hash(BlockMapping(a=[1]))

    def test_repr(self) -> None:
        self.assertEqual(repr(BlockMapping(a=1)), "BlockMapping({'a': 1})")

    def test_wrap(self) -> None:
        m = BlockMapping(a=1)
        self.assertIs(BlockMapping.wrap(m), m)
        self.assertEqual(BlockMapping.wrap({"a": 1}), m)
        with self.assertRaises(BlockArgumentError):
            BlockMapping.wrap([("a", 1)])  # type: ignore[arg-type]

    def test_traversal_methods(self) -> None:
        m = BlockMapping(a=1, b=2)
        seen: list[tuple[str, int]] = []
        m.each(lambda key, value: seen.append((key, value)))
        self.assertEqual(seen, [("a", 1), ("b", 2)])
        self.assertEqual(m.map(lambda key, value: f"{key}={value}"), ["a=1", "b=2"])
        self.assertEqual(m.reduce(0, lambda acc, _key, value: acc + value), 3)

    def test_lookup_methods(self) -> None:
        m = BlockMapping(x=5, y="str")
        recorded: list[object] = []
        m.with_value_for_key("x", recorded.append)
        m.with_value_for_key("missing", recorded.append, default=lambda: recorded.append("default"))
        m.with_value_of_class("y", numbers.Number, recorded.append, lambda: recorded.append(-1))
        m.with_value_of_kind("y", ValueKind.STRING, recorded.append)
        m.with_value_meeting_condition("x", lambda v: v > 100, recorded.append, lambda: recorded.append("small"))
        self.assertEqual(recorded, [5, "default", -1, "str", "small"])


if __name__ == "__main__":
    unittest.main()
