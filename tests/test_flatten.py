import sys
import unittest

from markupgen import m, render
from markupgen.util_seq import flatten


class FlattenTest(unittest.TestCase):
    def test_nested_lists_flatten_in_order(self) -> None:
        self.assertEqual(flatten([1, [2, [3, []], 4]]), [1, 2, 3, 4])

    def test_scalar_becomes_single_item(self) -> None:
        self.assertEqual(flatten(5), [5])
        self.assertEqual(flatten("abc"), ["abc"])
        self.assertEqual(flatten(None), [None])

    def test_tuples_and_generators(self) -> None:
        gen = (i * 2 for i in range(3))
        self.assertEqual(flatten((1, (2,), [gen])), [1, 2, 0, 2, 4])

    def test_empty(self) -> None:
        self.assertEqual(flatten([]), [])
        self.assertEqual(flatten(([], ())), [])

    def test_nesting_deeper_than_recursion_limit(self) -> None:
        depth = sys.getrecursionlimit() * 2
        nested: list = [1]
        for _ in range(depth):
            nested = [nested, 2]
        flat = flatten(nested)
        self.assertEqual(flat, [1] + [2] * depth)

    def test_deep_children_build_and_render(self) -> None:
        nested: list = ["x"]
        for _ in range(sys.getrecursionlimit() * 2):
            nested = [nested]
        self.assertEqual(render(m("p", nested)), "<p>x</p>")


if __name__ == "__main__":
    unittest.main()
