import unittest
import sys
import os
import random
from collections import Counter

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortsuite.algorithms import (
    ALGORITHMS,
    SortAlgorithm,
    bubble_sort,
    insertion_sort,
    merge_sort_in_place,
    quick_sort,
    selection_sort,
)


class Tagged:
    """Orders by key only; origin remembers where the element started."""

    def __init__(self, key, origin):
        self.key = key
        self.origin = origin

    def __lt__(self, other):
        return self.key < other.key

    def __repr__(self):
        return f"Tagged({self.key!r}, {self.origin!r})"


ALL_SORTS = [bubble_sort, selection_sort, insertion_sort, merge_sort_in_place, quick_sort]
STABLE_SORTS = [bubble_sort, insertion_sort, merge_sort_in_place]


class TestCorrectness(unittest.TestCase):
    """Every algorithm must return a non-decreasing permutation of its input."""

    def setUp(self):
        self.rng = random.Random(1234)

    def _check(self, fn, data):
        items = list(data)
        fn(items)
        self.assertEqual(items, sorted(data), f"{fn.__name__} on {data}")
        self.assertEqual(Counter(items), Counter(data))

    def test_random_inputs(self):
        for fn in ALL_SORTS:
            for n in (2, 3, 7, 16, 33, 100, 257):
                with self.subTest(fn=fn.__name__, n=n):
                    self._check(fn, [self.rng.randint(0, n) for _ in range(n)])

    def test_reverse_sorted(self):
        for fn in ALL_SORTS:
            with self.subTest(fn=fn.__name__):
                self._check(fn, list(range(50, 0, -1)))

    def test_example_from_console(self):
        for fn in ALL_SORTS:
            with self.subTest(fn=fn.__name__):
                items = [5, 3, 1, 4, 2]
                fn(items)
                self.assertEqual(items, [1, 2, 3, 4, 5])

    def test_empty_and_single(self):
        for fn in ALL_SORTS:
            with self.subTest(fn=fn.__name__):
                empty = []
                fn(empty)
                self.assertEqual(empty, [])
                single = [42]
                fn(single)
                self.assertEqual(single, [42])

    def test_all_equal(self):
        for fn in ALL_SORTS:
            with self.subTest(fn=fn.__name__):
                items = [1, 1, 1]
                fn(items)
                self.assertEqual(items, [1, 1, 1])
                many = [7] * 500
                fn(many)
                self.assertEqual(many, [7] * 500)

    def test_two_values_heavy_duplicates(self):
        for fn in ALL_SORTS:
            with self.subTest(fn=fn.__name__):
                self._check(fn, [self.rng.randint(0, 1) for _ in range(300)])

    def test_negative_and_float(self):
        for fn in ALL_SORTS:
            with self.subTest(fn=fn.__name__):
                self._check(fn, [3.5, -2, 0, -7.25, 10, 3.5, -2])

    def test_strings(self):
        for fn in ALL_SORTS:
            with self.subTest(fn=fn.__name__):
                self._check(fn, ["pear", "apple", "fig", "banana", "apple"])

    def test_already_sorted_is_unchanged(self):
        for fn in ALL_SORTS:
            with self.subTest(fn=fn.__name__):
                data = [1, 2, 2, 3, 5, 8, 13]
                items = list(data)
                fn(items)
                self.assertEqual(items, data)

    def test_sorts_same_list_object(self):
        for fn in ALL_SORTS:
            with self.subTest(fn=fn.__name__):
                items = [3, 1, 2]
                alias = items
                fn(items)
                self.assertIs(alias, items)
                self.assertEqual(alias, [1, 2, 3])


class TestStability(unittest.TestCase):

    def _tagged(self, keys):
        return [Tagged(k, i) for i, k in enumerate(keys)]

    def test_stable_sorts_keep_order_of_equal_keys(self):
        rng = random.Random(99)
        keys = [rng.randint(0, 5) for _ in range(120)]
        for fn in STABLE_SORTS:
            with self.subTest(fn=fn.__name__):
                items = self._tagged(keys)
                fn(items)
                self.assertEqual([t.key for t in items], sorted(keys))
                for a, b in zip(items, items[1:]):
                    if a.key == b.key:
                        self.assertLess(a.origin, b.origin)

    def test_unstable_sorts_still_sort_by_key(self):
        keys = [2, 0, 2, 1, 0, 1, 2]
        for fn in (selection_sort, quick_sort):
            with self.subTest(fn=fn.__name__):
                items = self._tagged(keys)
                fn(items)
                self.assertEqual([t.key for t in items], sorted(keys))
                self.assertEqual(sorted(t.origin for t in items), list(range(len(keys))))

    def test_selection_sort_is_not_stable(self):
        """Expected behaviour, not a bug: the swap carries (2, 0) past (2, 1)."""
        items = [Tagged(2, 0), Tagged(2, 1), Tagged(1, 2)]
        selection_sort(items)
        self.assertEqual([(t.key, t.origin) for t in items], [(1, 2), (2, 1), (2, 0)])


class TestBubbleSortEarlyExit(unittest.TestCase):

    def test_sorted_input_needs_a_single_pass(self):
        comparisons = []

        class Counting(int):
            def __lt__(self, other):
                comparisons.append(1)
                return int(self) < int(other)

        items = [Counting(i) for i in range(20)]
        bubble_sort(items)
        self.assertEqual(len(comparisons), 19)

    def test_insertion_sort_linear_on_sorted_input(self):
        comparisons = []

        class Counting(int):
            def __lt__(self, other):
                comparisons.append(1)
                return int(self) < int(other)

        items = [Counting(i) for i in range(20)]
        insertion_sort(items)
        self.assertEqual(len(comparisons), 19)


class TestRegistry(unittest.TestCase):

    def test_codes_are_one_to_five(self):
        self.assertEqual([int(code) for code in ALGORITHMS], [1, 2, 3, 4, 5])
        self.assertEqual(SortAlgorithm.MERGE, 4)

    def test_properties(self):
        self.assertTrue(ALGORITHMS[SortAlgorithm.MERGE].stable)
        self.assertFalse(ALGORITHMS[SortAlgorithm.MERGE].in_place)
        self.assertFalse(ALGORITHMS[SortAlgorithm.QUICK].stable)
        self.assertFalse(ALGORITHMS[SortAlgorithm.SELECTION].stable)
        self.assertEqual(
            {info.tag for info in ALGORITHMS.values() if info.quadratic},
            {"bubble", "selection", "insertion"},
        )

    def test_registry_functions(self):
        self.assertIs(ALGORITHMS[SortAlgorithm.BUBBLE].fn, bubble_sort)
        self.assertIs(ALGORITHMS[SortAlgorithm.QUICK].fn, quick_sort)


if __name__ == '__main__':
    unittest.main()
