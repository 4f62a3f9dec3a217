import unittest
import sys
import os
import random

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortsuite.errors import InvalidSizeError
from sortsuite.generators import (
    PATTERNS,
    few_unique_array,
    generate,
    nearly_sorted_array,
    random_array,
    reversed_array,
    sorted_array,
)


class TestGenerators(unittest.TestCase):

    def test_random_array_range(self):
        items = random_array(50, random.Random(1))
        self.assertEqual(len(items), 50)
        self.assertTrue(all(0 <= x <= 50 for x in items))

    def test_random_array_seeded(self):
        self.assertEqual(random_array(20, random.Random(8)), random_array(20, random.Random(8)))

    def test_zero_size(self):
        for name in PATTERNS:
            with self.subTest(pattern=name):
                self.assertEqual(generate(name, 0, random.Random(0)), [])

    def test_negative_size(self):
        for name in PATTERNS:
            with self.subTest(pattern=name):
                with self.assertRaises(InvalidSizeError) as ctx:
                    generate(name, -3)
                self.assertEqual(ctx.exception.size, -3)

    def test_shapes(self):
        self.assertEqual(sorted_array(4), [0, 1, 2, 3])
        self.assertEqual(reversed_array(4), [3, 2, 1, 0])

    def test_few_unique(self):
        items = few_unique_array(200, random.Random(2), k=3)
        self.assertLessEqual(set(items), {0, 1, 2})

    def test_nearly_sorted_is_permutation(self):
        items = nearly_sorted_array(100, random.Random(3))
        self.assertEqual(sorted(items), list(range(100)))

    def test_unknown_pattern(self):
        with self.assertRaises(ValueError):
            generate("zigzag", 5)


if __name__ == '__main__':
    unittest.main()
