"""
Selection Sort
==============
For every position, find the smallest element of the unsorted suffix and swap
it into place.  At most n swaps, but always O(n^2) comparisons.

Not stable: the long-distance swap can carry an element past an equal one.
"""

from __future__ import annotations

from typing import List

from .base import T, swap


def selection_sort(items: List[T]) -> None:
    n = len(items)
    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            # strict comparison keeps the first occurrence on ties
            if items[j] < items[smallest]:
                smallest = j
        swap(items, i, smallest)
