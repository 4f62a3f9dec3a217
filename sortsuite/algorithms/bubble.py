"""
Bubble Sort
===========
Repeated passes over a shrinking window, swapping neighbours that are out of
order.  The loop stops after the first pass without a swap, which is what
gives the O(n) best case on already sorted input.

Worst case O(n^2), in-place, stable: neighbours are swapped only when the
right one is strictly smaller.
"""

from __future__ import annotations

from typing import List

from .base import T, swap


def bubble_sort(items: List[T]) -> None:
    n = len(items)
    for i in range(n - 1):
        swapped = False
        # the largest i elements are already parked at the right end
        for j in range(1, n - i):
            if items[j] < items[j - 1]:
                swap(items, j, j - 1)
                swapped = True
        if not swapped:
            break
