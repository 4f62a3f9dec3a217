"""
Insertion Sort
==============
Each element is walked left, one swap at a time, until its left neighbour is
no larger.  O(n^2) worst case, O(n) on sorted input, in-place and stable.
"""

from __future__ import annotations

from typing import List

from .base import T, swap


def insertion_sort(items: List[T]) -> None:
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            swap(items, j, j - 1)
            j -= 1
