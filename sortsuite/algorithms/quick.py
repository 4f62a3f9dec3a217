"""
Quick Sort
==========
Shuffle first, then partition around the first element of each range.

The Fisher-Yates shuffle makes the O(n^2) worst case (sorted or adversarial
input) vanishingly unlikely; the expected cost is O(n log n).  In-place and
not stable.

The recursion descends into the smaller side of each partition and loops over
the larger one, so the call stack stays O(log n) even for unlucky pivots.
"""

from __future__ import annotations

import random
from typing import List, Optional

from ..config import resolve_seed
from .base import T, swap

_rng = random.Random(resolve_seed())


def quick_sort(items: List[T], rng: Optional[random.Random] = None) -> None:
    shuffle(items, rng)
    _sort(items, 0, len(items) - 1)


def shuffle(items: List[T], rng: Optional[random.Random] = None) -> None:
    """Uniform in-place shuffle: position i trades with a random slot in [0, i]."""
    rng = rng or _rng
    for i in range(1, len(items)):
        swap(items, i, rng.randint(0, i))


def _sort(items: List[T], lo: int, hi: int) -> None:
    while lo < hi:
        pivot = _partition(items, lo, hi)
        if pivot - lo < hi - pivot:
            _sort(items, lo, pivot - 1)
            lo = pivot + 1
        else:
            _sort(items, pivot + 1, hi)
            hi = pivot - 1


def _partition(items: List[T], lo: int, hi: int) -> int:
    """
    Partition [lo, hi] around items[lo] and return the pivot's final index.

    The scans stop at elements equal to the pivot, so runs of duplicates are
    split evenly between the two sides.
    """
    pivot = items[lo]
    i, j = lo, hi + 1
    while True:
        i += 1
        while items[i] < pivot:
            if i == hi:
                break
            i += 1
        j -= 1
        while pivot < items[j]:
            if j == lo:
                break
            j -= 1
        if i >= j:
            break
        swap(items, i, j)
    swap(items, lo, j)
    return j
