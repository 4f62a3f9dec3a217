"""
Merge Sort
==========
Stable, comparison-based sorting with O(n log n) worst-case complexity.

``merge_sort_in_place`` splits the list recursively into halves over
inclusive bounds.  Each merge copies its range into one auxiliary buffer that
is allocated once per call and shared by every level of the recursion.  On
ties the left run wins, which is what makes the sort stable.

``merge_sort`` is a keyed front end for callers that want a new list back.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from .base import T

K = TypeVar("K")


def merge_sort_in_place(items: List[T]) -> None:
    n = len(items)
    if n <= 1:
        return
    buffer: List[T] = list(items)
    _sort(items, buffer, 0, n - 1)


def _sort(items: List[T], buffer: List[T], lo: int, hi: int) -> None:
    if lo >= hi:
        return
    mid = lo + (hi - lo) // 2
    _sort(items, buffer, lo, mid)
    _sort(items, buffer, mid + 1, hi)
    _merge_range(items, buffer, lo, mid, hi)


def _merge_range(items: List[T], buffer: List[T], lo: int, mid: int, hi: int) -> None:
    """Merge the sorted runs [lo, mid] and [mid + 1, hi] of *items*."""
    buffer[lo:hi + 1] = items[lo:hi + 1]
    i, j = lo, mid + 1
    for k in range(lo, hi + 1):
        if i > mid:
            items[k] = buffer[j]
            j += 1
        elif j > hi:
            items[k] = buffer[i]
            i += 1
        elif buffer[j] < buffer[i]:
            items[k] = buffer[j]
            j += 1
        else:
            items[k] = buffer[i]
            i += 1


class _Keyed(Generic[K]):
    """Pairs an item with its sort key; ordering looks at the key only."""

    __slots__ = ("key", "item")

    def __init__(self, key: Any, item: K):
        self.key = key
        self.item = item

    def __lt__(self, other: "_Keyed[K]") -> bool:
        return self.key < other.key


def merge_sort(
    seq: Sequence[K],
    *,
    key: Optional[Callable[[K], Any]] = None,
) -> List[K]:
    """
    Return a new ascending list of *seq*, leaving *seq* untouched.

    *key* extracts the comparison key, computed once per element.
    """
    if key is None:
        items: List[K] = list(seq)
        merge_sort_in_place(items)
        return items
    wrapped = [_Keyed(key(item), item) for item in seq]
    merge_sort_in_place(wrapped)
    return [w.item for w in wrapped]
