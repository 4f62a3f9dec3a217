"""
Sort Engine
===========
Owns one list of mutually comparable elements and sorts it in place with
whichever of the five algorithms the caller picks by code.

Usage:
    engine = SortEngine([5, 3, 1, 4, 2])
    seconds = engine.run(4)        # merge sort
    assert engine.is_sorted()
"""

from __future__ import annotations

import logging
import time
from typing import Any, Generic, List

from .algorithms import SortAlgorithm, get_algorithm
from .algorithms.base import T

logger = logging.getLogger(__name__)


class SortEngine(Generic[T]):
    """
    Sorts a caller-owned list in place.

    The list object passed in is the one that gets reordered, so the caller
    can inspect it after ``run`` returns.  Its length is fixed for the
    lifetime of the engine.
    """

    def __init__(self, items: List[T]):
        if items is None:
            raise TypeError("SortEngine needs a list, got None")
        self._items = items
        self._n = len(items)

    @property
    def items(self) -> List[T]:
        return self._items

    def __len__(self) -> int:
        return self._n

    def run(self, code: Any) -> float:
        """
        Sort with the algorithm selected by *code* and return elapsed seconds.

        Raises InvalidSelectorError before touching the list when *code* is
        not one of 1..5.
        """
        info = get_algorithm(code)
        start = time.perf_counter()
        info.fn(self._items)
        elapsed = time.perf_counter() - start
        logger.debug("%s sorted %d items in %.7fs", info.name, self._n, elapsed)
        return max(elapsed, 0.0)

    dispatch = run

    def is_sorted(self) -> bool:
        items = self._items
        for i in range(1, self._n):
            if items[i] < items[i - 1]:
                return False
        return True


def sort_with(items: List[T], code: Any) -> float:
    """Sort *items* in place with the given algorithm; returns elapsed seconds."""
    return SortEngine(items).run(code)


__all__ = ["SortEngine", "SortAlgorithm", "sort_with"]
