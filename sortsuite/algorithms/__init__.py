"""
Algorithm registry.

Maps the integer codes offered to users (1..5) onto the sorting routines and
records the properties each one guarantees.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, List

from ..errors import InvalidSelectorError
from .bubble import bubble_sort
from .insertion import insertion_sort
from .merge import merge_sort, merge_sort_in_place
from .quick import quick_sort
from .selection import selection_sort


class SortAlgorithm(IntEnum):
    BUBBLE = 1
    SELECTION = 2
    INSERTION = 3
    MERGE = 4
    QUICK = 5

    @classmethod
    def from_code(cls, code: Any) -> "SortAlgorithm":
        """Resolve a user-supplied code, raising InvalidSelectorError otherwise."""
        # bool is an int subclass; True must not mean bubble sort
        if isinstance(code, bool):
            raise InvalidSelectorError(code)
        try:
            return cls(operator.index(code))
        except (TypeError, ValueError):
            raise InvalidSelectorError(code) from None


@dataclass(frozen=True)
class AlgorithmInfo:
    """Static description of one sorting routine."""
    code: SortAlgorithm
    name: str
    tag: str                          # short key used in CSV columns and charts
    fn: Callable[[List[Any]], None]
    stable: bool
    in_place: bool
    best_case: str
    worst_case: str
    quadratic: bool                   # skipped above the benchmark size cap


ALGORITHMS: Dict[SortAlgorithm, AlgorithmInfo] = {
    SortAlgorithm.BUBBLE: AlgorithmInfo(
        SortAlgorithm.BUBBLE, "bubble sort", "bubble", bubble_sort,
        stable=True, in_place=True, best_case="O(n)", worst_case="O(n^2)",
        quadratic=True,
    ),
    SortAlgorithm.SELECTION: AlgorithmInfo(
        SortAlgorithm.SELECTION, "selection sort", "selection", selection_sort,
        stable=False, in_place=True, best_case="O(n^2)", worst_case="O(n^2)",
        quadratic=True,
    ),
    SortAlgorithm.INSERTION: AlgorithmInfo(
        SortAlgorithm.INSERTION, "insertion sort", "insertion", insertion_sort,
        stable=True, in_place=True, best_case="O(n)", worst_case="O(n^2)",
        quadratic=True,
    ),
    SortAlgorithm.MERGE: AlgorithmInfo(
        SortAlgorithm.MERGE, "merge sort", "merge", merge_sort_in_place,
        stable=True, in_place=False, best_case="O(n log n)", worst_case="O(n log n)",
        quadratic=False,
    ),
    SortAlgorithm.QUICK: AlgorithmInfo(
        SortAlgorithm.QUICK, "quick sort", "quick", quick_sort,
        stable=False, in_place=True, best_case="O(n log n)", worst_case="O(n^2)",
        quadratic=False,
    ),
}


def get_algorithm(code: Any) -> AlgorithmInfo:
    return ALGORITHMS[SortAlgorithm.from_code(code)]


def menu_lines() -> List[str]:
    """One "<code> - <name>;" line per algorithm, in code order."""
    return [f"{info.code.value} - {info.name};" for info in ALGORITHMS.values()]


__all__ = [
    "ALGORITHMS",
    "AlgorithmInfo",
    "SortAlgorithm",
    "bubble_sort",
    "get_algorithm",
    "insertion_sort",
    "menu_lines",
    "merge_sort",
    "merge_sort_in_place",
    "quick_sort",
    "selection_sort",
]
