"""
sortsuite
=========
Five interchangeable sorting algorithms behind one engine that picks an
algorithm by code, times it and checks the result.
"""

from .algorithms import (
    ALGORITHMS,
    AlgorithmInfo,
    SortAlgorithm,
    bubble_sort,
    insertion_sort,
    merge_sort,
    merge_sort_in_place,
    quick_sort,
    selection_sort,
)
from .engine import SortEngine, sort_with
from .errors import InvalidSelectorError, InvalidSizeError, SortSuiteError

__version__ = "1.0.0"

__all__ = [
    "ALGORITHMS",
    "AlgorithmInfo",
    "InvalidSelectorError",
    "InvalidSizeError",
    "SortAlgorithm",
    "SortEngine",
    "SortSuiteError",
    "bubble_sort",
    "insertion_sort",
    "merge_sort",
    "merge_sort_in_place",
    "quick_sort",
    "selection_sort",
    "sort_with",
]
