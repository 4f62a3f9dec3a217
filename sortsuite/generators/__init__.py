"""Input generators for the console and the benchmark."""

from .arrays import (
    PATTERNS,
    few_unique_array,
    generate,
    nearly_sorted_array,
    random_array,
    reversed_array,
    sorted_array,
)

__all__ = [
    "PATTERNS",
    "few_unique_array",
    "generate",
    "nearly_sorted_array",
    "random_array",
    "reversed_array",
    "sorted_array",
]
