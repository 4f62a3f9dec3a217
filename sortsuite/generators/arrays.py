"""
Input Generators
================
Builds integer lists for the console and the benchmark.

``random_array`` is what the console fills its array with: n integers drawn
uniformly from [0, n].  The other patterns exercise the best and worst cases
of the individual algorithms.
"""

from __future__ import annotations

import random
from typing import Callable, Dict, List, Optional

from ..errors import InvalidSizeError


def _check_size(n: int) -> None:
    if n < 0:
        raise InvalidSizeError(n)


def random_array(n: int, rng: Optional[random.Random] = None) -> List[int]:
    _check_size(n)
    rng = rng or random
    return [rng.randint(0, n) for _ in range(n)]


def sorted_array(n: int, rng: Optional[random.Random] = None) -> List[int]:
    _check_size(n)
    return list(range(n))


def reversed_array(n: int, rng: Optional[random.Random] = None) -> List[int]:
    _check_size(n)
    return list(range(n - 1, -1, -1))


def few_unique_array(n: int, rng: Optional[random.Random] = None, k: int = 4) -> List[int]:
    """n values drawn from only *k* distinct keys (duplicate-heavy input)."""
    _check_size(n)
    rng = rng or random
    return [rng.randrange(max(k, 1)) for _ in range(n)]


def nearly_sorted_array(
    n: int,
    rng: Optional[random.Random] = None,
    swaps: Optional[int] = None,
) -> List[int]:
    """Ascending list with a handful of random transpositions (default ~n/20)."""
    _check_size(n)
    rng = rng or random
    items = list(range(n))
    if n < 2:
        return items
    if swaps is None:
        swaps = max(1, n // 20)
    for _ in range(swaps):
        a = rng.randrange(n)
        b = rng.randrange(n)
        items[a], items[b] = items[b], items[a]
    return items


PATTERNS: Dict[str, Callable[..., List[int]]] = {
    "random": random_array,
    "sorted": sorted_array,
    "reversed": reversed_array,
    "few_unique": few_unique_array,
    "nearly_sorted": nearly_sorted_array,
}


def generate(pattern: str, n: int, rng: Optional[random.Random] = None) -> List[int]:
    try:
        builder = PATTERNS[pattern]
    except KeyError:
        raise ValueError(
            f"Unknown input pattern {pattern!r}; choose from {', '.join(PATTERNS)}"
        ) from None
    return builder(n, rng)
