"""
Shared pieces for the sorting routines: the ordering protocol every element
type must satisfy and the swap primitive.
"""

from __future__ import annotations

from typing import Any, List, Protocol, TypeVar


class Comparable(Protocol):
    """Anything with a total order expressed through ``<``."""

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Comparable)


def swap(items: List[T], a: int, b: int) -> None:
    items[a], items[b] = items[b], items[a]
