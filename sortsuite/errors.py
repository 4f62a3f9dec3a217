"""
Sort suite errors.
"""

from __future__ import annotations

from typing import Any

VALID_CODES = (1, 2, 3, 4, 5)
INVALID_SELECTOR_MESSAGE = "Algorithm code must be an integer from 1 to 5."


class SortSuiteError(Exception):
    """Base class for every error raised by the sort suite."""


class InvalidSelectorError(SortSuiteError, ValueError):
    """
    Raised when an algorithm code is outside 1..5.

    Never raised by the algorithms themselves, so callers can tell a bad
    choice apart from a broken sort and simply ask again.
    """

    def __init__(
        self,
        code: Any = None,
        message: str = INVALID_SELECTOR_MESSAGE,
    ) -> None:
        super().__init__(f"{message} Got: {code!r}")
        self.code = code
        self.valid_codes = VALID_CODES


class InvalidSizeError(SortSuiteError, ValueError):
    """Raised when a requested sequence size is negative."""

    def __init__(self, size: int) -> None:
        super().__init__(f"The number cannot be negative: {size}")
        self.size = size
