"""
Interactive Console
===================
Asks for an array size, fills the array with random integers in [0, n],
asks which algorithm to use and reports how long the sort took and whether
the result is in order.  Malformed answers are re-prompted, never fatal.

Run:  sortsuite            (or: python -m sortsuite)
      sortsuite --size 1000 --algorithm 5 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional, TextIO

from .algorithms import ALGORITHMS, menu_lines
from .config import configure_logging, resolve_seed
from .engine import SortEngine
from .errors import InvalidSelectorError, InvalidSizeError
from .generators import random_array

logger = logging.getLogger(__name__)

GREETING = "Hello! Type in the size of your array:"
NOT_AN_INTEGER = "This is not an integer number, please try again:"
NEGATIVE_SIZE = "The number cannot be negative, try again please:"
MENU_HEADER = "Thanks! Select the type of sorting algorithm that you wish to choose:"
BAD_CHOICE = "Please enter an integer from 1 to 5:"


class SortConsole:
    """Prompt loop over injectable text streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.rng = rng or random.Random(resolve_seed())

    def say(self, text: str) -> None:
        print(text, file=self.stdout)

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("input closed")
        return line.strip()

    def ask_size(self) -> List[int]:
        """Keep asking until a non-negative integer arrives; return the filled array."""
        self.say(GREETING)
        while True:
            raw = self._read_line()
            try:
                n = int(raw)
            except ValueError:
                self.say(NOT_AN_INTEGER)
                continue
            try:
                return random_array(n, self.rng)
            except InvalidSizeError:
                self.say(NEGATIVE_SIZE)

    def ask_and_sort(self, engine: SortEngine) -> float:
        """Keep asking for an algorithm code until one sorts; return elapsed seconds."""
        self.say(MENU_HEADER)
        for line in menu_lines():
            self.say(line)
        while True:
            raw = self._read_line()
            try:
                code = int(raw)
            except ValueError:
                self.say(BAD_CHOICE)
                continue
            try:
                return engine.run(code)
            except InvalidSelectorError:
                self.say(BAD_CHOICE)

    def report(self, engine: SortEngine, elapsed: float) -> None:
        self.say(f"The algorithm is completed in {elapsed:.7f} seconds.")
        self.say("Is the array sorted? " + ("Yes!" if engine.is_sorted() else "No :("))

    def run(self, size: Optional[int] = None, algorithm: Optional[int] = None) -> int:
        try:
            items = random_array(size, self.rng) if size is not None else self.ask_size()
            engine = SortEngine(items)
            if algorithm is not None:
                elapsed = engine.run(algorithm)
            else:
                elapsed = self.ask_and_sort(engine)
        except EOFError:
            logger.warning("input ended before the sort could run")
            return 1
        self.report(engine, elapsed)
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sort a random array with a chosen algorithm")
    parser.add_argument("--size", type=int, default=None,
                        help="Array size (skips the size prompt)")
    parser.add_argument("--algorithm", type=int, default=None,
                        choices=[int(code) for code in ALGORITHMS],
                        help="Algorithm code 1-5 (skips the menu)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the array contents")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: SORTSUITE_LOG_LEVEL or WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.size is not None and args.size < 0:
        parser.error("--size cannot be negative")

    configure_logging(args.log_level)
    console = SortConsole(rng=random.Random(resolve_seed(args.seed)))
    return console.run(size=args.size, algorithm=args.algorithm)


if __name__ == "__main__":
    sys.exit(main())
