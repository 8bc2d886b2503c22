"""Decide whether a corridor of doors can be crossed with one button press."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import islice


def can_pass(doors: Iterable[int], k: int) -> bool:
    """Return True if every closed door (1) lies inside one window of ``k`` seconds.

    The button keeps all doors open for ``k`` consecutive positions, so the
    stretch from the first closed door to the last must be no longer than ``k``.
    A corridor with no closed doors counts as a span of one.
    """
    first = last = -1
    for position, door in enumerate(doors, start=1):
        if door == 1:
            if first == -1:
                first = position
            last = position
    return last - first + 1 <= k


def _take(tokens: Iterator[str], count: int) -> list[int]:
    """Read up to ``count`` integers from ``tokens``."""
    return [int(token) for token in islice(tokens, count)]


def _run(
    argv: Sequence[str] | None,
    description: str,
    answer: Callable[[Iterator[str]], object],
    *,
    counted: bool = True,
) -> int:
    """Parse the command line, read the input and print one answer per case.

    When ``counted`` is true the input starts with the number of cases;
    otherwise it holds a single case.
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "input", nargs="?", help="file to read instead of standard input"
    )
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    tokens = iter(text.split())
    cases = int(next(tokens)) if counted else 1
    answers = [answer(tokens) for _ in range(cases)]
    sys.stdout.write("".join(f"{item}\n" for item in answers))
    return 0


def _answer(tokens: Iterator[str]) -> str:
    n, k = _take(tokens, 2)
    return "YES" if can_pass(_take(tokens, n), k) else "NO"


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print YES or NO for each."""
    return _run(argv, "Answer YES or NO for each corridor of doors.", _answer)


if __name__ == "__main__":
    raise SystemExit(main())