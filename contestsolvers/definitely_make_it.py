"""Decide whether a climber can reach the tallest tower before the water does."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence

from contestsolvers.false_alarm import _run, _take


def can_survive(heights: Iterable[int], k: int) -> bool:
    """Return True if starting on tower ``k`` (1-based) reaches the tallest tower.

    Moving between towers of heights ``a`` and ``b`` takes ``|a - b|`` seconds,
    and the water rises by one each second. Towers are visited in increasing
    height; the climb fails when the tower being left is lower than the time
    at which the next tower is reached.
    """
    towers = list(heights)
    if not 1 <= k <= len(towers):
        raise ValueError(f"starting tower {k} is outside 1..{len(towers)}")
    current = towers[k - 1]
    ordered = sorted(towers)
    start = bisect_left(ordered, current)
    elapsed = 0
    for target in ordered[start + 1:]:
        elapsed += target - current
        if current < elapsed:
            return False
        current = target
    return True


def _answer(tokens: Iterator[str]) -> str:
    n, k = _take(tokens, 2)
    return "YES" if can_survive(_take(tokens, n), k) else "NO"


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print YES or NO for each."""
    return _run(argv, "Answer YES or NO for each set of towers.", _answer)


if __name__ == "__main__":
    raise SystemExit(main())