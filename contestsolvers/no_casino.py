"""Count hikes that fit into runs of good weather."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import groupby

from contestsolvers.false_alarm import _run, _take


def count_hikes(weather: Iterable[int], k: int) -> int:
    """Return how many ``k``-day hikes fit into days of good weather (0).

    A hike takes ``k`` consecutive good days, and after each hike one day
    must be spent resting before the next can begin.
    """
    if k < 1:
        raise ValueError(f"hike length must be positive, got {k}")
    return sum(
        (sum(1 for _ in run) + 1) // (k + 1)
        for rainy, run in groupby(weather, key=lambda day: day != 0)
        if not rainy
    )


def _answer(tokens: Iterator[str]) -> int:
    n, k = _take(tokens, 2)
    return count_hikes(_take(tokens, n), k)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print the hike count of each."""
    return _run(argv, "Print the number of hikes for each forecast.", _answer)


if __name__ == "__main__":
    raise SystemExit(main())