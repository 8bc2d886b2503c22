"""Form the most two-person teams that share one total weight."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from contestsolvers.false_alarm import _run, _take


def _teams_with_total(ordered: Sequence[int], total: int) -> int:
    low, high = 0, len(ordered) - 1
    teams = 0
    while low < high:
        pair = ordered[low] + ordered[high]
        if pair == total:
            teams += 1
            low += 1
            high -= 1
        elif pair < total:
            low += 1
        else:
            high -= 1
    return teams


def max_teams(weights: Iterable[int]) -> int:
    """Return the most disjoint pairs whose weights all add up to the same total."""
    ordered = sorted(weights)
    if len(ordered) < 2:
        return 0
    largest = ordered[-1] + ordered[-2]
    return max(
        (_teams_with_total(ordered, total) for total in range(largest, 0, -1)),
        default=0,
    )


def _answer(tokens: Iterator[str]) -> int:
    return max_teams(_take(tokens, int(next(tokens))))


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print the most teams for each."""
    return _run(
        argv, "Print the most teams for each group of participants.", _answer
    )


if __name__ == "__main__":
    raise SystemExit(main())