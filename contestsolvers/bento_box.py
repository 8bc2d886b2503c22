"""Find the restaurant not yet visited this week."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from contestsolvers.false_alarm import _run, _take


def unvisited(visited: Iterable[int]) -> int:
    """Return the smallest restaurant number in 1..5 missing from four visits."""
    days = sorted(visited)
    if len(days) != 4:
        raise ValueError(f"expected four visits, got {len(days)}")
    for expected, actual in zip(range(1, 5), days):
        if actual != expected:
            return expected
    return 5


def _answer(tokens: Iterator[str]) -> int:
    return unvisited(_take(tokens, 4))


def main(argv: Sequence[str] | None = None) -> int:
    """Read four visited restaurants and print the remaining one."""
    return _run(
        argv,
        "Print the restaurant left to visit on Friday.",
        _answer,
        counted=False,
    )


if __name__ == "__main__":
    raise SystemExit(main())