"""Assign fillings to buns so that equal fillings sit a square distance apart."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from contestsolvers.false_alarm import _run

_SPLIT_PAIRS = (5, 13)


def arrange_buns(n: int) -> list[int] | None:
    """Return fillings for ``n`` buns, or None when no arrangement is known.

    Every filling is used at least twice, and any two buns with the same
    filling are a perfect square apart. Odd counts below 27 have none.
    """
    if n % 2 == 1 and n < 27:
        return None
    if n % 2 == 0:
        return [filling for filling in range(1, n // 2 + 1) for _ in range(2)]
    buns = [1]
    filling = 3
    for pair in range(1, n // 2 + 1):
        if pair in _SPLIT_PAIRS:
            buns.extend((1, 2))
        else:
            buns.extend((filling, filling))
            filling += 1
    return buns


def _answer(tokens: Iterator[str]) -> str:
    buns = arrange_buns(int(next(tokens)))
    return "-1" if buns is None else " ".join(map(str, buns))


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print an arrangement, or -1, for each."""
    return _run(
        argv, "Print a filling for each bun, or -1 if impossible.", _answer
    )


if __name__ == "__main__":
    raise SystemExit(main())