"""Row reversals that turn a matrix of identical rows into a Latin square."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from contestsolvers.false_alarm import _run


def operations(n: int) -> list[tuple[int, int, int]]:
    """Return ``2n - 3`` reversals ``(row, left, right)`` for an ``n`` by ``n`` matrix.

    Every row starts as ``1..n``. Reversing ``row``'s cells ``left..right``
    (1-based, inclusive) for each returned triple leaves every column a
    permutation of ``1..n``.
    """
    if n < 2:
        raise ValueError(f"matrix size must be at least 2, got {n}")
    prefix = [(row, 1, row) for row in range(2, n + 1)]
    suffix = [(row, row + 1, n) for row in range(1, n - 1)]
    return prefix + suffix


def _answer(tokens: Iterator[str]) -> str:
    ops = operations(int(next(tokens)))
    lines = [str(len(ops))]
    lines.extend(f"{row} {left} {right}" for row, left, right in ops)
    # The trailing newline plus the one added per case leaves a blank line.
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print the operation count, the operations and a blank line."""
    return _run(
        argv, "Print the reversal operations for each matrix size.", _answer
    )


if __name__ == "__main__":
    raise SystemExit(main())