"""Find the smallest digit of a number."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from contestsolvers.false_alarm import _run


def min_digit(n: int) -> int:
    """Return the smallest decimal digit of the positive integer ``n``."""
    if n <= 0:
        raise ValueError(f"expected a positive integer, got {n}")
    return min(int(digit) for digit in str(n))


def _answer(tokens: Iterator[str]) -> int:
    return min_digit(int(next(tokens)))


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print the smallest digit of each number."""
    return _run(argv, "Print the smallest digit of each number.", _answer)


if __name__ == "__main__":
    raise SystemExit(main())