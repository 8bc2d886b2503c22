"""Spend a budget of increments to maximise the total number of set bits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from contestsolvers.false_alarm import _run, _take

_LOW_BITS = 31
_HIGH_BIT = 60
_LOW_MASK = (1 << _LOW_BITS) - 1


def max_beauty(values: Iterable[int], k: int) -> int:
    """Return the largest total popcount reachable with at most ``k`` increments.

    Bits are filled greedily from the cheapest: each missing bit of weight
    ``2**i`` costs ``2**i`` increments. Only the low 31 bits of each value
    are considered, and filling continues up to bit 60.
    """
    numbers = [value & _LOW_MASK for value in values]
    spent = 0
    beauty = 0
    for bit in range(_LOW_BITS):
        weight = 1 << bit
        for number in numbers:
            if number >> bit & 1:
                beauty += 1
            else:
                spent += weight
                if spent <= k:
                    beauty += 1
    for bit in range(_LOW_BITS, _HIGH_BIT + 1):
        weight = 1 << bit
        for _ in numbers:
            spent += weight
            if spent > k:
                return beauty
            beauty += 1
    return beauty


def _answer(tokens: Iterator[str]) -> int:
    n, k = _take(tokens, 2)
    return max_beauty(_take(tokens, n), k)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print the greatest beauty of each."""
    return _run(
        argv, "Print the greatest beauty reachable for each array.", _answer
    )


if __name__ == "__main__":
    raise SystemExit(main())