"""Visit casinos in the best order to end with the most coins."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from contestsolvers.false_alarm import _run, _take


def max_coins(casinos: Iterable[tuple[int, int, int]], k: int) -> int:
    """Return the most coins reachable starting with ``k``.

    Each casino ``(low, high, real)`` may be played once when the coins held
    lie in ``low..high`` and sets them to ``real``. Casinos are tried in
    sorted order and only ever played when they do not lose coins.
    """
    coins = k
    for low, high, real in sorted(tuple(casino) for casino in casinos):
        if low <= coins <= high:
            coins = max(real, coins)
    return coins


def _answer(tokens: Iterator[str]) -> int:
    n, k = _take(tokens, 2)
    casinos = [tuple(_take(tokens, 3)) for _ in range(n)]
    return max_coins(casinos, k)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print the most coins reachable in each."""
    return _run(
        argv, "Print the most coins reachable for each set of casinos.", _answer
    )


if __name__ == "__main__":
    raise SystemExit(main())