# contestsolvers

A small collection of solvers for short competitive-programming problems.
Each problem lives in its own module and is available both as a plain
Python function and as a command that reads the problem input and writes
one answer per test case to standard output.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

Every solver is an ordinary function that takes Python values and
returns the answer:

| Module | Function | Answers |
| --- | --- | --- |
| `contestsolvers.false_alarm` | `can_pass(doors, k)` | whether all closed doors (value `1`) fit in one window of `k` positions |
| `contestsolvers.only_one_digit` | `min_digit(n)` | the smallest decimal digit of a positive `n` |
| `contestsolvers.make_it_permutation` | `operations(n)` | `2n - 3` reversals `(row, left, right)` for an `n` by `n` matrix, `n >= 2` |
| `contestsolvers.no_casino` | `count_hikes(weather, k)` | how many hikes of `k` good days (value `0`) fit, with a rest day after each |
| `contestsolvers.bento_box` | `unvisited(visited)` | the smallest restaurant in 1..5 missing from four visits |
| `contestsolvers.definitely_make_it` | `can_survive(heights, k)` | whether the climb from tower `k` (1-based) reaches the tallest tower |
| `contestsolvers.make_it_beautiful` | `max_beauty(values, k)` | the greatest total popcount reachable with at most `k` increments |
| `contestsolvers.bbq_buns` | `arrange_buns(n)` | a list of fillings for `n` buns, or `None` |
| `contestsolvers.last_time` | `max_coins(casinos, k)` | the most coins reachable from `k` over `(low, high, real)` casinos |
| `contestsolvers.boats` | `max_teams(weights)` | the most pairs that all share one total weight |

Invalid arguments raise `ValueError`: a non-positive number for
`min_digit`, a size below 2 for `operations`, a hike length below 1 for
`count_hikes`, anything other than four visits for `unvisited`, and a
starting tower out of range for `can_survive`.

```python
from contestsolvers.only_one_digit import min_digit
from contestsolvers.bbq_buns import arrange_buns

min_digit(7384)     # 3
arrange_buns(4)     # [1, 1, 2, 2]
arrange_buns(3)     # None
```

## Commands

Each command reads the problem's input as whitespace-separated tokens,
from standard input or from a file named as its only argument, and prints
one answer per test case:

```
false-alarm < input.txt
only-one-digit < input.txt
make-it-permutation < input.txt
no-casino < input.txt
bento-box < input.txt
definitely-make-it < input.txt
make-it-beautiful < input.txt
bbq-buns < input.txt
last-time < input.txt
boats input.txt
```

All commands except `bento-box` expect the number of test cases first;
`bento-box` reads a single case of four visited restaurants.
`false-alarm` and `definitely-make-it` print `YES` or `NO`; `bbq-buns`
prints `-1` when it has no arrangement; `make-it-permutation` prints the
operation count, one operation per line, and a blank line after each case.