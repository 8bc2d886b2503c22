import io

import pytest

from contestsolvers.make_it_beautiful import main, max_beauty


@pytest.mark.parametrize("values", [[0], [5], [7, 8, 1023], [0, 0, 3]])
def test_zero_budget_keeps_popcount(values):
    assert max_beauty(values, 0) == sum(bin(v).count("1") for v in values)


def test_single_increment_sets_lowest_bit():
    assert max_beauty([0], 1) == 1


def test_budget_for_all_sixty_one_bits():
    assert max_beauty([0], (1 << 61) - 1) == 61


def test_empty_array():
    assert max_beauty([], 10**18) == 0


def test_monotone_in_budget():
    values = [3, 4, 10]
    results = [max_beauty(values, k) for k in range(0, 64)]
    assert results == sorted(results)


def test_budget_too_small_for_missing_bit_adds_nothing():
    # value 1 is missing bit 1 which costs 2; a budget of 1 is not enough
    assert max_beauty([1], 1) == max_beauty([1], 0)


def test_order_of_values_irrelevant():
    assert max_beauty([1, 6, 9], 20) == max_beauty([9, 1, 6], 20)


def test_main_matches_function(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3 3\n0 1 2\n1 0\n7\n"))
    assert main([]) == 0
    expected = [str(max_beauty([0, 1, 2], 3)), str(max_beauty([7], 0))]
    assert capsys.readouterr().out.split() == expected