import io

import pytest

from contestsolvers.no_casino import count_hikes, main


def test_all_rain_gives_nothing():
    assert count_hikes([1, 1, 1, 1], 1) == 0


def test_run_exactly_k_gives_one():
    assert count_hikes([1, 0, 0, 0, 1], 3) == 1


def test_run_shorter_than_k_gives_nothing():
    assert count_hikes([0, 0, 1, 0, 0], 3) == 0


@pytest.mark.parametrize("k", [1, 2, 3, 4])
@pytest.mark.parametrize("hikes", [1, 2, 3])
def test_back_to_back_with_rest_days(k, hikes):
    weather = ([0] * k + [0]) * hikes
    weather = weather[:-1]
    assert count_hikes(weather, k) == hikes


def test_rain_splits_runs():
    joined = count_hikes([0, 0, 0, 0], 2)
    split = count_hikes([0, 0, 1, 0, 0], 2)
    assert split >= joined


def test_non_positive_k_rejected():
    with pytest.raises(ValueError):
        count_hikes([0, 0], 0)


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n4 1\n1 1 1 1\n3 3\n0 0 0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["0", "1"]