import io

import pytest

from contestsolvers.false_alarm import can_pass, main


def test_no_closed_doors_pass_with_any_positive_k():
    assert can_pass([0, 0, 0, 0], 1) is True


def test_span_exactly_k_passes():
    doors = [0, 1, 0, 0, 1, 0]
    assert can_pass(doors, 4) is True


def test_span_longer_than_k_fails():
    doors = [0, 1, 0, 0, 1, 0]
    assert can_pass(doors, 3) is False


@pytest.mark.parametrize(
    "doors",
    [[1], [1, 0, 1], [0, 0, 1, 1, 0], [1, 0, 0, 0, 0, 0, 1], [0, 1, 1, 1]],
)
def test_monotonic_in_k(doors):
    results = [can_pass(doors, k) for k in range(1, len(doors) + 2)]
    assert results == sorted(results)
    assert results[-1] is True


def test_k_at_least_length_always_passes():
    doors = [1, 0, 1, 1, 0, 1]
    assert can_pass(doors, len(doors)) is True


def test_accepts_generator():
    assert can_pass((d for d in [0, 1, 0]), 1) is True


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3 3\n1 0 1\n3 2\n1 0 1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "YES\nNO\n"


def test_main_reads_file(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("1\n4 1\n0 0 0 0\n", encoding="utf-8")
    main([str(source)])
    assert capsys.readouterr().out == "YES\n"