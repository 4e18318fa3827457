import io

import pytest

from dsakit.knapsack import knapsack, main


def test_worked_example():
    assert knapsack(4, [4, 5, 1], [1, 2, 3]) == 3


def test_no_items():
    assert knapsack(10, [], []) == 0


def test_zero_capacity():
    assert knapsack(0, [1, 2], [5, 6]) == 0


def test_everything_fits():
    weights = [1, 2, 3]
    values = [4, 5, 6]
    assert knapsack(sum(weights), weights, values) == sum(values)


def test_capacity_is_monotone():
    weights = [3, 4, 5, 2]
    values = [30, 50, 60, 10]
    results = [knapsack(c, weights, values) for c in range(16)]
    assert results == sorted(results)
    assert all(r <= sum(values) for r in results)


def test_items_used_once():
    assert knapsack(10, [1], [7]) == 7


def test_length_mismatch():
    with pytest.raises(ValueError):
        knapsack(5, [1, 2], [1])


def test_negative_capacity():
    with pytest.raises(ValueError):
        knapsack(-1, [1], [1])


def test_main_reads_cases(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n4\n1 2 3\n4 5 1\n0\n5\n1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["3", "0"]