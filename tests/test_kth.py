import pytest

from dsakit.kth import kth_largest

DATA = [3, 2, 3, 1, 2, 4, 5, 5, 6]


@pytest.mark.parametrize("k", range(1, len(DATA) + 1))
def test_rank_invariant(k):
    value = kth_largest(DATA, k)
    assert sum(1 for x in DATA if x > value) < k
    assert sum(1 for x in DATA if x >= value) >= k


def test_first_is_max_and_last_is_min():
    assert kth_largest(DATA, 1) == max(DATA)
    assert kth_largest(DATA, len(DATA)) == min(DATA)


def test_results_are_non_increasing():
    results = [kth_largest(DATA, k) for k in range(1, len(DATA) + 1)]
    assert results == sorted(results, reverse=True)


def test_duplicates_counted():
    assert kth_largest([5, 5, 1], 2) == 5


@pytest.mark.parametrize("k", [0, 10])
def test_out_of_range(k):
    with pytest.raises(ValueError):
        kth_largest(DATA, k)