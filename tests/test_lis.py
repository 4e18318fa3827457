import pytest

from dsakit.lis import longest_increasing_subsequence


def test_worked_example():
    assert longest_increasing_subsequence([10, 9, 2, 5, 3, 7, 101, 18]) == 4


def test_empty():
    assert longest_increasing_subsequence([]) == 0


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [-5, 0, 8], [7]])
def test_strictly_increasing_is_whole_list(nums):
    assert longest_increasing_subsequence(nums) == len(nums)


def test_equal_values_do_not_count():
    assert longest_increasing_subsequence([7, 7, 7, 7]) == 1


def test_decreasing():
    assert longest_increasing_subsequence([9, 8, 7, 6]) == 1


def test_accepts_iterables():
    data = [10, 9, 2, 5, 3, 7, 101, 18]
    assert longest_increasing_subsequence(iter(data)) == longest_increasing_subsequence(data)


def test_appending_larger_extends():
    nums = [3, 1, 4, 1, 5, 9, 2, 6]
    base = longest_increasing_subsequence(nums)
    assert longest_increasing_subsequence(nums + [max(nums) + 1]) == base + 1