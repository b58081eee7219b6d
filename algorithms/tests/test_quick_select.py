from collections import Counter

import pytest

from algorithms.selection.basic.quick_select import QuickSelect
from algorithms.selection.result import InvalidRankError


def test_quick_select_basic():
    data = [3, 1, 4, 1, 5, 9, 2, 6]
    original = list(data)
    selector = QuickSelect()
    assert selector.execute(data, 1).value == 1
    assert selector.execute(data, 4).value == 3
    assert selector.execute(data, 8).value == 9
    assert data == original


def test_quick_select_duplicates():
    data = [5, 2, 2, 1, 1, 3, 3, 3]
    assert QuickSelect().execute(data, 1).value == 1
    assert QuickSelect().execute(data, 5).value == 3


@pytest.mark.parametrize("k", range(1, 9))
def test_quick_select_sorted_and_reverse(k):
    assert QuickSelect().execute(list(range(1, 9)), k).value == k
    assert QuickSelect().execute(list(range(8, 0, -1)), k).value == k


def test_quick_select_prefix_holds_smallest():
    data = [7, -3, 7, 0, 12, -3, 5, 1, 9]
    result = QuickSelect().execute(data, 4)
    assert Counter(result.prefix) == Counter(sorted(data)[:4])
    assert sorted(result.working) == sorted(data)


def test_quick_select_single_element():
    result = QuickSelect().execute([42], 1)
    assert result.ok
    assert result.value == 42
    assert result.working == (42,)


@pytest.mark.parametrize("n", [0, -1, 4])
def test_quick_select_invalid_rank(n):
    result = QuickSelect().execute([1, 2, 3], n)
    assert not result.ok
    assert result.value is None
    assert isinstance(result.error, InvalidRankError)
    assert result.error.rank == n
    assert result.error.size == 3


def test_quick_select_empty_input_rejects_every_rank():
    assert not QuickSelect().execute([], 1).ok


def test_quick_select_minus_one_is_a_normal_value():
    result = QuickSelect().execute([4, -1, 8], 1)
    assert result.ok
    assert result.value == -1


def test_quick_select_floats():
    assert QuickSelect().execute([2.5, -0.5, 1.25], 2).value == 1.25


def test_quick_select_type_error():
    with pytest.raises(TypeError):
        QuickSelect().execute([1, "a"], 1)
    with pytest.raises(TypeError):
        QuickSelect().execute([1, 2], 1.0)
