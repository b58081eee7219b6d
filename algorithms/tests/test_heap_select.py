from collections import Counter

import pytest

from algorithms.selection.advanced.heap_select import HeapSelect


def _is_max_heap(items):
    return all(
        items[i] >= items[child]
        for i in range(len(items))
        for child in (2 * i + 1, 2 * i + 2)
        if child < len(items)
    )


def test_heap_select_basic():
    data = [3, 1, 4, 1, 5, 9, 2, 6]
    original = list(data)
    selector = HeapSelect()
    assert selector.execute(data, 1).value == 1
    assert selector.execute(data, 4).value == 3
    assert selector.execute(data, 8).value == 9
    assert data == original


def test_heap_select_duplicates():
    data = [5, 2, 2, 1, 1, 3, 3, 3]
    assert HeapSelect().execute(data, 1).value == 1
    assert HeapSelect().execute(data, 5).value == 3


@pytest.mark.parametrize("k", range(1, 9))
def test_heap_select_sorted_and_reverse(k):
    assert HeapSelect().execute(list(range(1, 9)), k).value == k
    assert HeapSelect().execute(list(range(8, 0, -1)), k).value == k


@pytest.mark.parametrize("n", [1, 3, 6, 10])
def test_heap_select_prefix_is_heap_of_smallest(n):
    data = [10, 4, 7, 1, 9, 3, 8, 2, 6, 5]
    result = HeapSelect().execute(data, n)
    assert Counter(result.prefix) == Counter(sorted(data)[:n])
    assert _is_max_heap(result.prefix)
    assert result.working[0] == result.value


def test_heap_select_single_element():
    assert HeapSelect().execute([42], 1).value == 42


@pytest.mark.parametrize("n", [0, 5])
def test_heap_select_invalid_rank(n):
    result = HeapSelect().execute([1, 2, 3], n)
    assert not result.ok
    assert result.working == ()


def test_heap_select_type_error():
    with pytest.raises(TypeError):
        HeapSelect().execute(["b", "a"], 1)
