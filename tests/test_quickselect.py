import functools
import random

import pytest

from spatial_dbscan.clustering.algorithms.quickselect import quick_select, SAMPLE_THRESHOLD


def assert_selected(arr, original, k, left, right):
    """Checks the rank contract of quick_select on arr[left:right + 1]."""
    expected = sorted(original[left:right + 1])
    assert arr[k] == expected[k - left]
    assert all(x <= arr[k] for x in arr[left:k])
    assert all(x >= arr[k] for x in arr[k + 1:right + 1])
    # Same multiset inside the range, untouched outside it
    assert sorted(arr[left:right + 1]) == expected
    assert arr[:left] == original[:left]
    assert arr[right + 1:] == original[right + 1:]


def test_documented_example():
    arr = [65, 28, 59, 33, 21, 56, 22, 95, 50, 12, 90, 53, 28, 77, 39]
    quick_select(arr, 8)
    assert arr[8] == 53
    assert all(x <= 53 for x in arr[:8])
    assert all(x >= 53 for x in arr[9:])


def test_empty_list_is_noop():
    arr = []
    quick_select(arr, 0)
    assert arr == []


def test_single_element_range_is_noop():
    arr = [5, 3, 9, 1]
    quick_select(arr, 2, 2, 2)
    assert arr == [5, 3, 9, 1]


@pytest.mark.parametrize("size", [1, 2, 3, 10, 100, 601, 602, 2500])
def test_every_rank_small_and_large(size):
    rng = random.Random(size)
    original = [rng.randint(0, size // 2 + 1) for _ in range(size)]
    ranks = range(size) if size <= 100 else [0, size // 3, size // 2, size - 1]
    for k in ranks:
        arr = list(original)
        quick_select(arr, k)
        assert_selected(arr, original, k, 0, size - 1)


def test_sub_range_leaves_outside_untouched():
    rng = random.Random(7)
    original = [rng.random() for _ in range(SAMPLE_THRESHOLD * 3)]
    left, right = 150, len(original) - 200
    k = left + (right - left) // 2
    arr = list(original)
    quick_select(arr, k, left, right)
    assert_selected(arr, original, k, left, right)


def test_custom_comparator_descending():
    arr = [4, 1, 7, 3, 9, 2]
    quick_select(arr, 0, compare=lambda a, b: b - a)
    assert arr[0] == 9


def test_comparator_on_records():
    records = [{'x': x} for x in [5.0, -1.0, 3.5, 3.5, 8.0, 0.0, 2.0]]
    cmp = functools.partial(lambda key, a, b: (a[key] > b[key]) - (a[key] < b[key]), 'x')
    quick_select(records, 3, compare=cmp)
    assert records[3]['x'] == 3.5


def test_all_equal_elements():
    arr = [2] * 1000
    quick_select(arr, 500)
    assert arr == [2] * 1000


def test_unorderable_without_comparator_raises():
    arr = [object(), object()]
    with pytest.raises(TypeError):
        quick_select(arr, 1)
