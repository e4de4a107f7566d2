import pytest
from hypothesis import given
from hypothesis import strategies as st

from stackalgos.subarrays import (
    next_greater_indices,
    next_smaller_indices,
    previous_greater_indices,
    previous_smaller_indices,
    sum_subarray_maximums,
    sum_subarray_minimums,
    sum_subarray_minimums_brute,
    sum_subarray_ranges,
    sum_subarray_ranges_brute,
    trapped_water,
    trapped_water_brute,
    trapped_water_prefix,
)

MOD = 10**9 + 7
small_lists = st.lists(st.integers(min_value=0, max_value=100), max_size=30)
small_nonempty = st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=30)


@given(small_lists)
def test_next_smaller_indices_invariant(values):
    n = len(values)
    for i, j in enumerate(next_smaller_indices(values)):
        assert i < j <= n
        assert all(v >= values[i] for v in values[i + 1:j])
        assert j == n or values[j] < values[i]


@given(small_lists)
def test_previous_smaller_indices_invariant(values):
    for i, j in enumerate(previous_smaller_indices(values)):
        assert -1 <= j < i
        assert all(v > values[i] for v in values[j + 1:i])
        assert j == -1 or values[j] <= values[i]


@given(small_lists)
def test_next_greater_indices_invariant(values):
    n = len(values)
    for i, j in enumerate(next_greater_indices(values)):
        assert i < j <= n
        assert all(v <= values[i] for v in values[i + 1:j])
        assert j == n or values[j] > values[i]


@given(small_lists)
def test_previous_greater_indices_invariant(values):
    for i, j in enumerate(previous_greater_indices(values)):
        assert -1 <= j < i
        assert all(v < values[i] for v in values[j + 1:i])
        assert j == -1 or values[j] >= values[i]


def test_sum_subarray_minimums_worked_example():
    assert sum_subarray_minimums([3, 1, 2, 4]) == 17


@given(small_lists)
def test_sum_subarray_minimums_matches_brute(values):
    assert sum_subarray_minimums(values) == sum_subarray_minimums_brute(values)


@given(st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=20))
def test_constant_values_give_equal_min_and_max_sums(value, n):
    values = [value] * n
    assert sum_subarray_maximums(values) == sum_subarray_minimums(values)
    assert sum_subarray_ranges(values) == 0


@given(st.lists(st.integers(min_value=0, max_value=10**9), max_size=30))
def test_sums_are_reduced_modulo(values):
    assert 0 <= sum_subarray_minimums(values) < MOD
    assert 0 <= sum_subarray_maximums(values) < MOD


@given(small_lists)
def test_maximums_are_at_least_minimums(values):
    assert sum_subarray_maximums(values) >= sum_subarray_minimums(values)


def test_sum_subarray_ranges_worked_example():
    assert sum_subarray_ranges([1, 2, 3]) == 4


@given(small_lists)
def test_sum_subarray_ranges_matches_brute(values):
    assert sum_subarray_ranges(values) == sum_subarray_ranges_brute(values)


def test_trapped_water_worked_example():
    heights = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    assert trapped_water(heights) == 6


@given(small_nonempty)
def test_trapped_water_variants_agree(heights):
    expected = trapped_water_brute(heights)
    assert trapped_water_prefix(heights) == expected
    assert trapped_water(heights) == expected


@given(small_lists)
def test_monotone_heights_hold_no_water(heights):
    ascending = sorted(heights)
    descending = ascending[::-1]
    assert trapped_water(ascending) == 0
    assert trapped_water(descending) == 0
    assert trapped_water_prefix(ascending) == 0


@given(small_nonempty)
def test_trapped_water_is_bounded_by_container(heights):
    water = trapped_water(heights)
    assert 0 <= water <= max(heights) * len(heights)


@pytest.mark.parametrize(
    "function", [trapped_water, trapped_water_brute, trapped_water_prefix]
)
def test_no_bars_hold_no_water(function):
    assert function([]) == 0