"""Subarray minimum/maximum sums and trapped rain water."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import accumulate

_MOD = 10**9 + 7


def _boundaries(
    values: Sequence[int],
    order: Sequence[int],
    should_pop: Callable[[int, int], bool],
    missing: int,
) -> list[int]:
    result = [missing] * len(values)
    stack: list[int] = []
    for i in order:
        while stack and should_pop(values[stack[-1]], values[i]):
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def next_smaller_indices(values: Sequence[int]) -> list[int]:
    """Index of the next strictly smaller value to the right, or ``len(values)``."""
    n = len(values)
    return _boundaries(values, range(n - 1, -1, -1), lambda top, v: top >= v, n)


def previous_smaller_indices(values: Sequence[int]) -> list[int]:
    """Index of the previous smaller-or-equal value to the left, or -1."""
    return _boundaries(values, range(len(values)), lambda top, v: top > v, -1)


def next_greater_indices(values: Sequence[int]) -> list[int]:
    """Index of the next strictly greater value to the right, or ``len(values)``."""
    n = len(values)
    return _boundaries(values, range(n - 1, -1, -1), lambda top, v: top <= v, n)


def previous_greater_indices(values: Sequence[int]) -> list[int]:
    """Index of the previous greater-or-equal value to the left, or -1."""
    return _boundaries(values, range(len(values)), lambda top, v: top < v, -1)


def sum_subarray_minimums_brute(values: Sequence[int]) -> int:
    """Sum of the minimum of every contiguous subarray; O(n^2), not reduced."""
    total = 0
    for start in range(len(values)):
        total += sum(accumulate(values[start:], min))
    return total


def _contribution_sum(
    values: Sequence[int], before: Sequence[int], after: Sequence[int]
) -> int:
    total = 0
    for i, value in enumerate(values):
        left = i - before[i]
        right = after[i] - i
        total = (total + (right * left % _MOD) * value % _MOD) % _MOD
    return total


def sum_subarray_minimums(values: Sequence[int]) -> int:
    """Sum of the minimum of every contiguous subarray, modulo 10**9 + 7."""
    return _contribution_sum(
        values, previous_smaller_indices(values), next_smaller_indices(values)
    )


def sum_subarray_maximums(values: Sequence[int]) -> int:
    """Sum of the maximum of every contiguous subarray, modulo 10**9 + 7."""
    return _contribution_sum(
        values, previous_greater_indices(values), next_greater_indices(values)
    )


def sum_subarray_ranges_brute(values: Sequence[int]) -> int:
    """Sum of (max - min) over every contiguous subarray; O(n^2)."""
    total = 0
    for start in range(len(values)):
        tail = values[start:]
        for largest, smallest in zip(accumulate(tail, max), accumulate(tail, min)):
            total += largest - smallest
    return total


def sum_subarray_ranges(values: Sequence[int]) -> int:
    """Sum of (max - min) over every subarray, as the difference of the reduced sums."""
    return sum_subarray_maximums(values) - sum_subarray_minimums(values)


def trapped_water_brute(heights: Sequence[int]) -> int:
    """Water held between bars, scanning both sides of every bar; O(n^2)."""
    total = 0
    for i in range(1, len(heights)):
        left = max(0, max(heights[: i + 1]))
        right = max(0, max(heights[i:]))
        total += min(left, right) - heights[i]
    return total


def trapped_water_prefix(heights: Sequence[int]) -> int:
    """Water held between bars, using prefix and suffix maxima."""
    if not heights:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max, right_max, heights)
    )


def trapped_water(heights: Sequence[int]) -> int:
    """Water held between bars, with two pointers moving inward."""
    total = 0
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    while left < right:
        left_max = max(left_max, heights[left])
        right_max = max(right_max, heights[right])
        if left_max < right_max:
            total += left_max - heights[left]
            left += 1
        else:
            total += right_max - heights[right]
            right -= 1
    return total