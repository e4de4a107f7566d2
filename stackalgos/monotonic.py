"""Monotonic-stack problems: asteroid collisions and next greater/smaller elements."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence

from sortedcontainers import SortedList

_Compare = Callable[[int, int], bool]


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    Positive values move right and negative values move left. When two meet,
    the smaller one explodes; equal sizes destroy each other.
    """
    survivors: list[int] = []
    for asteroid in asteroids:
        if asteroid > 0:
            survivors.append(asteroid)
            continue
        size = abs(asteroid)
        while survivors and 0 < survivors[-1] < size:
            survivors.pop()
        if survivors and survivors[-1] == size:
            survivors.pop()
        elif not survivors or survivors[-1] < 0:
            survivors.append(asteroid)
    return survivors


def _scan_brute(values: Sequence[int], beats: _Compare, circular: bool = False) -> list[int]:
    """First later value that beats each value, checked pairwise, or -1."""
    n = len(values)
    found = []
    for i, value in enumerate(values):
        later = range(i + 1, i + n) if circular else range(i + 1, n)
        candidates = (values[j % n] for j in later)
        found.append(next((c for c in candidates if beats(c, value)), -1))
    return found


def _scan_stack(values: Sequence[int], discard: _Compare, laps: int = 1) -> list[int]:
    """First later value kept by a monotonic stack, or -1.

    ``discard(top, value)`` says whether the stack top can never answer for
    ``value`` or anything left of it; ``laps=2`` wraps around the end.
    """
    n = len(values)
    result = [-1] * n
    stack: list[int] = []
    for i in reversed(range(laps * n)):
        value = values[i % n]
        while stack and discard(stack[-1], value):
            stack.pop()
        if i < n and stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def next_greater_brute(values: Sequence[int]) -> list[int]:
    """For each value, the first strictly greater value to its right, or -1; O(n^2)."""
    return _scan_brute(values, operator.gt)


def next_greater(values: Sequence[int]) -> list[int]:
    """For each value, the first strictly greater value to its right, or -1."""
    return _scan_stack(values, operator.le)


def next_smaller_brute(values: Sequence[int]) -> list[int]:
    """For each value, the first strictly smaller value to its right, or -1; O(n^2)."""
    return _scan_brute(values, operator.lt)


def next_smaller(values: Sequence[int]) -> list[int]:
    """For each value, the first strictly smaller value to its right, or -1."""
    return _scan_stack(values, operator.ge)


def next_greater_circular_brute(values: Sequence[int]) -> list[int]:
    """Next strictly greater value, wrapping around the end, or -1; O(n^2)."""
    return _scan_brute(values, operator.gt, circular=True)


def next_greater_circular(values: Sequence[int]) -> list[int]:
    """Next strictly greater value, wrapping around the end, or -1."""
    return _scan_stack(values, operator.le, laps=2)


def count_greater_to_right_brute(values: Sequence[int]) -> list[int]:
    """For each value, how many strictly greater values lie to its right; O(n^2)."""
    return [
        sum(later > value for later in values[i + 1:])
        for i, value in enumerate(values)
    ]


def count_greater_to_right(values: Sequence[int]) -> list[int]:
    """For each value, how many strictly greater values lie to its right."""
    seen = SortedList()
    counts: list[int] = []
    for value in reversed(values):
        counts.append(len(seen) - seen.bisect_right(value))
        seen.add(value)
    counts.reverse()
    return counts