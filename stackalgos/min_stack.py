"""Stacks that report their minimum in constant time."""

from __future__ import annotations

from .stacks import StackEmptyError


class MinStack:
    """A stack that stores each value alongside the minimum beneath it."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def _last(self) -> tuple[int, int]:
        if not self._entries:
            raise StackEmptyError("Stack is empty")
        return self._entries[-1]

    def push(self, value: int) -> None:
        minimum = min(value, self._entries[-1][1]) if self._entries else value
        self._entries.append((value, minimum))

    def pop(self) -> int:
        value, _ = self._last()
        self._entries.pop()
        return value

    def top(self) -> int:
        return self._last()[0]

    def get_min(self) -> int:
        return self._last()[1]

    def __len__(self) -> int:
        return len(self._entries)


class EncodedMinStack:
    """A min-stack using one slot per item.

    A value below the current minimum is stored as ``2 * value - minimum``,
    which lets the previous minimum be recovered when it is popped.
    """

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minimum: int | None = None

    def push(self, value: int) -> None:
        if self._minimum is None:
            self._minimum = value
            self._items.append(value)
        elif value >= self._minimum:
            self._items.append(value)
        else:
            self._items.append(2 * value - self._minimum)
            self._minimum = value

    def pop(self) -> int:
        value = self.top()
        stored = self._items.pop()
        if stored < self._minimum:
            self._minimum = 2 * self._minimum - stored
        if not self._items:
            self._minimum = None
        return value

    def top(self) -> int:
        minimum = self.get_min()
        return max(self._items[-1], minimum)

    def get_min(self) -> int:
        if self._minimum is None:
            raise StackEmptyError("Stack is empty")
        return self._minimum

    def __len__(self) -> int:
        return len(self._items)