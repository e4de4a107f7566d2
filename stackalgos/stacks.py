"""LIFO stacks backed by a bounded array, a linked list and a single queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


class StackOverflowError(OverflowError):
    """Raised when pushing onto a bounded stack that is already full."""


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


@dataclass(slots=True)
class _Node:
    value: int
    next: Optional[_Node] = None


def _require(present: object, message: str = "Stack is empty") -> None:
    if not present:
        raise StackEmptyError(message)


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: int) -> None:
        if len(self._items) >= self._capacity:
            raise StackOverflowError("Stack Overflow")
        self._items.append(value)

    def pop(self) -> int:
        _require(self._items, "Stack Underflow")
        return self._items.pop()

    def peek(self) -> int:
        _require(self._items, "Stack is empty!")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack:
    """An unbounded stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: int) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        value = self.peek()
        self._top = self._top.next
        self._size -= 1
        return value

    def peek(self) -> int:
        _require(self._top)
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size


class QueueStack:
    """A stack that keeps its items in one FIFO queue, newest at the front."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, value: int) -> None:
        self._queue.append(value)
        self._queue.rotate(1)

    def pop(self) -> int:
        _require(self._queue)
        return self._queue.popleft()

    def peek(self) -> int:
        _require(self._queue)
        return self._queue[0]

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)