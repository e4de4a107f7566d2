"""FIFO queues backed by a circular array, a linked list and two stacks."""

from __future__ import annotations

from typing import Optional

from .stacks import _Node


class QueueFullError(OverflowError):
    """Raised when pushing onto a bounded queue that is already full."""


class QueueEmptyError(IndexError):
    """Raised when popping or peeking an empty queue."""


def _require(present: object) -> None:
    if not present:
        raise QueueEmptyError("Queue is empty")


class ArrayQueue:
    """A queue held in a circular array of fixed capacity."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._slots: list[Optional[int]] = [None] * capacity
        self._start = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: int) -> None:
        if self._size == self._capacity:
            raise QueueFullError("Queue is full")
        self._slots[(self._start + self._size) % self._capacity] = value
        self._size += 1

    def pop(self) -> int:
        value = self.peek()
        self._slots[self._start] = None
        self._size -= 1
        self._start = 0 if self._size == 0 else (self._start + 1) % self._capacity
        return value

    def peek(self) -> int:
        _require(self._size)
        return self._slots[self._start]

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size


class LinkedQueue:
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def push(self, value: int) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> int:
        value = self.peek()
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return value

    def peek(self) -> int:
        _require(self._head)
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size


class StackQueue:
    """A queue kept in one stack with the oldest item on top; pushes cost O(n)."""

    def __init__(self) -> None:
        self._main: list[int] = []
        self._spare: list[int] = []

    def push(self, value: int) -> None:
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def pop(self) -> int:
        value = self.peek()
        self._main.pop()
        return value

    def peek(self) -> int:
        _require(self._main)
        return self._main[-1]

    def is_empty(self) -> bool:
        return not self._main

    def __len__(self) -> int:
        return len(self._main)


class AmortizedStackQueue:
    """A queue over an inbox and an outbox stack; each item moves at most once."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def push(self, value: int) -> None:
        self._inbox.append(value)

    def pop(self) -> int:
        value = self.peek()
        self._outbox.pop()
        return value

    def peek(self) -> int:
        if not self._outbox:
            self._outbox.extend(reversed(self._inbox))
            self._inbox.clear()
        _require(self._outbox)
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not (self._inbox or self._outbox)

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)