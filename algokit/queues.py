"""Bounded queues and a priority queue."""

from __future__ import annotations

import bisect
from typing import Generic, Iterator, Optional, TypeVar

__all__ = [
    "QueueOverflow",
    "QueueUnderflow",
    "LinearQueue",
    "CircularQueue",
    "PriorityQueue",
]

T = TypeVar("T")

DEFAULT_CAPACITY = 5


class QueueOverflow(OverflowError):
    """Raised when adding to a full queue."""


class QueueUnderflow(IndexError):
    """Raised when taking from an empty queue."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class LinearQueue(Generic[T]):
    """A queue over a fixed run of slots that are never reused.

    Once ``capacity`` values have been enqueued, no more can be added,
    even after some have been taken out.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[T] = []
        self._front = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        if len(self._slots) == self.capacity:
            raise QueueOverflow("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self._front >= len(self._slots):
            raise QueueUnderflow("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __len__(self) -> int:
        return len(self._slots) - self._front


class CircularQueue(Generic[T]):
    """A fixed-size ring buffer queue whose slots are reused."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Optional[T]] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        if self._size == self.capacity:
            raise QueueOverflow("queue overflow")
        self._slots[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self._size == 0:
            raise QueueUnderflow("queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def __len__(self) -> int:
        return self._size


class PriorityQueue(Generic[T]):
    """A queue ordered by ascending priority number.

    A new entry goes ahead of existing entries of the same priority.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[int, T]] = []

    def insert(self, priority: int, data: T) -> None:
        """Add ``data`` with the given ``priority``; lower numbers come out first."""
        index = bisect.bisect_left(self._entries, priority, key=lambda entry: entry[0])
        self._entries.insert(index, (priority, data))

    def pop(self) -> T:
        """Remove and return the data with the lowest priority number."""
        if not self._entries:
            raise QueueUnderflow("empty queue")
        return self._entries.pop(0)[1]

    def __iter__(self) -> Iterator[T]:
        return iter([data for _, data in self._entries])

    def __len__(self) -> int:
        return len(self._entries)