"""Singly linked lists: an append-only list, a sorted list and node helpers."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

__all__ = ["Node", "LinkedList", "SortedList", "has_cycle", "merge_sorted"]

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of a singly linked chain."""

    value: T
    next: Optional["Node[T]"] = None


def _nodes(head: Optional[Node[T]]) -> Iterator[Node[T]]:
    node = head
    while node is not None:
        yield node
        node = node.next


class LinkedList(Generic[T]):
    """A singly linked list with appending and deletion at either end or by value."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[Node[T]] = None
        for value in values:
            self.append(value)

    @property
    def head(self) -> Optional[Node[T]]:
        """The first node, or None for an empty list."""
        return self._head

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        node = Node(value)
        if self._head is None:
            self._head = node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node

    def delete_first(self) -> T:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        node = self._head
        self._head = node.next
        return node.value

    def delete_last(self) -> T:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        if self._head.next is None:
            return self.delete_first()
        prev = self._head
        while prev.next is not None and prev.next.next is not None:
            prev = prev.next
        last = prev.next
        prev.next = None
        return last.value

    def delete(self, value: T) -> None:
        """Remove the first node holding ``value``."""
        prev: Optional[Node[T]] = None
        for node in _nodes(self._head):
            if node.value == value:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                return
            prev = node
        raise ValueError(f"{value!r} is not in the list")

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in _nodes(self._head))

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self._head))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


class SortedList(Generic[T]):
    """A list that keeps its values in ascending order as they are inserted."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for value in values:
            self.insert(value)

    def insert(self, value: T) -> None:
        """Insert ``value`` after every value not greater than it."""
        bisect.insort_right(self._items, value)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SortedList({self._items!r})"


def has_cycle(head: Optional[Node]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops back."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def merge_sorted(first: Optional[Node[T]], second: Optional[Node[T]]) -> Optional[Node[T]]:
    """Splice two ascending chains into one and return its head.

    The nodes themselves are relinked; on equal values the node of ``first`` comes first.
    """
    anchor: Node = Node(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next