"""A doubly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

__all__ = ["DoublyLinkedList"]

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    prev: Optional["_Node[T]"] = None
    next: Optional["_Node[T]"] = None


class DoublyLinkedList(Generic[T]):
    """A list whose nodes link both forwards and backwards."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _Node[T]) -> T:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def delete_first(self) -> T:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._head)

    def delete_last(self) -> T:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._tail)

    def delete(self, value: T) -> None:
        """Remove the first node holding ``value``."""
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(node)
                return
            node = node.next
        raise ValueError(f"{value!r} is not in the list")

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"