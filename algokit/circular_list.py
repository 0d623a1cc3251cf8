"""A singly linked circular list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

__all__ = ["CircularList"]

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class CircularList(Generic[T]):
    """A list whose last node links back to the first.

    Only the last node is kept; the first is always the one after it.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _remove_after(self, prev: _Node[T]) -> T:
        node = prev.next
        if node is prev:
            self._tail = None
        else:
            prev.next = node.next
            if node is self._tail:
                self._tail = prev
        self._size -= 1
        return node.value

    def delete_first(self) -> T:
        """Remove and return the first value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        return self._remove_after(self._tail)

    def delete_last(self) -> T:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        prev = self._tail
        while prev.next is not self._tail:
            prev = prev.next
        return self._remove_after(prev)

    def delete(self, value: T) -> None:
        """Remove the first node holding ``value``."""
        if self._tail is not None:
            prev = self._tail
            for _ in range(self._size):
                if prev.next.value == value:
                    self._remove_after(prev)
                    return
                prev = prev.next
        raise ValueError(f"{value!r} is not in the list")

    def __iter__(self) -> Iterator[T]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"