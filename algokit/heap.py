"""Array-backed max-heap and heap sort."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

__all__ = ["MaxHeap", "heap_sort"]

T = TypeVar("T")


class MaxHeap(Generic[T]):
    """A binary max-heap stored level by level in a list."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for value in values:
            self.push(value)

    def push(self, value: T) -> None:
        """Add ``value``, moving smaller ancestors down to make room."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= value:
                break
            items[index] = items[parent]
            index = parent
        items[index] = value

    def pop(self) -> T:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        top = items[0]
        last = items.pop()
        if not items:
            return top
        items[0] = last
        size = len(items)
        index = 0
        child = 1
        while child < size:
            if child + 1 < size and items[child + 1] > items[child]:
                child += 1
            if items[index] < items[child]:
                items[index], items[child] = items[child], items[index]
                index = child
                child = 2 * index + 1
            else:
                break
        return top

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the stored values in level order."""
        return iter(list(self._items))


def heap_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order using a max-heap."""
    heap = MaxHeap(values)
    descending = [heap.pop() for _ in range(len(heap))]
    descending.reverse()
    return descending