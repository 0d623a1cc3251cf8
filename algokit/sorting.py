"""Simple comparison sorts. Each returns a new ascending list."""

from __future__ import annotations

from typing import Iterable, TypeVar

__all__ = [
    "exchange_sort",
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "quick_sort",
]

T = TypeVar("T")


def exchange_sort(values: Iterable[T]) -> list[T]:
    """Sort by comparing each position with every later one and swapping."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        for j in range(i + 1, n):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        for j in range(n - 1 - i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving each element left until it is in place."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by swapping the smallest remaining element into each position."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _partition(items: list, left: int, right: int) -> int:
    pivot = items[left]
    i, j = left, right
    while i < j:
        while i <= right and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[left], items[j] = items[j], items[left]
    return j


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort with quicksort, taking the first element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            mid = _partition(items, left, right)
            pending.append((left, mid - 1))
            pending.append((mid + 1, right))
    return items