"""Searching and small array problems."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, NamedTuple, Optional, Sequence, TypeVar

__all__ = [
    "Deduplicated",
    "Extremes",
    "linear_search",
    "binary_search",
    "two_sum",
    "max_profit",
    "remove_duplicates",
    "min_max",
]

T = TypeVar("T")


class Deduplicated(NamedTuple):
    """Values left after dropping adjacent duplicates, and how many were dropped."""

    values: list
    removed: int


class Extremes(NamedTuple):
    """The smallest and largest value of a collection."""

    minimum: object
    maximum: object


def linear_search(values: Iterable[T], target: T) -> Optional[int]:
    """Return the index of the first element equal to ``target``, or None."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def binary_search(values: Sequence[T], target: T) -> Optional[int]:
    """Return an index of ``target`` in the ascending ``values``, or None."""
    first, last = 0, len(values) - 1
    while first <= last:
        middle = (first + last) // 2
        current = values[middle]
        if current < target:
            first = middle + 1
        elif current == target:
            return middle
        else:
            last = middle - 1
    return None


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int]:
    """Return indices ``(i, j)``, ``i != j``, whose values add up to ``target``.

    ``i`` is the lowest index that has a partner; ``j`` is the lowest index of
    that partner value other than ``i``.
    """
    items = list(nums)
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(items):
        positions[value].append(index)
    for index, value in enumerate(items):
        for other in positions.get(target - value, ()):
            if other != index:
                return index, other
    raise ValueError("no two numbers add up to the target")


def max_profit(prices: Iterable[int]) -> int:
    """Return the best gain from one buy followed by one later sell; 0 if none."""
    it = iter(prices)
    try:
        lowest = next(it)
    except StopIteration:
        return 0
    best = 0
    for price in it:
        if price > lowest:
            best = max(best, price - lowest)
        else:
            lowest = price
    return best


def remove_duplicates(nums: Iterable[T]) -> Deduplicated:
    """Drop every element equal to the one after it and sort what is left."""
    items = list(nums)
    kept = [current for current, following in zip(items, items[1:]) if current != following]
    if items:
        kept.append(items[-1])
    return Deduplicated(sorted(kept), len(items) - len(kept))


def min_max(values: Iterable[T]) -> Extremes:
    """Return the smallest and the largest of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("min_max() of an empty collection")
    return Extremes(min(items), max(items))