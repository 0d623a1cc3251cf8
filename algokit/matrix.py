"""Matrix helpers: reachability, transposition and Pascal's triangle."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, TypeVar

__all__ = ["path_matrix", "transpose", "binomial", "pascal_triangle", "pascal_row"]

T = TypeVar("T")


def path_matrix(adjacency: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the reachability matrix of a square adjacency matrix (Warshall)."""
    path = [[1 if cell else 0 for cell in row] for row in adjacency]
    size = len(path)
    if any(len(row) != size for row in path):
        raise ValueError("adjacency matrix must be square")
    for k in range(size):
        through_k = path[k]
        for row in path:
            if row[k]:
                for j, reachable in enumerate(through_k):
                    if reachable:
                        row[j] = 1
    return path


def transpose(matrix: Iterable[Sequence[T]]) -> list[list[T]]:
    """Return the transpose of a rectangular matrix."""
    rows = [list(row) for row in matrix]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    return [list(column) for column in zip(*rows)]


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient ``C(n, k)``."""
    if n < 0 or k < 0:
        raise ValueError("binomial coefficients need non-negative arguments")
    return math.comb(n, k)


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("the number of rows cannot be negative")
    triangle = []
    for n in range(1, num_rows + 1):
        row = []
        combination = 1
        for k in range(1, n + 1):
            row.append(combination)
            combination = combination * (n - k) // k
        triangle.append(row)
    return triangle


def pascal_row(row_index: int) -> list[int]:
    """Return row ``row_index`` (counting from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("the row index cannot be negative")
    return [binomial(row_index, k) for k in range(row_index + 1)]