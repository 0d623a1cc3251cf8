"""Polynomials kept as lists of terms ordered by exponent."""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple

__all__ = ["Term", "Polynomial"]


class Term(NamedTuple):
    """One term ``coefficient * x ** exponent``."""

    coefficient: int
    exponent: int

    def __str__(self) -> str:
        return f"{self.coefficient}x^{self.exponent}"


class Polynomial:
    """A sequence of terms, expected in ascending order of exponent."""

    def __init__(self, terms: Iterable[tuple[int, int]] = ()) -> None:
        self._terms: list[Term] = [Term(c, e) for c, e in terms]

    def append(self, coefficient: int, exponent: int) -> None:
        """Add a term at the end."""
        self._terms.append(Term(coefficient, exponent))

    def __add__(self, other: object) -> "Polynomial":
        """Merge two polynomials by exponent, summing terms of equal exponent."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        first, second = self._terms, other._terms
        if not first and not second:
            raise ValueError("adding is not possible: both polynomials are empty")
        merged: list[Term] = []
        i = j = 0
        while i < len(first) and j < len(second):
            a, b = first[i], second[j]
            if a.exponent < b.exponent:
                merged.append(a)
                i += 1
            elif b.exponent < a.exponent:
                merged.append(b)
                j += 1
            else:
                merged.append(Term(a.coefficient + b.coefficient, a.exponent))
                i += 1
                j += 1
        merged.extend(first[i:])
        merged.extend(second[j:])
        return Polynomial(merged)

    def __iter__(self) -> Iterator[Term]:
        return iter(list(self._terms))

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self) -> str:
        return f"Polynomial({[tuple(t) for t in self._terms]!r})"

    def __str__(self) -> str:
        return "\t".join(str(term) for term in self._terms)