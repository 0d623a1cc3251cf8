import pytest

from algokit.polynomial import Polynomial, Term

FIRST = [(3, 2), (2, 4), (7, 6), (9, 9)]
SECOND = [(1, 1), (3, 3), (2, 6), (3, 8)]


def _build(terms):
    poly = Polynomial()
    for coefficient, exponent in terms:
        poly.append(coefficient, exponent)
    return poly


def test_term_str():
    assert str(Term(3, 2)) == "3x^2"


def test_append_and_iterate():
    poly = _build(FIRST)
    assert len(poly) == 4
    assert list(poly) == [Term(c, e) for c, e in FIRST]


def test_add_worked_example():
    total = _build(FIRST) + _build(SECOND)
    assert list(total) == [
        Term(1, 1),
        Term(3, 2),
        Term(3, 3),
        Term(2, 4),
        Term(9, 6),
        Term(3, 8),
        Term(9, 9),
    ]


def test_add_is_commutative():
    a, b = _build(FIRST), _build(SECOND)
    assert a + b == b + a


def test_add_keeps_exponents_ascending_and_sums_coefficients():
    total = Polynomial(FIRST) + Polynomial(SECOND)
    exponents = [t.exponent for t in total]
    assert exponents == sorted(set(exponents))
    assert sum(t.coefficient for t in total) == sum(c for c, _ in FIRST + SECOND)


def test_add_does_not_modify_operands():
    a, b = Polynomial(FIRST), Polynomial(SECOND)
    a + b
    assert list(a) == [Term(c, e) for c, e in FIRST]
    assert list(b) == [Term(c, e) for c, e in SECOND]


def test_add_with_one_empty():
    a = Polynomial(FIRST)
    assert Polynomial() + a == a
    assert a + Polynomial() == a


def test_add_both_empty():
    with pytest.raises(ValueError):
        Polynomial() + Polynomial()


def test_add_non_polynomial():
    with pytest.raises(TypeError):
        Polynomial(FIRST) + 3


def test_str_joins_terms():
    assert str(Polynomial([(3, 2), (2, 4)])) == "3x^2\t2x^4"