import pytest

from dsalab.polynomial import Polynomial

FIRST = [(10, 3), (5, 2), (2, 1), (-7, 0)]
SECOND = [(3, 3), (-5, 1), (4, 0)]


def test_display_of_sample_polynomial():
    assert str(Polynomial(FIRST)) == "10x3+5x2+2x1-7"


def test_sum_of_sample_polynomials():
    assert str(Polynomial(FIRST) + Polynomial(SECOND)) == "13x3+5x2-3x1-3"


def test_terms_round_trip():
    assert list(Polynomial(FIRST)) == FIRST


def test_insert_term_appends_in_order():
    poly = Polynomial()
    poly.insert_term(4, 2)
    poly.insert_term(1, 5)
    assert list(poly) == [(4, 2), (1, 5)]


def test_addition_leaves_operands_unchanged():
    a, b = Polynomial(FIRST), Polynomial(SECOND)
    _ = a + b
    assert list(a) == FIRST
    assert list(b) == SECOND


def test_adding_empty_polynomial_keeps_terms():
    assert list(Polynomial(FIRST) + Polynomial()) == FIRST
    assert list(Polynomial() + Polynomial(SECOND)) == SECOND


def test_trailing_terms_of_right_operand_are_kept():
    result = Polynomial([(1, 4)]) + Polynomial([(2, 3), (3, 0)])
    assert list(result) == [(1, 4), (2, 3), (3, 0)]


@pytest.mark.parametrize(
    "left, right",
    [
        ([(7, 5), (1, 1)], [(2, 4), (6, 0)]),
        ([(1, 2)], [(9, 6), (3, 3)]),
    ],
)
def test_addition_of_disjoint_exponents_commutes(left, right):
    assert list(Polynomial(left) + Polynomial(right)) == list(
        Polynomial(right) + Polynomial(left)
    )


def test_constant_term_shows_only_coefficient():
    assert str(Polynomial([(4, 0)])) == "4"


def test_empty_polynomial_displays_nothing():
    assert str(Polynomial()) == ""


def test_adding_non_polynomial_raises_type_error():
    with pytest.raises(TypeError):
        Polynomial(FIRST) + 3