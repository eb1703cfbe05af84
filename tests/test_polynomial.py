"""Tests for Polynomial canonical form, arithmetic and formatting."""

import pytest

from groebner_basis.core import Polynomial, PolynomialSystem, Term, format_polynomial
from groebner_basis.errors import InvalidConfigurationError
from groebner_basis.exponents import BitPackedExponents, VecExponents
from groebner_basis.families import symmetric_system
from groebner_basis.fields import DoubleField, IntModP
from groebner_basis.orders import TermOrder

D = DoubleField
V = VecExponents


def m13(v):
    return IntModP(v, 13)


def test_terms_are_merged_and_sorted():
    p = Polynomial([(D(1.0), V((0, 1))), (D(1.0), V((1, 0))), (D(2.0), V((1, 0)))])
    assert p.terms == (Term(D(3.0), V((1, 0))), Term(D(1.0), V((0, 1))))
    assert p.leading_term == Term(D(3.0), V((1, 0)))


def test_cancelling_terms_vanish():
    p = Polynomial([(D(1.0), V((1, 0))), (D(-1.0), V((1, 0)))])
    assert p.is_zero()
    assert not p
    assert len(p) == 0


def test_coefficients_are_filtered_and_rounded():
    p = Polynomial([(D(0.005), V((2, 0))), (D(1.234567), V((0, 1)))])
    assert p.terms == (Term(D(1.23457), V((0, 1))),)


def test_canonical_form_is_idempotent():
    p = Polynomial([(D(1.0 / 3.0), V((1, 2))), (D(-2.718281828), V((2, 0))),
                    (D(0.5), V((0, 0)))], TermOrder.GRLEX)
    assert Polynomial(p.terms, p.order).terms == p.terms


def test_construction_order_does_not_matter():
    a = Polynomial([(m13(1), V((1, 0))), (m13(2), V((0, 1)))])
    b = Polynomial([(m13(2), V((0, 1))), (m13(1), V((1, 0)))])
    assert a == b
    assert hash(a) == hash(b)


def test_order_changes_leading_term():
    terms = [(D(1.0), V((1, 0, 0))), (D(1.0), V((0, 2, 0)))]
    assert Polynomial(terms, "lex").leading_term.exponents == V((1, 0, 0))
    assert Polynomial(terms, "grlex").leading_term.exponents == V((0, 2, 0))


def test_add_and_subtract():
    p = Polynomial([(m13(1), V((1, 0))), (m13(2), V((0, 1)))])
    q = Polynomial([(m13(3), V((0, 1))), (m13(4), V((0, 0)))])
    assert p.add(q) == Polynomial([(m13(1), V((1, 0))), (m13(5), V((0, 1))),
                                   (m13(4), V((0, 0)))])
    assert p.subtract(q) == Polynomial([(m13(1), V((1, 0))), (m13(12), V((0, 1))),
                                        (m13(9), V((0, 0)))])
    assert p.subtract(p).is_zero()


def test_multiply_by_term():
    p = Polynomial([(m13(1), V((1, 0, 0))), (m13(2), V((0, 1, 0)))])
    product = p.multiply_by_term((m13(3), V((1, 0, 1))))
    assert product.terms == (Term(m13(3), V((2, 0, 1))), Term(m13(6), V((1, 1, 1))))


def test_zero_polynomial_has_no_leading_term():
    with pytest.raises(ValueError):
        Polynomial().leading_term


@pytest.mark.parametrize("item", [
    (1.0, V((1, 0))),
    (D(1.0), (1, 0)),
    42,
    (D(1.0), V((1, 0)), "extra"),
])
def test_invalid_terms_are_rejected(item):
    with pytest.raises(InvalidConfigurationError):
        Polynomial([item])


def test_inspection_helpers():
    p = Polynomial([(m13(5), V((2, 1))), (m13(1), V((0, 0)))])
    assert p.degree() == 3
    assert p.monomials() == [(2, 1), (0, 0)]
    assert p.coefficients() == [m13(5), m13(1)]
    assert p.to_pairs() == [(5.0, [2, 1]), (1.0, [0, 0])]
    assert Polynomial().degree() == 0


def test_formatter():
    p = Polynomial([(m13(1), V((2, 0))), (m13(12), V((0, 0)))])
    assert format_polynomial(p) == "1*x0^2 + 12"
    assert p.format(("x", "y")) == "1*x^2 + 12"
    assert str(Polynomial()) == "0"
    q = Polynomial([(D(2.5), V((1, 1)))])
    assert q.format(("x", "y")) == "2.5*x*y"


def test_packed_terms_format_like_vec_terms():
    vec = Polynomial([(m13(3), V((1, 0, 2)))])
    packed = Polynomial([(m13(3), BitPackedExponents((1, 0, 2)))])
    assert vec.format(("x", "y", "z")) == packed.format(("x", "y", "z")) == "3*x*z^2"


def test_system_evaluate_and_degree():
    system = symmetric_system("double")
    assert system.num_vars == 3
    assert system.max_degree() == 3
    assert system.evaluate((1.0, -1.0, 0.0)) == [0.0, -1.0, 0.0]
    assert system.formatted()[2] == "1.0*x + 1.0*y + 1.0*z"


def test_system_rejects_mixed_orders():
    a = Polynomial([(D(1.0), V((1, 0)))], TermOrder.LEX)
    b = Polynomial([(D(1.0), V((0, 1)))], TermOrder.GRLEX)
    with pytest.raises(InvalidConfigurationError):
        PolynomialSystem("mixed", 2, [a, b])


def test_system_default_names():
    a = Polynomial([(D(1.0), V((1, 0)))])
    system = PolynomialSystem("one", 2, [a])
    assert system.var_names == ("x0", "x1")
    assert system.order is TermOrder.LEX
