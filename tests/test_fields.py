"""Unit tests for the coefficient fields and prime helpers."""

import numpy as np
import pytest

from groebner_basis.capabilities import FieldElement, MagnitudeElement, OrderedElement
from groebner_basis.errors import (
    DivisionByZeroError, FieldArithmeticError, InvalidConfigurationError,
    NoModularInverseError,
)
from groebner_basis.fields import (
    DoubleField, IntModP, SingleField, coefficient_factory, is_prime, round_half_away,
)


def test_intmodp_reduces_values_into_range():
    assert IntModP(15, 13).value == 2
    assert IntModP(-1, 13).value == 12
    assert IntModP(0, 13).is_zero()


def test_intmodp_arithmetic():
    a, b = IntModP(5, 13), IntModP(11, 13)
    assert a + b == IntModP(3, 13)
    assert a - b == IntModP(7, 13)
    assert a * b == IntModP(3, 13)
    assert (a / b) * b == a
    assert IntModP(4, 13).inverse() == IntModP(10, 13)


def test_intmodp_division_by_zero_reports_modulus():
    with pytest.raises(DivisionByZeroError) as info:
        IntModP(3, 13) / IntModP(0, 13)
    assert info.value.modulus == 13
    assert "mod 13" in str(info.value)
    assert isinstance(info.value, ZeroDivisionError)


def test_intmodp_without_inverse():
    with pytest.raises(NoModularInverseError) as info:
        IntModP(3, 12) / IntModP(4, 12)
    assert info.value.value == 4
    assert info.value.modulus == 12


def test_intmodp_rejects_mixed_moduli_and_bad_modulus():
    with pytest.raises(InvalidConfigurationError):
        IntModP(1, 13) + IntModP(1, 7)
    with pytest.raises(InvalidConfigurationError):
        IntModP(1, 1)


def test_float_fields_keep_their_precision():
    s = SingleField(0.1) + SingleField(0.2)
    d = DoubleField(0.1) + DoubleField(0.2)
    assert isinstance(s.value, np.float32)
    assert isinstance(d.value, np.float64)
    with pytest.raises(InvalidConfigurationError):
        SingleField(1.0) + DoubleField(1.0)


def test_float_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        DoubleField(1.0) / DoubleField(0.0)


@pytest.mark.parametrize("value, expected", [
    (0.005, None),
    (0.01, None),
    (-0.0099, None),
    (1.234567, 1.23457),
    (-2.0000049, -2.0),
    (0.123455, 0.12346),
    (-0.123455, -0.12346),
])
def test_double_canonical_rounds_and_drops(value, expected):
    c = DoubleField(value).canonical()
    if expected is None:
        assert c is None
    else:
        assert c == DoubleField(expected)


@pytest.mark.parametrize("cls", [DoubleField, SingleField])
def test_canonical_is_idempotent(cls):
    for v in (1.0 / 3.0, -7.123456789, 123.456789, 0.0123456):
        once = cls(v).canonical()
        assert once.canonical() == once


def test_intmodp_canonical_drops_only_zero():
    assert IntModP(13, 13).canonical() is None
    assert IntModP(1, 13).canonical() == IntModP(1, 13)


def test_ordering_and_magnitude():
    assert DoubleField(1.0) < DoubleField(2.0)
    assert IntModP(3, 13) > IntModP(2, 13)
    assert abs(DoubleField(-2.5)) == DoubleField(2.5)
    assert DoubleField(4.0).sqrt() == DoubleField(2.0)
    with pytest.raises(FieldArithmeticError):
        DoubleField(-4.0).sqrt()
    with pytest.raises(NotImplementedError):
        IntModP(4, 13).sqrt()


def test_capability_protocols():
    for value in (DoubleField(1.0), SingleField(1.0), IntModP(1, 13)):
        assert isinstance(value, FieldElement)
        assert isinstance(value, OrderedElement)
        assert isinstance(value, MagnitudeElement)
    assert not isinstance(1.0, FieldElement)


def test_coercions_keep_the_field_context():
    c = IntModP(5, 7)
    assert c.zero() == IntModP(0, 7)
    assert c.one() == IntModP(1, 7)
    assert c.from_int(9) == IntModP(2, 7)
    assert c.from_float(3.9) == IntModP(3, 7)
    assert DoubleField(2.0).from_int(3).to_float() == 3.0


def test_coefficient_factory():
    assert coefficient_factory("double")(1.5) == DoubleField(1.5)
    assert coefficient_factory("single")(1.5) == SingleField(1.5)
    assert coefficient_factory("modp", 13)(20) == IntModP(7, 13)
    with pytest.raises(InvalidConfigurationError):
        coefficient_factory("modp")
    with pytest.raises(InvalidConfigurationError):
        coefficient_factory("rational")


@pytest.mark.parametrize("n, expected", [
    (0, False), (1, False), (2, True), (3, True), (4, False),
    (12, False), (13, True), (7917, False), (7919, True),
])
def test_is_prime(n, expected):
    assert is_prime(n) == expected


@pytest.mark.parametrize("value, expected", [
    (0.123455, 0.12346),
    (-0.123455, -0.12346),
    (1.000004, 1.0),
    (1.000006, 1.00001),
    (7.0, 7.0),
])
def test_round_half_away_from_zero(value, expected):
    assert round_half_away(value) == expected


def test_round_half_away_differs_from_builtin_round():
    assert round(0.123455, 5) == 0.12345
    assert round_half_away(0.123455) == 0.12346
    assert round_half_away(0.5, 0) == 1.0
    assert round_half_away(-1.5, 0) == -2.0


def test_single_field_canonical_value():
    assert SingleField(0.123455).canonical() == SingleField(0.12346)
