"""Tests for the dense and bit-packed exponent encodings."""

import itertools

import pytest

from groebner_basis.capabilities import Exponents
from groebner_basis.errors import ExponentRangeError, InvalidConfigurationError
from groebner_basis.exponents import (
    DEGREE_SHIFT, BitPackedExponents, VecExponents, exponent_factory,
)

ENCODINGS = [VecExponents, BitPackedExponents]


def test_vec_arithmetic():
    a, b = VecExponents([2, 0, 1]), VecExponents([1, 3, 0])
    assert a.add(b) == VecExponents([3, 3, 1])
    assert a.lcm(b) == VecExponents([2, 3, 1])
    assert a.sub(VecExponents([1, 0, 1])) == VecExponents([1, 0, 0])
    assert a.degree() == 3
    assert list(a) == [2, 0, 1]


def test_packed_layout():
    e = BitPackedExponents([1, 2, 3])
    assert e.packed == (6 << DEGREE_SHIFT) | (1 << 40) | (2 << 32) | (3 << 24)
    assert e.to_tuple() == (1, 2, 3, 0, 0, 0)
    assert e.degree() == 6
    assert len(e) == 6


@pytest.mark.parametrize("X", ENCODINGS)
def test_sub_rejects_non_divisible(X):
    with pytest.raises(ExponentRangeError):
        X([1, 0, 2]).sub(X([0, 1, 0]))


def test_packed_sub_rebuilds_degree():
    e = BitPackedExponents([3, 2, 1]).sub(BitPackedExponents([1, 1, 1]))
    assert e.degree() == 3
    assert e.to_tuple() == (2, 1, 0, 0, 0, 0)
    assert e == BitPackedExponents([2, 1, 0])


def test_packed_lcm_and_add_rebuild_degree():
    a, b = BitPackedExponents([4, 0, 1]), BitPackedExponents([1, 2, 3])
    assert a.lcm(b).degree() == 9
    assert a.add(b).degree() == 11


@pytest.mark.parametrize("left, right", [
    ([200], [100]),
    ([0, 0, 0, 0, 0, 255], [0, 0, 0, 0, 0, 1]),
    ([0, 128, 0], [0, 128, 0]),
])
def test_packed_add_detects_slot_overflow(left, right):
    with pytest.raises(ExponentRangeError):
        BitPackedExponents(left).add(BitPackedExponents(right))


def test_packed_add_at_slot_limit():
    e = BitPackedExponents([255, 0]).add(BitPackedExponents([0, 255]))
    assert e.to_tuple()[:2] == (255, 255)
    assert e.degree() == 510


def test_packed_limits():
    with pytest.raises(InvalidConfigurationError):
        BitPackedExponents([0] * 7)
    with pytest.raises(InvalidConfigurationError):
        BitPackedExponents([256])
    with pytest.raises(InvalidConfigurationError):
        BitPackedExponents([-1])


def test_vec_rejects_negative_exponents():
    with pytest.raises(ExponentRangeError):
        VecExponents([1, -1])


@pytest.mark.parametrize("X", ENCODINGS)
def test_divisibility_matches_sub(X):
    grid = list(itertools.product(range(3), repeat=3))
    for a in grid:
        for b in grid:
            ea, eb = X(a), X(b)
            divisible = all(x >= y for x, y in zip(a, b))
            assert ea.can_reduce(eb) == divisible
            if divisible:
                assert ea.sub(eb).add(eb) == ea


def test_encodings_agree_on_lex_and_degree():
    grid = list(itertools.product(range(3), repeat=3))
    for a in grid:
        for b in grid:
            vec = VecExponents(a).lex_compare(VecExponents(b))
            packed = BitPackedExponents(a).lex_compare(BitPackedExponents(b))
            assert vec == packed
        assert VecExponents(a).degree() == BitPackedExponents(a).degree()


@pytest.mark.parametrize("X", ENCODINGS)
def test_equality_and_hashing(X):
    assert X([1, 2]) == X([1, 2])
    assert X([1, 2]) != X([2, 1])
    assert len({X([1, 2]), X([1, 2]), X([0, 0])}) == 2
    assert isinstance(X([1]), Exponents)


def test_encodings_are_not_mixed():
    assert VecExponents([1, 0]) != BitPackedExponents([1, 0])


def test_exponent_factory():
    assert exponent_factory("vec", 10) is VecExponents
    assert exponent_factory("packed", 6) is BitPackedExponents
    with pytest.raises(InvalidConfigurationError):
        exponent_factory("packed", 7)
    with pytest.raises(InvalidConfigurationError):
        exponent_factory("sparse", 3)
