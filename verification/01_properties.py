"""
GROEBNER BASIS: Structural Properties
=====================================

Computational verification of the properties every component must keep:
divisibility, cross-encoding agreement, canonicalization idempotence,
reduction idempotence and zero absorption.
"""

import os
import sys
from itertools import product

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from groebner_basis import (
    BitPackedExponents, DoubleField, IntModP, Polynomial, TermOrder,
    VecExponents, random_system, reduce_polynomial,
)


# =====================================================================
# PROPERTY 1: Divisibility in both encodings
# =====================================================================

def check_divisibility():
    grid = list(product(range(3), repeat=3))
    checked = 0
    for a in grid:
        for b in grid:
            expected = all(x >= y for x, y in zip(a, b))
            vec = VecExponents(a).can_reduce(VecExponents(b))
            packed = BitPackedExponents(a).can_reduce(BitPackedExponents(b))
            assert vec == expected and packed == expected, (a, b)
            checked += 1
    return checked


# =====================================================================
# PROPERTY 2: Encodings agree on every operation
# =====================================================================

def check_encodings_agree():
    grid = list(product(range(4), repeat=3))
    for a in grid:
        for b in grid:
            va, vb = VecExponents(a), VecExponents(b)
            pa, pb = BitPackedExponents(a), BitPackedExponents(b)
            assert va.add(vb).to_tuple() == pa.add(pb).to_tuple()[:3]
            assert va.lcm(vb).to_tuple() == pa.lcm(pb).to_tuple()[:3]
            assert va.lcm(vb).degree() == pa.lcm(pb).degree()
            assert va.lex_compare(vb) == pa.lex_compare(pb)
            for order in TermOrder:
                assert order.compare(va, vb) == order.compare(pa, pb)
            if va.can_reduce(vb):
                assert va.sub(vb).to_tuple() == pa.sub(pb).to_tuple()[:3]
                assert va.sub(vb).degree() == pa.sub(pb).degree()
    return len(grid) ** 2


# =====================================================================
# PROPERTY 3: Canonicalization and reduction idempotence
# =====================================================================

def check_idempotence(coeff_kind):
    system = random_system(4, 4, coeff_kind=coeff_kind, modulus=13)
    divisors = system.generators[1:]
    for p in system.generators:
        again = Polynomial(p.terms, p.order)
        assert again.terms == p.terms
        once = reduce_polynomial(p, divisors)
        assert reduce_polynomial(once, divisors) == once
    return len(system.generators)


def check_zero_absorption():
    zero = Polynomial([], TermOrder.LEX)
    divisors = [Polynomial([(IntModP(1, 13), VecExponents((1, 0)))]),
                Polynomial([(DoubleField(2.0), VecExponents((0, 1)))])]
    for d in divisors:
        assert reduce_polynomial(zero, [d]).terms == ()
    return len(divisors)


if __name__ == "__main__":
    print("=" * 60)
    print("GROEBNER BASIS: Structural Properties")
    print("=" * 60)

    n = check_divisibility()
    print("\nTest 1: divisibility, {} monomial pairs".format(n))
    print("  PASSED")

    n = check_encodings_agree()
    print("\nTest 2: vector vs packed encodings, {} monomial pairs".format(n))
    print("  PASSED")

    for kind in ("double", "single", "modp"):
        n = check_idempotence(kind)
        print("\nTest 3: idempotence ({}), {} polynomials".format(kind, n))
        print("  PASSED")

    n = check_zero_absorption()
    print("\nTest 4: zero absorption, {} divisors".format(n))
    print("  PASSED")

    print("\n" + "=" * 60)
    print("All property tests passed!")
    print("=" * 60)
