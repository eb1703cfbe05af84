"""
Reduction Engine
================

Multivariate division and S-polynomials.

Functions:
    find_divisor      -- first divisor whose leading monomial divides a monomial
    reduce_polynomial -- top-reduce a polynomial by an ordered divisor list
    s_polynomial      -- align two polynomials on the lcm of their leading
                         monomials and subtract

Field failures (DivisionByZeroError, NoModularInverseError) propagate out
of reduce_polynomial unchanged; the basis driver decides what to abort.

License: MIT
"""

from groebner_basis.core import Term


def find_divisor(exponents, divisors):
    """Index of the first non-zero divisor whose leading monomial divides
    ``exponents``, or None.

    Divisor order matters: when several leading monomials divide, the
    earliest one wins.
    """
    for idx, divisor in enumerate(divisors):
        if not divisor.terms:
            continue
        if exponents.can_reduce(divisor.terms[0].exponents):
            return idx
    return None


def reduce_polynomial(poly, divisors):
    """Reduce ``poly`` by ``divisors`` until its leading term is irreducible.

    Parameters
    ----------
    poly : Polynomial
    divisors : sequence of Polynomial
        Scanned in order on every step.

    Returns
    -------
    Polynomial
        The canonical remainder (zero polynomial if fully reduced).
    """
    result = poly
    while result.terms:
        lead = result.terms[0]
        idx = find_divisor(lead.exponents, divisors)
        if idx is None:
            break
        divisor = divisors[idx]
        div_lead = divisor.terms[0]
        reduction_term = Term(lead.coefficient / div_lead.coefficient,
                              lead.exponents.sub(div_lead.exponents))
        result = result.subtract(divisor.multiply_by_term(reduction_term))
    return result


def s_polynomial(p1, p2):
    """S-polynomial of two non-zero polynomials.

    Both are scaled by the monomial taking their leading monomial to the
    lcm, with unit coefficient; leading coefficients are not normalized.
    """
    if not p1.terms or not p2.terms:
        raise ValueError("S-polynomial of the zero polynomial is undefined")
    lead1, lead2 = p1.terms[0], p2.terms[0]
    lcm = lead1.exponents.lcm(lead2.exponents)
    scaled1 = p1.multiply_by_term(
        Term(lead1.coefficient.one(), lcm.sub(lead1.exponents)))
    scaled2 = p2.multiply_by_term(
        Term(lead2.coefficient.one(), lcm.sub(lead2.exponents)))
    return scaled1.subtract(scaled2)
