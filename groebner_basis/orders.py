"""
Monomial Orders
===============

Lex, GrLex and RevLex as three-way comparators over exponent objects,
plus matching tuple sort keys used to order polynomial terms.

RevLex is graded reverse lexicographic order: total degree first, then
the exponents are scanned from the last variable towards the first and
the monomial with the SMALLER exponent at the first difference is the
larger one. Scanning backwards without that sign flip (or negating a
forward lex comparison) gives different orders and is not used here.

License: MIT
"""

from enum import Enum

from groebner_basis.errors import InvalidConfigurationError


class TermOrder(Enum):
    LEX = "lex"
    GRLEX = "grlex"
    REVLEX = "revlex"

    @classmethod
    def parse(cls, value):
        """Accept a TermOrder, its name/value in any case, or 0/1/2."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        elif isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidConfigurationError(
            "unsupported monomial order {!r}, expected one of {}".format(
                value, [m.value for m in cls]))

    def compare(self, a, b):
        """Return -1, 0 or 1 comparing exponents ``a`` and ``b``."""
        if self is TermOrder.LEX:
            return a.lex_compare(b)
        da, db = a.degree(), b.degree()
        if da != db:
            return -1 if da < db else 1
        if self is TermOrder.GRLEX:
            return a.lex_compare(b)
        return _reverse_lex_tiebreak(a, b)

    def sort_key(self):
        """Key for sorting exponents ascending under this order.

        Keys are plain tuples and agree with ``compare`` for exponents of
        the same arity, which holds within one polynomial.
        """
        if self is TermOrder.LEX:
            return _lex_key
        if self is TermOrder.GRLEX:
            return _graded_lex_key
        return _graded_reverse_lex_key


def _lex_key(e):
    return e.to_tuple()


def _graded_lex_key(e):
    return (e.degree(), e.to_tuple())


def _graded_reverse_lex_key(e):
    return (e.degree(), tuple(-x for x in reversed(e.to_tuple())))


def _reverse_lex_tiebreak(a, b):
    ta, tb = a.to_tuple(), b.to_tuple()
    n = max(len(ta), len(tb))
    ta = ta + (0,) * (n - len(ta))
    tb = tb + (0,) * (n - len(tb))
    for ea, eb in zip(reversed(ta), reversed(tb)):
        if ea != eb:
            return 1 if ea < eb else -1
    return 0
