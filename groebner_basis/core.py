"""Core definitions: Term, Polynomial, PolynomialSystem."""

from dataclasses import dataclass
from typing import Any, Tuple

from groebner_basis.capabilities import Exponents, FieldElement
from groebner_basis.errors import InvalidConfigurationError
from groebner_basis.orders import TermOrder


@dataclass(frozen=True)
class Term:
    """A (coefficient, exponents) pair; value semantics only."""
    coefficient: Any
    exponents: Any

    def __str__(self):
        return _format_term(self, None)


def _as_term(item):
    if isinstance(item, Term):
        return item
    try:
        coefficient, exponents = item
    except (TypeError, ValueError):
        raise InvalidConfigurationError(
            "expected Term or (coefficient, exponents) pair, got {!r}".format(item))
    if not isinstance(coefficient, FieldElement):
        raise InvalidConfigurationError(
            "coefficient {!r} does not provide the field operations".format(coefficient))
    if not isinstance(exponents, Exponents):
        raise InvalidConfigurationError(
            "exponents {!r} do not provide the monomial operations".format(exponents))
    return Term(coefficient, exponents)


def _canonicalize(items, order):
    merged = {}
    for item in items:
        term = _as_term(item)
        prev = merged.get(term.exponents)
        merged[term.exponents] = term.coefficient if prev is None else prev + term.coefficient
    kept = []
    for exponents, coefficient in merged.items():
        c = coefficient.canonical()
        if c is not None:
            kept.append(Term(c, exponents))
    key = order.sort_key()
    kept.sort(key=lambda t: key(t.exponents), reverse=True)
    return tuple(kept)


class Polynomial:
    """Immutable polynomial in canonical form.

    Terms are merged by monomial, filtered through each coefficient's
    ``canonical()`` and sorted strictly descending under ``order``, so
    ``terms[0]`` is the leading term. An empty term tuple is the zero
    polynomial. Every operation returns a new Polynomial.
    """

    __slots__ = ("terms", "order")

    def __init__(self, terms=(), order=TermOrder.LEX):
        self.order = TermOrder.parse(order)
        self.terms = _canonicalize(terms, self.order)

    # -- arithmetic --

    def add(self, other):
        return Polynomial(self.terms + other.terms, self.order)

    def subtract(self, other):
        negated = tuple(Term(t.coefficient.zero() - t.coefficient, t.exponents)
                        for t in other.terms)
        return Polynomial(self.terms + negated, self.order)

    def multiply_by_term(self, term):
        term = _as_term(term)
        return Polynomial(
            [Term(t.coefficient * term.coefficient, t.exponents.add(term.exponents))
             for t in self.terms],
            self.order)

    # -- inspection --

    def is_zero(self):
        return not self.terms

    @property
    def leading_term(self):
        if not self.terms:
            raise ValueError("the zero polynomial has no leading term")
        return self.terms[0]

    def degree(self):
        return max((t.exponents.degree() for t in self.terms), default=0)

    def monomials(self):
        return [t.exponents.to_tuple() for t in self.terms]

    def coefficients(self):
        return [t.coefficient for t in self.terms]

    def to_pairs(self):
        """JSON-friendly [(float coefficient, exponent list), ...]."""
        return [(t.coefficient.to_float(), list(t.exponents.to_tuple()))
                for t in self.terms]

    def format(self, var_names=None):
        return format_polynomial(self, var_names)

    def __len__(self):
        return len(self.terms)

    def __iter__(self):
        return iter(self.terms)

    def __bool__(self):
        return bool(self.terms)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.terms == other.terms

    def __hash__(self):
        return hash(self.terms)

    def __str__(self):
        return format_polynomial(self)

    def __repr__(self):
        return "Polynomial({}, order={})".format(self, self.order.value)


# =====================================================================
# FORMATTER
# =====================================================================

def _format_term(term, var_names):
    parts = []
    for i, e in enumerate(term.exponents.to_tuple()):
        if e == 0:
            continue
        name = var_names[i] if var_names is not None and i < len(var_names) else "x{}".format(i)
        parts.append(name if e == 1 else "{}^{}".format(name, e))
    coeff = str(term.coefficient)
    if not parts:
        return coeff
    return "{}*{}".format(coeff, "*".join(parts))


def format_polynomial(poly, var_names=None):
    """Render a polynomial term by term in canonical order.

    Every coefficient is printed, so distinct canonical term lists always
    render to distinct strings.
    """
    if not poly.terms:
        return "0"
    return " + ".join(_format_term(t, var_names) for t in poly.terms)


# =====================================================================
# POLYNOMIAL SYSTEM
# =====================================================================

class PolynomialSystem:
    """A named list of generator polynomials sharing one order."""

    def __init__(self, name, num_vars, generators, var_names=None):
        self.name = name
        self.num_vars = num_vars
        self.generators = list(generators)
        self.var_names: Tuple[str, ...] = tuple(
            var_names or ["x{}".format(i) for i in range(num_vars)])
        orders = {g.order for g in self.generators}
        if len(orders) > 1:
            raise InvalidConfigurationError(
                "generators of {} use mixed orders: {}".format(
                    name, sorted(o.value for o in orders)))
        self.order = orders.pop() if orders else TermOrder.LEX

    def evaluate(self, point):
        """Evaluate every generator at ``point`` (sequence of floats)."""
        values = []
        for g in self.generators:
            val = 0.0
            for term in g.terms:
                prod = term.coefficient.to_float()
                for x, e in zip(point, term.exponents.to_tuple()):
                    prod *= x ** e
                val += prod
            values.append(val)
        return values

    def max_degree(self):
        return max((g.degree() for g in self.generators), default=0)

    def formatted(self):
        return [g.format(self.var_names) for g in self.generators]

    def __repr__(self):
        return "PolynomialSystem({}, {} vars, {} generators)".format(
            self.name, self.num_vars, len(self.generators))
