"""
Basis Driver
============

Buchberger-style closure: S-polynomials of every basis pair are reduced
against the live basis and non-zero new remainders are appended until a
full pass adds nothing. A final self-reduction pass reduces every element
by the others.

Classes:
    GroebnerConfig -- iteration ceilings and verbosity
    BasisStats     -- counters and timings of one computation
    BasisResult    -- complete result, serializable to JSON
    GroebnerEngine -- runs a PolynomialSystem and packages a BasisResult

Functions:
    compute_basis       -- closure + self-reduction, returns (basis, stats)
    groebner_basis      -- same, basis only
    self_reduce         -- the final self-reduction pass
    fixpoint_violations -- pairs whose S-polynomial does not reduce to zero
    is_fixpoint         -- no violations

Equality between polynomials is exact structural equality on canonical
(already rounded) coefficients and exponents.

License: MIT
"""

import json
import time
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

from groebner_basis.core import Polynomial
from groebner_basis.errors import (
    BasisComputationError, BasisLimitError, FieldArithmeticError,
    InvalidConfigurationError,
)
from groebner_basis.orders import TermOrder
from groebner_basis.reduction import reduce_polynomial, s_polynomial


# ---------------------------------------------------------------------------
# Configuration & bookkeeping
# ---------------------------------------------------------------------------

@dataclass
class GroebnerConfig:
    """Safety ceilings for the closure loop; None disables a ceiling."""
    max_passes: Optional[int] = 100
    max_basis_size: Optional[int] = 1000
    verbose: bool = False

    def validate(self):
        for name in ("max_passes", "max_basis_size"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise InvalidConfigurationError(
                    "{} must be positive or None, got {}".format(name, value))


@dataclass
class BasisStats:
    passes: int = 0
    pairs_examined: int = 0
    reductions_added: int = 0
    closure_size: int = 0
    timings: Dict[str, float] = field(default_factory=dict)


@dataclass
class BasisResult:
    """Complete result of one basis computation, serializable to JSON."""
    system: str
    order: str
    coefficient_type: str
    exponent_type: str
    num_vars: int
    generators: List[str] = field(default_factory=list)
    basis: List[str] = field(default_factory=list)
    basis_terms: List[list] = field(default_factory=list)
    passes: int = 0
    pairs_examined: int = 0
    reductions_added: int = 0
    closure_size: int = 0
    timings: Dict[str, float] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None

    def to_json(self):
        return json.dumps(asdict(self), indent=2, default=str)

    def save(self, path):
        with open(path, "w") as f:
            f.write(self.to_json())


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------

def _prepare(generators, order):
    basis = []
    for g in generators:
        if not isinstance(g, Polynomial):
            g = Polynomial(g, order)
        elif g.order is not order:
            g = Polynomial(g.terms, order)
        if g.terms:
            basis.append(g)
    return basis


def compute_basis(generators, order=TermOrder.LEX, config=None):
    """Compute the fixpoint basis of ``generators`` under ``order``.

    Parameters
    ----------
    generators : iterable
        Polynomials, or lists of (coefficient, exponents) pairs. Zero
        generators are dropped; generators are re-sorted if their order
        differs from ``order``.
    order : TermOrder or str
    config : GroebnerConfig, optional

    Returns
    -------
    basis : list of Polynomial
        Self-reduced, de-duplicated basis in basis order.
    stats : BasisStats

    Raises
    ------
    BasisComputationError
        A coefficient division failed; carries the failing pair and pass.
    BasisLimitError
        max_passes or max_basis_size was exceeded.
    """
    config = config or GroebnerConfig()
    config.validate()
    order = TermOrder.parse(order)
    stats = BasisStats()

    t0 = time.time()
    basis = _prepare(generators, order)
    seen = set(basis)

    while True:
        stats.passes += 1
        added = False
        n = len(basis)
        for i in range(n):
            for j in range(i + 1, n):
                stats.pairs_examined += 1
                try:
                    reduced = reduce_polynomial(s_polynomial(basis[i], basis[j]), basis)
                except FieldArithmeticError as exc:
                    raise BasisComputationError(
                        "pass {}: reducing S(g{}, g{}) failed: {}".format(
                            stats.passes, i, j, exc),
                        pair=(i, j), pass_number=stats.passes) from exc
                if reduced.terms and reduced not in seen:
                    seen.add(reduced)
                    basis.append(reduced)
                    stats.reductions_added += 1
                    added = True
                    if config.max_basis_size is not None and len(basis) > config.max_basis_size:
                        raise BasisLimitError(
                            "basis grew past {} elements in pass {}".format(
                                config.max_basis_size, stats.passes),
                            passes=stats.passes, basis_size=len(basis))
        if config.verbose:
            print("  pass {}: {} pairs, basis size {}".format(
                stats.passes, n * (n - 1) // 2, len(basis)))
        if not added:
            break
        if config.max_passes is not None and stats.passes >= config.max_passes:
            raise BasisLimitError(
                "no fixpoint after {} passes (basis size {})".format(
                    stats.passes, len(basis)),
                passes=stats.passes, basis_size=len(basis))
    stats.closure_size = len(basis)
    stats.timings["closure"] = round(time.time() - t0, 4)

    t1 = time.time()
    result = self_reduce(basis)
    stats.timings["self_reduction"] = round(time.time() - t1, 4)

    if config.verbose:
        print("  closure {} -> self-reduced {} in {} passes".format(
            stats.closure_size, len(result), stats.passes))
    return result, stats


def groebner_basis(generators, order=TermOrder.LEX, config=None):
    """Basis only; see compute_basis."""
    return compute_basis(generators, order, config)[0]


def self_reduce(basis):
    """Reduce every element by all elements not structurally equal to it.

    Non-zero remainders are kept once each, in basis order. No leading
    coefficient is rescaled.
    """
    result = []
    kept = set()
    for k, g in enumerate(basis):
        others = [p for p in basis if p != g]
        try:
            reduced = reduce_polynomial(g, others)
        except FieldArithmeticError as exc:
            raise BasisComputationError(
                "self-reduction of g{} failed: {}".format(k, exc), element=k) from exc
        if reduced.terms and reduced not in kept:
            kept.add(reduced)
            result.append(reduced)
    return result


def fixpoint_violations(basis):
    """List of (i, j, remainder) for pairs whose S-polynomial survives."""
    violations = []
    for i in range(len(basis)):
        for j in range(i + 1, len(basis)):
            remainder = reduce_polynomial(s_polynomial(basis[i], basis[j]), basis)
            if remainder.terms:
                violations.append((i, j, remainder))
    return violations


def is_fixpoint(basis):
    return not fixpoint_violations(basis)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def _type_names(system):
    for g in system.generators:
        if g.terms:
            t = g.terms[0]
            return type(t.coefficient).__name__, type(t.exponents).__name__
    return "unknown", "unknown"


class GroebnerEngine:
    """Runs the basis driver on a PolynomialSystem and records the outcome."""

    def __init__(self, config=None):
        self.config = config or GroebnerConfig()

    def run(self, system, order=None):
        order = TermOrder.parse(order if order is not None else system.order)
        coeff_type, exp_type = _type_names(system)
        if self.config.verbose:
            print(f"=== Groebner: {system.name} ({system.num_vars} vars, "
                  f"{len(system.generators)} generators, order={order.value}) ===")

        basis, stats = compute_basis(system.generators, order, self.config)

        return BasisResult(
            system=system.name,
            order=order.value,
            coefficient_type=coeff_type,
            exponent_type=exp_type,
            num_vars=system.num_vars,
            generators=system.formatted(),
            basis=[g.format(system.var_names) for g in basis],
            basis_terms=[g.to_pairs() for g in basis],
            passes=stats.passes,
            pairs_examined=stats.pairs_examined,
            reductions_added=stats.reductions_added,
            closure_size=stats.closure_size,
            timings=stats.timings,
        )
