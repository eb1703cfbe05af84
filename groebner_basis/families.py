"""
Polynomial System Builders
==========================

Generator families used by the tests, the command line and the batch
runner. Every builder takes the coefficient kind ("double", "single",
"modp"), the exponent kind ("vec", "packed") and the monomial order, and
returns a PolynomialSystem.

Functions:
    symmetric_system -- x^3+y^3+z^3, xy+yz+xz, x+y+z
    cyclic_system    -- cyclic n-roots
    random_system    -- LCG-driven random generators
    build_system     -- dispatch by builder name

License: MIT
"""

from groebner_basis.core import Polynomial, PolynomialSystem
from groebner_basis.errors import InvalidConfigurationError
from groebner_basis.exponents import exponent_factory
from groebner_basis.fields import coefficient_factory
from groebner_basis.lcg import default_lcg
from groebner_basis.orders import TermOrder

BUILDERS = ("symmetric", "cyclic", "random")


# =====================================================================
# SYMMETRIC
# =====================================================================

def symmetric_system(coeff_kind="modp", exp_kind="vec", order=TermOrder.LEX,
                     modulus=13):
    """The power sum, second elementary and first elementary symmetric
    polynomials in x, y, z.
    """
    c = coefficient_factory(coeff_kind, modulus)
    X = exponent_factory(exp_kind, 3)
    one = c(1)
    rows = [
        [(3, 0, 0), (0, 3, 0), (0, 0, 3)],
        [(1, 1, 0), (0, 1, 1), (1, 0, 1)],
        [(1, 0, 0), (0, 1, 0), (0, 0, 1)],
    ]
    generators = [Polynomial([(one, X(e)) for e in row], order) for row in rows]
    return PolynomialSystem("Symmetric(3)", 3, generators, var_names=("x", "y", "z"))


# =====================================================================
# CYCLIC n-ROOTS
# =====================================================================

def cyclic_system(n, coeff_kind="modp", exp_kind="vec", order=TermOrder.LEX,
                  modulus=13):
    """Cyclic n-roots: for k = 1..n-1 the sum over i of x_i x_{i+1} ...
    x_{i+k-1} (indices mod n), then x_0 x_1 ... x_{n-1} - 1.
    """
    if n < 2:
        raise InvalidConfigurationError("cyclic system needs n >= 2, got {}".format(n))
    c = coefficient_factory(coeff_kind, modulus)
    X = exponent_factory(exp_kind, n)
    one = c(1)

    generators = []
    for k in range(1, n):
        terms = []
        for start in range(n):
            exps = [0] * n
            for offset in range(k):
                exps[(start + offset) % n] = 1
            terms.append((one, X(exps)))
        generators.append(Polynomial(terms, order))
    generators.append(Polynomial([(one, X([1] * n)), (c(-1), X([0] * n))], order))
    return PolynomialSystem("Cyclic({})".format(n), n, generators)


# =====================================================================
# RANDOM (LCG)
# =====================================================================

def random_system(num_polys=3, num_terms=3, coeff_kind="double", exp_kind="vec",
                  order=TermOrder.LEX, modulus=13, num_vars=3, exponent_bound=4,
                  rng=None):
    """Random generators drawn from an LCG.

    For every term the coefficient is drawn first (``next_double()`` for
    real fields, ``next_int() % modulus`` for Z/pZ), then one exponent per
    variable as ``next_int() % exponent_bound``. The default generator is
    LCG(12345, 1345, 65, 17), so the same arguments give the same system.
    """
    rng = rng or default_lcg()
    c = coefficient_factory(coeff_kind, modulus)
    X = exponent_factory(exp_kind, num_vars)

    generators = []
    for _ in range(num_polys):
        terms = []
        for _ in range(num_terms):
            if coeff_kind == "modp":
                coeff = c(rng.next_int() % modulus)
            else:
                coeff = c(rng.next_double())
            exps = X([rng.next_int() % exponent_bound for _ in range(num_vars)])
            terms.append((coeff, exps))
        generators.append(Polynomial(terms, order))
    name = "Random({}x{})".format(num_polys, num_terms)
    return PolynomialSystem(name, num_vars, generators)


# =====================================================================
# DISPATCH
# =====================================================================

def build_system(builder, n, coeff_kind="modp", exp_kind="vec",
                 order=TermOrder.LEX, modulus=13, num_terms=3):
    """Build a system by name; ``n`` is the cyclic size or the number of
    random polynomials and is ignored for "symmetric".
    """
    if builder == "symmetric":
        return symmetric_system(coeff_kind, exp_kind, order, modulus)
    elif builder == "cyclic":
        return cyclic_system(n, coeff_kind, exp_kind, order, modulus)
    elif builder == "random":
        return random_system(n, num_terms, coeff_kind, exp_kind, order, modulus)
    raise InvalidConfigurationError(
        "unknown system builder {!r}, expected one of {}".format(builder, BUILDERS))
