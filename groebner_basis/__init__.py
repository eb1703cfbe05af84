"""
Groebner Basis
==============

Naive Buchberger-style Groebner basis computation, generic over the
coefficient field and the monomial encoding.

Coefficients:
  DoubleField / SingleField - reals, rounded to 5 digits, |c| <= 1e-2 dropped
  IntModP                   - Z/pZ, modulus carried by every value

Monomials:
  VecExponents       - dense tuple, any number of variables
  BitPackedExponents - six 8-bit slots + cached degree in one 64-bit word

Orders:
  Lex, GrLex, RevLex (graded reverse lexicographic)

License: MIT
"""

__version__ = "0.1.0"

from groebner_basis.errors import (
    GroebnerError, FieldArithmeticError, DivisionByZeroError,
    NoModularInverseError, InvalidConfigurationError, ExponentRangeError,
    BasisComputationError, BasisLimitError,
)
from groebner_basis.capabilities import (
    FieldElement, OrderedElement, MagnitudeElement, Exponents,
)
from groebner_basis.fields import (
    DoubleField, SingleField, IntModP,
    coefficient_factory, is_prime, round_half_away,
)
from groebner_basis.exponents import (
    VecExponents, BitPackedExponents, exponent_factory,
)
from groebner_basis.orders import TermOrder
from groebner_basis.core import Term, Polynomial, PolynomialSystem, format_polynomial
from groebner_basis.reduction import find_divisor, reduce_polynomial, s_polynomial
from groebner_basis.basis import (
    GroebnerConfig, BasisStats, BasisResult, GroebnerEngine,
    compute_basis, groebner_basis, self_reduce, fixpoint_violations, is_fixpoint,
)
from groebner_basis.families import (
    symmetric_system, cyclic_system, random_system, build_system,
)
from groebner_basis.certificates import (
    build_membership_matrix, find_membership_certificate,
    membership_certificate_search, certify_basis,
)
from groebner_basis.lcg import LCG, default_lcg
