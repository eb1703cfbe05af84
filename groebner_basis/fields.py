"""
Coefficient Fields
==================

Concrete coefficient families for the Groebner engine.

Classes:
    DoubleField -- double precision reals (numpy float64)
    SingleField -- single precision reals (numpy float32)
    IntModP     -- integers modulo a prime, modulus carried by every value

Functions:
    coefficient_factory -- pick a family by name
    is_prime            -- trial-division primality test
    round_half_away     -- decimal rounding with ties away from zero

Floating values are canonicalized the same way everywhere: a coefficient
with magnitude <= TOLERANCE is dropped, anything else is stored rounded to
ROUND_DIGITS decimal digits. Rounding scales by 10**ROUND_DIGITS and rounds
half away from zero, not half to even, so ties such as 0.123455 go up.
Equality is exact on those rounded values.

License: MIT
"""

import math
from functools import partial

import numpy as np

from groebner_basis.errors import (
    DivisionByZeroError, FieldArithmeticError, InvalidConfigurationError,
    NoModularInverseError,
)

TOLERANCE = 1e-2
ROUND_DIGITS = 5
_ROUND_SCALE = 10.0 ** ROUND_DIGITS

COEFFICIENT_KINDS = ("double", "single", "modp")


def round_half_away(value, digits=ROUND_DIGITS):
    """Round ``value`` to ``digits`` decimals, ties away from zero.

    The value is scaled first and the scaled float is rounded, so
    ``round_half_away(0.123455) == 0.12346`` where ``round()`` gives
    0.12345.
    """
    scale = _ROUND_SCALE if digits == ROUND_DIGITS else 10.0 ** digits
    scaled = value * scale
    if math.isinf(scaled) or math.isnan(scaled):
        return value
    whole = math.trunc(scaled)
    if abs(scaled - whole) >= 0.5:
        whole += math.copysign(1.0, scaled)
    return whole / scale


# =====================================================================
# FLOATING-POINT FIELDS
# =====================================================================

class _FloatField:
    """Shared implementation of the real fields; ``dtype`` fixes precision."""

    __slots__ = ("value",)
    dtype = np.float64

    def __init__(self, value=0.0):
        self.value = self.dtype(value)

    def _check(self, other):
        if type(other) is not type(self):
            raise InvalidConfigurationError(
                "cannot combine {} with {}".format(
                    type(self).__name__, type(other).__name__))

    # -- field operations --

    def __add__(self, other):
        self._check(other)
        return type(self)(self.value + other.value)

    def __sub__(self, other):
        self._check(other)
        return type(self)(self.value - other.value)

    def __mul__(self, other):
        self._check(other)
        return type(self)(self.value * other.value)

    def __truediv__(self, other):
        self._check(other)
        if other.value == 0:
            raise DivisionByZeroError(self, other)
        return type(self)(self.value / other.value)

    def __neg__(self):
        return type(self)(-self.value)

    def zero(self):
        return type(self)(0.0)

    def one(self):
        return type(self)(1.0)

    def from_int(self, value):
        return type(self)(value)

    def from_float(self, value):
        return type(self)(value)

    def to_float(self):
        return float(self.value)

    def is_zero(self):
        return self.value == 0

    def is_one(self):
        return self.value == 1

    def canonical(self):
        v = float(self.value)
        if abs(v) <= TOLERANCE:
            return None
        return type(self)(round_half_away(v))

    # -- ordering & magnitude --

    def __lt__(self, other):
        self._check(other)
        return self.value < other.value

    def __le__(self, other):
        self._check(other)
        return self.value <= other.value

    def __gt__(self, other):
        self._check(other)
        return self.value > other.value

    def __ge__(self, other):
        self._check(other)
        return self.value >= other.value

    def __abs__(self):
        return type(self)(abs(self.value))

    def sqrt(self):
        if self.value < 0:
            raise FieldArithmeticError(
                "square root of negative number {}".format(self))
        return type(self)(np.sqrt(self.value))

    # -- value semantics --

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(float(self.value))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self.value)


class DoubleField(_FloatField):
    __slots__ = ()
    dtype = np.float64


class SingleField(_FloatField):
    __slots__ = ()
    dtype = np.float32


# =====================================================================
# FINITE FIELD Z/pZ
# =====================================================================

class IntModP:
    """An integer modulo ``modulus``.

    The modulus travels with the value; operands with different moduli are
    rejected. Division needs a prime modulus for every inverse to exist.
    """

    __slots__ = ("value", "modulus")

    def __init__(self, value, modulus):
        modulus = int(modulus)
        if modulus < 2:
            raise InvalidConfigurationError(
                "modulus must be >= 2, got {}".format(modulus))
        self.modulus = modulus
        self.value = int(value) % modulus

    def _check(self, other):
        if type(other) is not IntModP:
            raise InvalidConfigurationError(
                "cannot combine IntModP with {}".format(type(other).__name__))
        if other.modulus != self.modulus:
            raise InvalidConfigurationError(
                "modulus mismatch: {} vs {}".format(self.modulus, other.modulus))

    def _new(self, value):
        return IntModP(value, self.modulus)

    def __add__(self, other):
        self._check(other)
        return self._new(self.value + other.value)

    def __sub__(self, other):
        self._check(other)
        return self._new(self.value - other.value)

    def __mul__(self, other):
        self._check(other)
        return self._new(self.value * other.value)

    def inverse(self):
        if self.value == 0:
            raise DivisionByZeroError(self.one(), self, self.modulus)
        try:
            return self._new(pow(self.value, -1, self.modulus))
        except ValueError as exc:
            raise NoModularInverseError(self.value, self.modulus) from exc

    def __truediv__(self, other):
        self._check(other)
        if other.value == 0:
            raise DivisionByZeroError(self, other, self.modulus)
        return self * other.inverse()

    def __neg__(self):
        return self._new(-self.value)

    def zero(self):
        return self._new(0)

    def one(self):
        return self._new(1)

    def from_int(self, value):
        return self._new(value)

    def from_float(self, value):
        return self._new(int(value))

    def to_float(self):
        return float(self.value)

    def is_zero(self):
        return self.value == 0

    def is_one(self):
        return self.value == 1

    def canonical(self):
        return None if self.value == 0 else self

    def __lt__(self, other):
        self._check(other)
        return self.value < other.value

    def __le__(self, other):
        self._check(other)
        return self.value <= other.value

    def __gt__(self, other):
        self._check(other)
        return self.value > other.value

    def __ge__(self, other):
        self._check(other)
        return self.value >= other.value

    def __abs__(self):
        return self._new(self.value)

    def sqrt(self):
        raise NotImplementedError("square root is not implemented for IntModP")

    def __eq__(self, other):
        if type(other) is not IntModP:
            return NotImplemented
        return self.value == other.value and self.modulus == other.modulus

    def __hash__(self):
        return hash((self.value, self.modulus))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return "IntModP({}, {})".format(self.value, self.modulus)


# =====================================================================
# FACTORIES & PRIMES
# =====================================================================

def coefficient_factory(kind, modulus=None):
    """Return a callable turning a Python number into a coefficient.

    Parameters
    ----------
    kind : str
        One of COEFFICIENT_KINDS.
    modulus : int, optional
        Required for ``"modp"``.
    """
    if kind == "double":
        return DoubleField
    if kind == "single":
        return SingleField
    if kind == "modp":
        if modulus is None:
            raise InvalidConfigurationError("'modp' coefficients need a modulus")
        IntModP(0, modulus)  # validates the modulus up front
        return partial(IntModP, modulus=modulus)
    raise InvalidConfigurationError(
        "unknown coefficient kind {!r}, expected one of {}".format(
            kind, COEFFICIENT_KINDS))


def is_prime(n):
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True

