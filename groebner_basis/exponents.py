"""
Exponent Encodings
==================

Two interchangeable monomial representations with identical semantics.

Classes:
    VecExponents       -- tuple of exponents, any number of variables
    BitPackedExponents -- six 8-bit slots plus a 16-bit cached degree
                          in one 64-bit word

Packed layout (bit 63 on the left):

    [63..48] degree | [47..40] e0 | [39..32] e1 | ... | [7..0] e5

Because e0 sits in the most significant slot, lexicographic comparison of
two packed monomials is plain integer comparison of their exponent bits.

License: MIT
"""

from groebner_basis.errors import ExponentRangeError, InvalidConfigurationError

EXPONENT_KINDS = ("vec", "packed")

MAX_PACKED_VARS = 6
MAX_PACKED_EXPONENT = 0xFF
DEGREE_SHIFT = 48
EXPONENT_MASK = (1 << DEGREE_SHIFT) - 1
# Bits just above each slot; a carry landing here means a slot overflowed.
_CARRY_MASK = sum(1 << (8 * k) for k in range(1, MAX_PACKED_VARS + 1))


def _shift(i):
    return 40 - 8 * i


def _cmp(a, b):
    return (a > b) - (a < b)


# =====================================================================
# DENSE VECTOR
# =====================================================================

class VecExponents:
    """Dense exponent vector.

    Arity is a caller convention; operands are assumed to have the same
    length.
    """

    __slots__ = ("exponents",)

    def __init__(self, exponents):
        exps = tuple(int(e) for e in exponents)
        if any(e < 0 for e in exps):
            raise ExponentRangeError("negative exponent in {}".format(exps))
        self.exponents = exps

    def add(self, other):
        return VecExponents(a + b for a, b in zip(self.exponents, other.exponents))

    def sub(self, other):
        diff = tuple(a - b for a, b in zip(self.exponents, other.exponents))
        if any(d < 0 for d in diff):
            raise ExponentRangeError(
                "{} is not divisible by {}".format(self, other))
        return VecExponents(diff)

    def lcm(self, other):
        return VecExponents(max(a, b) for a, b in zip(self.exponents, other.exponents))

    def degree(self):
        return sum(self.exponents)

    def can_reduce(self, divisor):
        return all(a >= b for a, b in zip(self.exponents, divisor.exponents))

    def lex_compare(self, other):
        for a, b in zip(self.exponents, other.exponents):
            if a != b:
                return _cmp(a, b)
        return 0

    def to_tuple(self):
        return self.exponents

    def __iter__(self):
        return iter(self.exponents)

    def __len__(self):
        return len(self.exponents)

    def __getitem__(self, i):
        return self.exponents[i]

    def __eq__(self, other):
        if type(other) is not VecExponents:
            return NotImplemented
        return self.exponents == other.exponents

    def __hash__(self):
        return hash(self.exponents)

    def __repr__(self):
        return "VecExponents({})".format(list(self.exponents))


# =====================================================================
# BIT-PACKED WORD
# =====================================================================

class BitPackedExponents:
    """Up to six exponents (each <= 255) packed in a 64-bit word.

    The degree field is rebuilt on every construction, add, sub and lcm,
    so ``degree()`` never reads a stale value.
    """

    __slots__ = ("packed",)

    def __init__(self, exponents=()):
        exps = [int(e) for e in exponents]
        if len(exps) > MAX_PACKED_VARS:
            raise InvalidConfigurationError(
                "packed exponents hold at most {} variables, got {}".format(
                    MAX_PACKED_VARS, len(exps)))
        for e in exps:
            if e < 0 or e > MAX_PACKED_EXPONENT:
                raise InvalidConfigurationError(
                    "packed exponent {} outside [0, {}]".format(e, MAX_PACKED_EXPONENT))
        word = 0
        for i, e in enumerate(exps):
            word |= e << _shift(i)
        self.packed = (sum(exps) << DEGREE_SHIFT) | word

    @classmethod
    def from_packed(cls, packed):
        obj = cls.__new__(cls)
        obj.packed = packed
        return obj

    @staticmethod
    def _with_degree(word):
        degree = 0
        for i in range(MAX_PACKED_VARS):
            degree += (word >> _shift(i)) & 0xFF
        return BitPackedExponents.from_packed((degree << DEGREE_SHIFT) | word)

    def _slot(self, i):
        return (self.packed >> _shift(i)) & 0xFF

    def add(self, other):
        ea = self.packed & EXPONENT_MASK
        eb = other.packed & EXPONENT_MASK
        total = ea + eb
        if (total ^ ea ^ eb) & _CARRY_MASK:
            raise ExponentRangeError(
                "exponent overflow adding {} and {}".format(self, other))
        return self._with_degree(total)

    def sub(self, other):
        if not self.can_reduce(other):
            raise ExponentRangeError(
                "{} is not divisible by {}".format(self, other))
        return self._with_degree((self.packed & EXPONENT_MASK) - (other.packed & EXPONENT_MASK))

    def lcm(self, other):
        word = 0
        for i in range(MAX_PACKED_VARS):
            word |= max(self._slot(i), other._slot(i)) << _shift(i)
        return self._with_degree(word)

    def degree(self):
        return (self.packed >> DEGREE_SHIFT) & 0xFFFF

    def can_reduce(self, divisor):
        for i in range(MAX_PACKED_VARS):
            if self._slot(i) < divisor._slot(i):
                return False
        return True

    def lex_compare(self, other):
        return _cmp(self.packed & EXPONENT_MASK, other.packed & EXPONENT_MASK)

    def to_tuple(self):
        return tuple(self._slot(i) for i in range(MAX_PACKED_VARS))

    def __iter__(self):
        return iter(self.to_tuple())

    def __len__(self):
        return MAX_PACKED_VARS

    def __getitem__(self, i):
        return self.to_tuple()[i]

    def __eq__(self, other):
        if type(other) is not BitPackedExponents:
            return NotImplemented
        return self.packed == other.packed

    def __hash__(self):
        return hash(self.packed)

    def __repr__(self):
        return "BitPackedExponents(degree={:04X}, exponents={})".format(
            self.degree(), " ".join("{:02X}".format(e) for e in self.to_tuple()))


def exponent_factory(kind, num_vars):
    """Return the exponent class for ``kind`` after checking ``num_vars``."""
    if kind == "vec":
        return VecExponents
    if kind == "packed":
        if num_vars > MAX_PACKED_VARS:
            raise InvalidConfigurationError(
                "{} variables exceed the packed encoding's {} slots".format(
                    num_vars, MAX_PACKED_VARS))
        return BitPackedExponents
    raise InvalidConfigurationError(
        "unknown exponent kind {!r}, expected one of {}".format(kind, EXPONENT_KINDS))
