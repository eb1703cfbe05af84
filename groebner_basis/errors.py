"""
Exceptions
==========

Every failure raised by the package derives from GroebnerError. Field
arithmetic failures also derive from the matching builtin so callers that
only know about ZeroDivisionError or ValueError still catch them.

License: MIT
"""


class GroebnerError(Exception):
    """Base class for all errors raised by groebner_basis."""


class FieldArithmeticError(GroebnerError, ArithmeticError):
    """A coefficient-field operation could not be carried out."""


class DivisionByZeroError(FieldArithmeticError, ZeroDivisionError):
    """Field division by a zero coefficient."""

    def __init__(self, dividend, divisor, modulus=None):
        self.dividend = dividend
        self.divisor = divisor
        self.modulus = modulus
        msg = "division by zero: {} / {}".format(dividend, divisor)
        if modulus is not None:
            msg += " (mod {})".format(modulus)
        super().__init__(msg)


class NoModularInverseError(FieldArithmeticError):
    """The divisor shares a factor with the modulus."""

    def __init__(self, value, modulus):
        self.value = value
        self.modulus = modulus
        super().__init__(
            "no modular inverse exists for {} mod {}".format(value, modulus))


class InvalidConfigurationError(GroebnerError, ValueError):
    """Rejected before any computation starts."""


class ExponentRangeError(GroebnerError, ValueError):
    """An exponent left its representable range (underflow or slot overflow)."""


class BasisComputationError(GroebnerError):
    """A basis computation was aborted by a field failure.

    Attributes
    ----------
    pair : tuple of int or None
        Basis indices (i, j) whose S-polynomial was being reduced, or None
        when the failure happened during self-reduction.
    pass_number : int or None
        1-based pass index of the closure loop.
    element : int or None
        Basis index being self-reduced.
    """

    def __init__(self, message, pair=None, pass_number=None, element=None):
        self.pair = pair
        self.pass_number = pass_number
        self.element = element
        super().__init__(message)


class BasisLimitError(GroebnerError):
    """The closure exceeded max_passes or max_basis_size."""

    def __init__(self, message, passes, basis_size):
        self.passes = passes
        self.basis_size = basis_size
        super().__init__(message)
