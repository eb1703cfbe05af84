"""
Capability Sets
===============

Structural contracts the Groebner engine is written against. Coefficient
and exponent types never inherit from these; any class providing the
methods qualifies.

Protocols:
    FieldElement     -- add/sub/mul/div, zero/one, coercions, zero test
    OrderedElement   -- total order on coefficient values
    MagnitudeElement -- absolute value and square root
    Exponents        -- monomial arithmetic, degree, divisibility, lex order

License: MIT
"""

from typing import Iterator, Protocol, TypeVar, runtime_checkable

F = TypeVar("F", bound="FieldElement")
E = TypeVar("E", bound="Exponents")


@runtime_checkable
class FieldElement(Protocol):
    """Arithmetic contract every coefficient type must satisfy.

    Division raises DivisionByZeroError or NoModularInverseError instead
    of returning a sentinel. ``canonical()`` returns the value a polynomial
    stores for this coefficient, or None when the term must be dropped.
    """

    def __add__(self: F, other: F) -> F: ...

    def __sub__(self: F, other: F) -> F: ...

    def __mul__(self: F, other: F) -> F: ...

    def __truediv__(self: F, other: F) -> F: ...

    def zero(self: F) -> F: ...

    def one(self: F) -> F: ...

    def from_int(self: F, value: int) -> F: ...

    def from_float(self: F, value: float) -> F: ...

    def to_float(self) -> float: ...

    def is_zero(self) -> bool: ...

    def is_one(self) -> bool: ...

    def canonical(self: F) -> "F | None": ...


@runtime_checkable
class OrderedElement(Protocol):

    def __lt__(self, other) -> bool: ...

    def __le__(self, other) -> bool: ...

    def __gt__(self, other) -> bool: ...

    def __ge__(self, other) -> bool: ...


@runtime_checkable
class MagnitudeElement(Protocol):
    """abs() is used for tolerance logic; sqrt() may be unsupported."""

    def __abs__(self): ...

    def sqrt(self): ...


@runtime_checkable
class Exponents(Protocol):
    """Exponent tuple of a monomial.

    ``sub`` is only defined when ``self.can_reduce(other)`` holds.
    ``lex_compare`` returns -1, 0 or 1.
    """

    def add(self: E, other: E) -> E: ...

    def sub(self: E, other: E) -> E: ...

    def lcm(self: E, other: E) -> E: ...

    def degree(self) -> int: ...

    def can_reduce(self: E, divisor: E) -> bool: ...

    def lex_compare(self: E, other: E) -> int: ...

    def to_tuple(self) -> tuple: ...

    def __iter__(self) -> Iterator[int]: ...

    def __eq__(self, other) -> bool: ...

    def __hash__(self) -> int: ...
