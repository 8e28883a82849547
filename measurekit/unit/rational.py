"""Exact rational numbers and rational powers.

Exponents of unit products and the exact scale factors of metric prefixes are
both rational. Floating point would make ``m^(1/3)`` cubed unequal to ``m``,
so both are represented by :class:`RationalNumber`, which is always stored in
lowest terms with a positive denominator. Structural equality of reduced
fractions is therefore value equality.

Classes:
    RationalNumber: Reduced fraction of two integers.
    RationalPower: A base raised to a rational exponent.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import gcd
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, init=False)
class RationalNumber:
    """Immutable fraction kept in lowest terms.

    The constructor divides both parts by their greatest common divisor and
    moves the sign into the numerator, so ``RationalNumber(2, -4)`` is stored
    as ``-1/2``. ``gcd(0, n)`` is ``n``, which makes every zero ``0/1``.

    Attributes:
        numerator (int): Signed numerator.
        denominator (int): Strictly positive denominator.

    Example:
        >>> RationalNumber(6, 8)
        RationalNumber(numerator=3, denominator=4)
        >>> RationalNumber(1, 2) * RationalNumber(2, 3)
        RationalNumber(numerator=1, denominator=3)
    """

    numerator: int
    denominator: int

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise ZeroDivisionError("rational number with zero denominator")
        divisor = gcd(numerator, denominator)
        if denominator < 0:
            divisor = -divisor
        object.__setattr__(self, "numerator", numerator // divisor)
        object.__setattr__(self, "denominator", denominator // divisor)

    @staticmethod
    def of(value: int | RationalNumber) -> RationalNumber:
        """Coerce an integer or rational into a RationalNumber."""
        if isinstance(value, RationalNumber):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return RationalNumber(value)
        raise TypeError(f"expected int or RationalNumber, got {type(value).__name__}")

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1

    def times(self, other: int | RationalNumber) -> RationalNumber:
        other = RationalNumber.of(other)
        return RationalNumber(self.numerator * other.numerator, self.denominator * other.denominator)

    def add(self, other: int | RationalNumber) -> RationalNumber:
        other = RationalNumber.of(other)
        return RationalNumber(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def negate(self) -> RationalNumber:
        return RationalNumber(-self.numerator, self.denominator)

    def inverse(self) -> RationalNumber:
        """Return the reciprocal.

        Raises:
            ZeroDivisionError: If this number is zero.
        """
        if self.numerator == 0:
            raise ZeroDivisionError("zero has no inverse")
        return RationalNumber(self.denominator, self.numerator)

    def __mul__(self, other):
        if isinstance(other, (int, RationalNumber)):
            return self.times(other)
        return NotImplemented

    __rmul__ = __mul__

    def __add__(self, other):
        if isinstance(other, (int, RationalNumber)):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __neg__(self) -> RationalNumber:
        return self.negate()

    def __eq__(self, other):
        if isinstance(other, RationalNumber):
            return self.numerator == other.numerator and self.denominator == other.denominator
        if isinstance(other, int):
            return self.denominator == 1 and self.numerator == other
        return NotImplemented

    def __hash__(self):
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


ZERO = RationalNumber(0)
ONE = RationalNumber(1)


@dataclass(frozen=True)
class RationalPower(Generic[T]):
    """A base raised to a rational exponent, the building block of products."""

    base: T
    exponent: RationalNumber = ONE

    def __post_init__(self):
        object.__setattr__(self, "exponent", RationalNumber.of(self.exponent))

    def inverse(self) -> RationalPower[T]:
        return RationalPower(self.base, self.exponent.negate())
