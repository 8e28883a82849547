"""Composable numeric converters between units.

A converter is an invertible function from values expressed in one unit to
values expressed in another. Converters are immutable and compose with
:meth:`UnitConverter.concatenate`; composition simplifies eagerly so that
chains of linear scalings collapse to a single factor and neutral elements
disappear.

Converters accept anything in :data:`measurekit.config.BASE_TYPE`, so a whole
NumPy array of measurements can be converted in one call.

Classes:
    UnitConverter: Abstract base with factories and composition.
    IdentityConverter: The neutral converter, available as ``IDENTITY``.
    AddConverter: Adds a constant offset (Celsius to kelvin).
    MultiplyConverter: Multiplies by a floating point factor.
    RationalConverter: Multiplies by an exact fraction.
    LogConverter / ExpConverter: Logarithm and its inverse.
    CompoundConverter: Two converters applied in sequence.

Example:
    >>> km_to_m = UnitConverter.rational(1000)
    >>> km_to_m.concatenate(UnitConverter.rational(1, 1000)) is IDENTITY
    True
    >>> UnitConverter.add(273.15)(20.0)
    293.15
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from measurekit.config import BASE_TYPE
from measurekit.unit.rational import RationalNumber


class UnitConverter(ABC):
    """Base class of all converters.

    ``a.concatenate(b)`` is the converter that applies ``b`` first and then
    ``a``. Subclasses override :meth:`concatenate` to simplify the
    combinations they understand and defer to this base implementation,
    which wraps both into a :class:`CompoundConverter`, for everything else.

    Two converters are equal when concatenating one with the inverse of the
    other yields the identity. Floating point factors limit how reliably this
    holds for very large or very small multipliers.
    """

    __slots__ = ()

    @staticmethod
    def add(offset: float) -> UnitConverter:
        """Converter adding ``offset``, or ``IDENTITY`` when it is zero."""
        return IDENTITY if offset == 0 else AddConverter(offset)

    @staticmethod
    def multiply(factor: float) -> UnitConverter:
        """Converter multiplying by ``factor``, or ``IDENTITY`` when it is one."""
        return IDENTITY if factor == 1.0 else MultiplyConverter(factor)

    @staticmethod
    def rational(dividend: int | RationalNumber, divisor: int = 1) -> UnitConverter:
        """Exact converter multiplying by ``dividend / divisor``."""
        factor = RationalNumber.of(dividend).times(RationalNumber(1, divisor))
        return IDENTITY if factor == 1 else RationalConverter(factor)

    @staticmethod
    def log(base: float) -> UnitConverter:
        return LogConverter(base)

    @abstractmethod
    def inverse(self) -> UnitConverter:
        """Return the converter undoing this one."""

    @abstractmethod
    def convert(self, x: BASE_TYPE) -> BASE_TYPE:
        """Convert a scalar or array value."""

    @property
    @abstractmethod
    def is_linear(self) -> bool:
        """Whether ``convert(u + v) == convert(u) + convert(v)``."""

    def concatenate(self, converter: UnitConverter) -> UnitConverter:
        if converter is IDENTITY:
            return self
        return CompoundConverter(converter, self)

    def __call__(self, x: BASE_TYPE) -> BASE_TYPE:
        return self.convert(x)

    def __eq__(self, other):
        if not isinstance(other, UnitConverter):
            return NotImplemented
        return self.concatenate(other.inverse()) is IDENTITY

    def __hash__(self):
        return hash(float(self.convert(1.0)))


class IdentityConverter(UnitConverter):
    """Converter returning its input unchanged."""

    __slots__ = ()

    def inverse(self) -> UnitConverter:
        return self

    def convert(self, x: BASE_TYPE) -> BASE_TYPE:
        return x

    @property
    def is_linear(self) -> bool:
        return True

    def concatenate(self, converter: UnitConverter) -> UnitConverter:
        return converter

    def __eq__(self, other):
        return isinstance(other, IdentityConverter)

    def __hash__(self):
        return hash(1.0)

    def __repr__(self):
        return "IDENTITY"


IDENTITY = IdentityConverter()


class AddConverter(UnitConverter):
    """Converter adding a constant offset.

    Args:
        offset: Value added on conversion. Must not be zero; use
            :meth:`UnitConverter.add` to get ``IDENTITY`` for a zero offset.

    Raises:
        ValueError: If ``offset`` is zero.
    """

    __slots__ = ("offset",)

    def __init__(self, offset: float):
        if offset == 0:
            raise ValueError("an add converter with zero offset is the identity")
        self.offset = float(offset)

    def inverse(self) -> UnitConverter:
        return AddConverter(-self.offset)

    def convert(self, x: BASE_TYPE) -> BASE_TYPE:
        return x + self.offset

    @property
    def is_linear(self) -> bool:
        return False

    def concatenate(self, converter: UnitConverter) -> UnitConverter:
        if isinstance(converter, AddConverter):
            return UnitConverter.add(self.offset + converter.offset)
        return super().concatenate(converter)

    def __eq__(self, other):
        return isinstance(other, AddConverter) and self.offset == other.offset

    def __hash__(self):
        return hash(1.0 + self.offset)

    def __repr__(self):
        return f"AddConverter({self.offset!r})"


class MultiplyConverter(UnitConverter):
    """Converter multiplying by a floating point factor."""

    __slots__ = ("factor",)

    def __init__(self, factor: float):
        self.factor = float(factor)

    def inverse(self) -> UnitConverter:
        return MultiplyConverter(1.0 / self.factor)

    def convert(self, x: BASE_TYPE) -> BASE_TYPE:
        return x * self.factor

    @property
    def is_linear(self) -> bool:
        return True

    def concatenate(self, converter: UnitConverter) -> UnitConverter:
        if isinstance(converter, MultiplyConverter):
            return UnitConverter.multiply(self.factor * converter.factor)
        if isinstance(converter, RationalConverter):
            factor = converter.factor
            return UnitConverter.multiply(self.factor * factor.numerator / factor.denominator)
        return super().concatenate(converter)

    def __eq__(self, other):
        if isinstance(other, MultiplyConverter):
            return self.factor == other.factor
        return super().__eq__(other)

    def __hash__(self):
        return hash(self.factor)

    def __repr__(self):
        return f"MultiplyConverter({self.factor!r})"


class RationalConverter(UnitConverter):
    """Converter multiplying by an exact fraction.

    Composition of rational converters stays exact, which is what keeps
    ``km -> mm`` a clean ``10^6`` instead of an accumulated float.
    """

    __slots__ = ("factor",)

    def __init__(self, factor: RationalNumber):
        self.factor = RationalNumber.of(factor)

    @property
    def dividend(self) -> int:
        return self.factor.numerator

    @property
    def divisor(self) -> int:
        return self.factor.denominator

    def inverse(self) -> UnitConverter:
        return RationalConverter(self.factor.inverse())

    def convert(self, x: BASE_TYPE) -> BASE_TYPE:
        return x * self.factor.numerator / self.factor.denominator

    @property
    def is_linear(self) -> bool:
        return True

    def concatenate(self, converter: UnitConverter) -> UnitConverter:
        if isinstance(converter, RationalConverter):
            return UnitConverter.rational(self.factor.times(converter.factor))
        if isinstance(converter, MultiplyConverter):
            return converter.concatenate(self)
        return super().concatenate(converter)

    def __eq__(self, other):
        if isinstance(other, RationalConverter):
            return self.factor == other.factor
        return super().__eq__(other)

    def __hash__(self):
        return hash(float(self.factor))

    def __repr__(self):
        return f"RationalConverter({self.factor})"


class LogConverter(UnitConverter):
    """Converter taking the logarithm in a given base."""

    __slots__ = ("base",)

    def __init__(self, base: float):
        self.base = float(base)

    def inverse(self) -> UnitConverter:
        return ExpConverter(self.base)

    def convert(self, x: BASE_TYPE) -> BASE_TYPE:
        return np.log(x) / np.log(self.base)

    @property
    def is_linear(self) -> bool:
        return False

    def __eq__(self, other):
        return isinstance(other, LogConverter) and self.base == other.base

    def __hash__(self):
        return hash(("log", self.base))

    def __repr__(self):
        return f"LogConverter({self.base!r})"


class ExpConverter(UnitConverter):
    """Inverse of :class:`LogConverter`: raises the base to the value."""

    __slots__ = ("base",)

    def __init__(self, base: float):
        self.base = float(base)

    def inverse(self) -> UnitConverter:
        return LogConverter(self.base)

    def convert(self, x: BASE_TYPE) -> BASE_TYPE:
        return np.power(self.base, x)

    @property
    def is_linear(self) -> bool:
        return False

    def __eq__(self, other):
        return isinstance(other, ExpConverter) and self.base == other.base

    def __hash__(self):
        return hash(("exp", self.base))

    def __repr__(self):
        return f"ExpConverter({self.base!r})"


class CompoundConverter(UnitConverter):
    """Converter applying ``first`` and then ``second``."""

    __slots__ = ("first", "second")

    def __init__(self, first: UnitConverter, second: UnitConverter):
        self.first = first
        self.second = second

    def inverse(self) -> UnitConverter:
        return CompoundConverter(self.second.inverse(), self.first.inverse())

    def convert(self, x: BASE_TYPE) -> BASE_TYPE:
        return self.second.convert(self.first.convert(x))

    @property
    def is_linear(self) -> bool:
        return self.first.is_linear and self.second.is_linear

    def __eq__(self, other):
        return (
            isinstance(other, CompoundConverter)
            and self.first == other.first
            and self.second == other.second
        )

    def __hash__(self):
        return hash((hash(self.first), hash(self.second)))

    def __repr__(self):
        return f"CompoundConverter({self.first!r}, {self.second!r})"
