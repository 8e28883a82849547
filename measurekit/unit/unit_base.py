"""Abstract unit and the algebra shared by every unit variant.

This module provides the :class:`Unit` base class. A unit is an immutable
node of a small term graph:

- ``BaseUnit``: an irreducible named unit such as ``m`` or ``s``.
- ``AlternateUnit``: a new symbol for an existing unit, ``N`` for ``kg·m/s²``.
- ``ProductUnit``: a normalized product of units with rational exponents.
- ``TransformedUnit``: a unit derived from a parent by a converter, ``km``.

Every unit knows its *standard unit* (the base, alternate or product of those
it derives from) and the converter to it. Two units are convertible exactly
when they share a standard unit.

Key Concepts:
- Value Semantics: units compare and hash by structure, never by identity.
- Normalized Products: ``times``, ``divide``, ``inverse`` and ``pow`` always
  return the canonical form, so ``m·s/s`` is ``m`` and ``m/m`` is ``ONE``.
- Collapsing Transforms: scaling a scaled unit composes the converters
  instead of nesting the units.

Classes:
    Unit: Abstract base class with the combinators and conversion queries.

Example:
    >>> from measurekit.catalog.si import METRE, SECOND
    >>> velocity = METRE / SECOND
    >>> kilometre = METRE * 1000
    >>> kilometre.get_converter_to(METRE).convert(1.5)
    1500.0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Real

from measurekit.unit.converter import IDENTITY, UnitConverter
from measurekit.unit.dimension import STANDARD_MODEL, Dimension, DimensionalModel
from measurekit.unit.rational import RationalNumber, RationalPower

Number = int | float


class Unit(ABC):
    """Base class for all unit variants.

    Subclasses implement the contract properties (:attr:`standard_unit`,
    :meth:`to_standard_unit`, :attr:`base_unit`, :meth:`dimension_in`) and
    structural equality. Everything else, including the Python operators, is
    defined here in terms of the product normalizer and :meth:`transform`.

    Operators:
        ``a * b``, ``a / b``: product and quotient of two units.
        ``a * 1000``, ``a / 12``: scaled units (exact for integers).
        ``a ** 2``: power, integer or :class:`RationalNumber`.
        ``a + 273.15``: offset unit.
    """

    __slots__ = ()

    # ---------------------------------------------------------------- contract

    @property
    @abstractmethod
    def standard_unit(self) -> Unit:
        """The base, alternate or product unit this unit derives from."""

    @abstractmethod
    def to_standard_unit(self) -> UnitConverter:
        """Converter from this unit to :attr:`standard_unit`."""

    @property
    @abstractmethod
    def base_unit(self) -> Unit:
        """This unit expanded into a product of base units only."""

    @abstractmethod
    def dimension_in(self, model: DimensionalModel) -> Dimension:
        """Dimension of this unit under ``model``."""

    # ----------------------------------------------------------------- queries

    @property
    def is_standard_unit(self) -> bool:
        return self.standard_unit == self

    @property
    def dimension(self) -> Dimension:
        return self.dimension_in(STANDARD_MODEL)

    def is_compatible(self, that: Unit) -> bool:
        """Whether ``self`` and ``that`` measure the same kind of thing.

        Units are compatible when they are equal, share a standard unit, or
        share a dimension. Compatibility does not imply convertibility:
        hertz and becquerel are compatible but not convertible.
        """
        return (
            self == that
            or self.standard_unit == that.standard_unit
            or self.dimension == that.dimension
        )

    def get_converter_to(self, that: Unit) -> UnitConverter:
        """Converter from values in this unit to values in ``that``.

        Raises:
            ConversionError: If the two units have different standard units.
        """
        from measurekit.unit.conversion import get_converter

        return get_converter(self, that)

    # ------------------------------------------------------------ combinators

    def transform(self, operation: UnitConverter) -> Unit:
        """Unit whose values map to this unit through ``operation``."""
        from measurekit.unit.unit_transformed import TransformedUnit

        if operation is IDENTITY:
            return self
        return TransformedUnit(self, operation)

    def scaled(self, factor: Number | RationalNumber, divisor: int = 1) -> Unit:
        """Unit equal to ``factor / divisor`` of this unit.

        Integer and rational factors produce exact converters.
        """
        if isinstance(factor, (int, RationalNumber)) and not isinstance(factor, bool):
            return self.transform(UnitConverter.rational(factor, divisor))
        return self.transform(UnitConverter.multiply(float(factor) / divisor))

    def plus(self, offset: Number) -> Unit:
        """Unit whose zero lies at ``offset`` of this unit, like Celsius."""
        return self.transform(UnitConverter.add(offset))

    def times(self, that: Unit) -> Unit:
        from measurekit.unit.unit_product import normalize

        return normalize((RationalPower(self), RationalPower(that)))

    def divide(self, that: Unit) -> Unit:
        from measurekit.unit.unit_product import normalize

        return normalize((RationalPower(self), RationalPower(that, RationalNumber(-1))))

    def inverse(self) -> Unit:
        return self.pow(-1)

    def pow(self, exponent: int | RationalNumber) -> Unit:
        from measurekit.unit.unit_product import normalize

        return normalize((RationalPower(self, RationalNumber.of(exponent)),))

    def root(self, n: int) -> Unit:
        return self.pow(RationalNumber(1, n))

    # -------------------------------------------------------------- operators

    def __mul__(self, other):
        if isinstance(other, Unit):
            return self.times(other)
        if isinstance(other, (Real, RationalNumber)):
            return self.scaled(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (Real, RationalNumber)):
            return self.scaled(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Unit):
            return self.divide(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.scaled(1, other)
        if isinstance(other, RationalNumber):
            return self.scaled(other.inverse())
        if isinstance(other, Real):
            return self.scaled(1.0 / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, (Real, RationalNumber)):
            return self.inverse().scaled(other)
        return NotImplemented

    def __pow__(self, exponent):
        if isinstance(exponent, (int, RationalNumber)):
            return self.pow(exponent)
        return NotImplemented

    def __add__(self, offset):
        if isinstance(offset, Real):
            return self.plus(offset)
        return NotImplemented
