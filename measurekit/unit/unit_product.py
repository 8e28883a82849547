"""Product units and the normalizer that keeps them canonical.

A product unit is a multiset of units raised to rational exponents. Every
arithmetic combinator goes through :func:`normalize`, which guarantees a
single canonical form per product:

1. Nested products are flattened, multiplying exponents; quantity wrappers
   are unwrapped to their parent first.
2. The dimensionless ``ONE`` contributes nothing and is dropped.
3. Factors with equal bases are merged by adding their exponents.
4. Factors whose exponent became zero are removed.
5. A single factor with exponent one is returned as that bare unit.

``normalize`` is idempotent, so structural equality of normalized products
is value equality: ``m·s/s == m`` and ``m/m == ONE``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from measurekit.errors import UnsupportedOperationError
from measurekit.unit.converter import IDENTITY, UnitConverter
from measurekit.unit.dimension import NONE, Dimension, DimensionalModel
from measurekit.unit.rational import RationalNumber, RationalPower
from measurekit.unit.unit_base import Unit
from measurekit.unit.unit_named import QuantityUnit


@dataclass(frozen=True, eq=False)
class ProductUnit(Unit):
    """Normalized product of units with rational exponents.

    Instances should be obtained from the unit combinators or
    :func:`normalize`; the constructor stores ``elements`` as given.
    Equality ignores factor order.

    Attributes:
        elements (tuple[RationalPower[Unit], ...]): Factors in first-seen order.

    Example:
        >>> velocity = METRE / SECOND  # doctest: +SKIP
        >>> [(e.base.symbol, str(e.exponent)) for e in velocity.elements]  # doctest: +SKIP
        [('m', '1'), ('s', '-1')]
    """

    elements: tuple[RationalPower[Unit], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))

    def _has_only_standard_units(self) -> bool:
        return all(e.base.is_standard_unit for e in self.elements)

    @property
    def standard_unit(self) -> Unit:
        if self._has_only_standard_units():
            return self
        return normalize(RationalPower(e.base.standard_unit, e.exponent) for e in self.elements)

    def to_standard_unit(self) -> UnitConverter:
        """Converter to the standard unit.

        Each factor contributes its own converter once per unit of its
        exponent, inverted for negative exponents.

        Raises:
            UnsupportedOperationError: If a factor has a non-linear converter
                (an offset or logarithmic unit) or a fractional exponent.
        """
        if self._has_only_standard_units():
            return IDENTITY
        converter = IDENTITY
        for element in self.elements:
            step = element.base.to_standard_unit()
            if step is IDENTITY:
                continue
            if not step.is_linear:
                raise UnsupportedOperationError(
                    f"{element.base!r} is non-linear and cannot be part of a product"
                )
            if not element.exponent.is_integer:
                raise UnsupportedOperationError(
                    f"{element.base!r} is raised to the fractional power {element.exponent}"
                )
            if element.exponent.numerator < 0:
                step = step.inverse()
            for _ in range(abs(element.exponent.numerator)):
                converter = converter.concatenate(step)
        return converter

    @property
    def base_unit(self) -> Unit:
        return normalize(RationalPower(e.base.base_unit, e.exponent) for e in self.elements)

    def dimension_in(self, model: DimensionalModel) -> Dimension:
        dimension = NONE
        for element in self.elements:
            dimension = dimension.times(element.base.dimension_in(model).pow(element.exponent))
        return dimension

    def _exponents(self) -> dict[Unit, RationalNumber]:
        return {e.base: e.exponent for e in self.elements}

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return isinstance(other, ProductUnit) and self._exponents() == other._exponents()

    def __hash__(self):
        return hash(frozenset(self._exponents().items()))


ONE = ProductUnit()


def _flatten(elements: Iterable[RationalPower[Unit]]) -> Iterator[RationalPower[Unit]]:
    for element in elements:
        base = element.base
        if isinstance(base, QuantityUnit):
            base = base.parent
        if isinstance(base, ProductUnit):
            for inner in _flatten(base.elements):
                yield RationalPower(inner.base, inner.exponent.times(element.exponent))
        else:
            yield RationalPower(base, element.exponent)


def normalize(elements: Iterable[RationalPower[Unit]]) -> Unit:
    """Return the canonical unit for the product of ``elements``.

    Args:
        elements: Factors as ``RationalPower`` values; bases may be any unit,
            including other products.

    Returns:
        ``ONE`` for an empty product, the bare base for a single factor with
        exponent one, otherwise a :class:`ProductUnit`.
    """
    merged: dict[Unit, RationalNumber] = {}
    for element in _flatten(elements):
        if element.base in merged:
            merged[element.base] = merged[element.base].add(element.exponent)
        else:
            merged[element.base] = element.exponent
    kept = tuple(RationalPower(base, exponent) for base, exponent in merged.items() if exponent != 0)
    if len(kept) == 1 and kept[0].exponent == 1:
        return kept[0].base
    return ProductUnit(kept)


def deep_simplify(unit: Unit) -> Unit:
    """Normalize ``unit`` and expand factors whose standard form is a product.

    Used to compare units built indirectly, through a transformed unit or a
    quantity wrapper, against canonical products. The result keeps the
    standard unit of ``unit`` but not its scale: ``L/s`` becomes ``m³/s``.
    """
    if isinstance(unit, QuantityUnit):
        unit = unit.parent
    if not isinstance(unit, ProductUnit):
        return unit
    expanded = []
    for element in unit.elements:
        standard = element.base.standard_unit
        if isinstance(standard, ProductUnit):
            expanded.append(RationalPower(standard, element.exponent))
        else:
            expanded.append(element)
    return normalize(expanded)
