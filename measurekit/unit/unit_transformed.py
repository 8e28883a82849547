"""Units derived from a parent unit by a converter."""

from __future__ import annotations

from dataclasses import dataclass

from measurekit.unit.converter import IDENTITY, UnitConverter
from measurekit.unit.dimension import Dimension, DimensionalModel
from measurekit.unit.unit_base import Unit


@dataclass(frozen=True, eq=False)
class TransformedUnit(Unit):
    """Unit whose values convert to ``parent`` through ``to_parent``.

    Prefixed units (``km``), offset units (``℃``) and logarithmic units
    (``dB``) are all transformed units. Build them with :meth:`Unit.transform`
    (or ``scaled``/``plus``), which never nests transforms: transforming a
    transformed unit composes the converters onto the original parent.

    Attributes:
        parent (Unit): The untransformed unit.
        to_parent (UnitConverter): Converter from this unit to ``parent``.

    Raises:
        ValueError: If ``to_parent`` is the identity or ``parent`` is itself
            a transformed unit.

    Example:
        >>> kilometre = METRE.transform(UnitConverter.rational(1000))  # doctest: +SKIP
        >>> kilometre.transform(UnitConverter.rational(1, 1000)) == METRE  # doctest: +SKIP
        True
    """

    parent: Unit
    to_parent: UnitConverter

    def __post_init__(self):
        if self.to_parent is IDENTITY:
            raise ValueError("a transformed unit needs a non-identity converter")
        if isinstance(self.parent, TransformedUnit):
            raise ValueError("transformed units cannot be nested, use transform()")

    @property
    def standard_unit(self) -> Unit:
        return self.parent.standard_unit

    def to_standard_unit(self) -> UnitConverter:
        return self.parent.to_standard_unit().concatenate(self.to_parent)

    @property
    def base_unit(self) -> Unit:
        return self.parent.base_unit

    def dimension_in(self, model: DimensionalModel) -> Dimension:
        return self.parent.dimension_in(model)

    def transform(self, operation: UnitConverter) -> Unit:
        if operation is IDENTITY:
            return self
        to_parent = self.to_parent.concatenate(operation)
        if to_parent == IDENTITY:
            return self.parent
        return TransformedUnit(self.parent, to_parent)

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return (
            isinstance(other, TransformedUnit)
            and self.parent == other.parent
            and self.to_parent == other.to_parent
        )

    def __hash__(self):
        return hash(("transformed", self.parent, self.to_parent))
