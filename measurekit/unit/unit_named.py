"""Named units: base units, alternate units and quantity wrappers.

Base units are the irreducible building blocks (``m``, ``kg``, ``s``). An
alternate unit gives a new symbol to an existing unit so that it stops being
convertible to it: ``rad`` is an alternate of the dimensionless ``one`` and
``Hz`` one of ``1/s``. Both are their own standard unit.

A :class:`QuantityUnit` is an alternate unit without symbol. It only marks
that a product belongs to a particular quantity (torque's ``N·m`` as opposed
to energy's ``J``) and disappears again as soon as it is multiplied.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from measurekit.unit.converter import IDENTITY, UnitConverter
from measurekit.unit.dimension import Dimension, DimensionalModel
from measurekit.unit.unit_base import Unit


@dataclass(frozen=True, eq=False)
class BaseUnit(Unit):
    """Irreducible unit identified by its symbol.

    Attributes:
        symbol (str): Unique symbol, the sole identity of the unit.
        quantity (str | None): Tag of the quantity this unit measures.

    Example:
        >>> BaseUnit("m", "length") == BaseUnit("m")
        True
    """

    symbol: str
    quantity: str | None = field(default=None)

    @property
    def standard_unit(self) -> Unit:
        return self

    def to_standard_unit(self) -> UnitConverter:
        return IDENTITY

    @property
    def base_unit(self) -> Unit:
        return self

    def dimension_in(self, model: DimensionalModel) -> Dimension:
        return model.dimension_of(self.symbol)

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return isinstance(other, BaseUnit) and self.symbol == other.symbol

    def __hash__(self):
        return hash(("base", self.symbol))


@dataclass(frozen=True, eq=False)
class AlternateUnit(Unit):
    """Unit with a symbol of its own, derived from a parent unit.

    Attributes:
        symbol (str | None): Symbol of the unit.
        parent (Unit): Unit this alternate is defined from.
        quantity (str | None): Tag of the quantity this unit measures.

    Raises:
        ValueError: If ``parent`` is not a standard unit.
    """

    symbol: str | None
    parent: Unit
    quantity: str | None = field(default=None)

    def __post_init__(self):
        if not self.parent.is_standard_unit:
            raise ValueError(f"{self.parent!r} is not a standard unit")

    @property
    def standard_unit(self) -> Unit:
        return self

    def to_standard_unit(self) -> UnitConverter:
        return IDENTITY

    @property
    def base_unit(self) -> Unit:
        return self.parent.base_unit

    def dimension_in(self, model: DimensionalModel) -> Dimension:
        return self.parent.dimension_in(model)

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return (
            type(other) is type(self)
            and self.symbol == other.symbol
            and self.parent == other.parent
        )

    def __hash__(self):
        return hash(("alternate", self.symbol, self.parent))


@dataclass(frozen=True, eq=False)
class QuantityUnit(AlternateUnit):
    """Symbol-less alternate unit binding a product to one quantity.

    Example:
        >>> torque = QuantityUnit(NEWTON * METRE, "torque")  # doctest: +SKIP
    """

    symbol: str | None = field(default=None, init=False)
    parent: Unit
    quantity: str | None = None

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return (
            isinstance(other, QuantityUnit)
            and self.parent == other.parent
            and self.quantity == other.quantity
        )

    def __hash__(self):
        return hash(("quantity", self.parent, self.quantity))
