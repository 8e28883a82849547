"""Quantities and the resolver mapping units to them.

A quantity is a kind of physical property (length, energy, torque) together
with its canonical SI unit. Several quantities can share a dimension, so a
unit does not always determine its quantity: ``kg·m²/s²`` is both an energy
and a torque. The resolver reports such cases instead of guessing.

Resolution of a unit ``u`` against a catalog:

1. A named unit tagged with a catalogued quantity resolves to it directly.
2. A unit that is not its own standard unit resolves as its standard unit.
3. The empty product resolves to the dimensionless quantity.
4. Otherwise a unique exact match against the catalogued SI units (after
   unwrapping quantity wrappers) wins.
5. Otherwise a unique match of the base-unit expansion wins; none is an
   :class:`UnknownQuantityError`, several an :class:`AmbiguousQuantityError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from measurekit.errors import AmbiguousQuantityError, UnknownQuantityError
from measurekit.unit import ONE, AlternateUnit, BaseUnit, Unit, deep_simplify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quantity:
    """A kind of physical property and its SI unit.

    Attributes:
        name (str): Unique tag, such as ``"length"``.
        si_unit (Unit): Canonical SI unit of the quantity.
        description (str): Human readable description.
    """

    name: str
    si_unit: Unit = field(compare=False)
    description: str = field(default="", compare=False)


class QuantityCatalog:
    """Enumerable registry of quantities with unit resolution.

    Args:
        quantities: Catalogued quantities; names must be unique.

    Raises:
        ValueError: If two quantities share a name.

    Example:
        >>> from measurekit.catalog import QUANTITIES, si
        >>> QUANTITIES.quantity_of(si.METRE * si.METRE).name
        'area'
    """

    DIMENSIONLESS = "dimensionless"

    def __init__(self, quantities: Iterable[Quantity]):
        self._quantities = tuple(quantities)
        self._by_name: dict[str, Quantity] = {}
        for quantity in self._quantities:
            if quantity.name in self._by_name:
                raise ValueError(f"duplicate quantity {quantity.name!r}")
            self._by_name[quantity.name] = quantity

    def __iter__(self) -> Iterator[Quantity]:
        return iter(self._quantities)

    def __len__(self) -> int:
        return len(self._quantities)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Quantity | None:
        return self._by_name.get(name)

    @property
    def dimensionless(self) -> Quantity:
        quantity = self._by_name.get(self.DIMENSIONLESS)
        if quantity is None:
            raise UnknownQuantityError(ONE)
        return quantity

    def quantity_of(self, unit: Unit) -> Quantity:
        """Return the unique quantity measured by ``unit``.

        Raises:
            UnknownQuantityError: If no catalogued quantity matches.
            AmbiguousQuantityError: If several quantities match equally well.
        """
        if isinstance(unit, (BaseUnit, AlternateUnit)) and unit.quantity in self._by_name:
            return self._by_name[unit.quantity]
        standard = unit.standard_unit
        if standard != unit:
            return self.quantity_of(standard)
        if unit == ONE:
            return self.dimensionless

        canonical = deep_simplify(unit)
        exact = [q for q in self._quantities if deep_simplify(q.si_unit) == canonical]
        if len(exact) == 1:
            return exact[0]

        vector = unit.base_unit
        matches = [q for q in self._quantities if q.si_unit.base_unit == vector]
        logger.debug("quantity candidates for %r: %s", unit, [q.name for q in matches])
        if not matches:
            raise UnknownQuantityError(unit)
        if len(matches) > 1:
            raise AmbiguousQuantityError(unit, matches)
        return matches[0]
