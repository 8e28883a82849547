"""Systems of units: named collections of units looked up by symbol."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from measurekit.unit import Unit


class SystemOfUnits:
    """Read-only collection of units keyed by their symbol.

    A system answers the two questions a unit format asks of a catalog:
    which unit a symbol denotes (:meth:`unit_for`) and which symbol a unit
    has (:meth:`name_for`).

    Args:
        name: Display name of the system, such as ``"SI"``.
        units: Units keyed by symbol.

    Example:
        >>> from measurekit.catalog import SI
        >>> SI.unit_for("m")
        BaseUnit(symbol='m', quantity='length')
    """

    def __init__(self, name: str, units: Mapping[str, Unit]):
        self.name = name
        self._units = dict(units)
        self._symbols = {unit: symbol for symbol, unit in self._units.items()}

    def unit_for(self, symbol: str) -> Unit | None:
        return self._units.get(symbol)

    def name_for(self, unit: Unit) -> str | None:
        return self._symbols.get(unit)

    @property
    def units(self) -> Mapping[str, Unit]:
        return dict(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, unit: object) -> bool:
        return unit in self._symbols

    def __repr__(self):
        return f"SystemOfUnits({self.name!r}, {len(self)} units)"
