"""Physical dimensions of units.

A dimension is a product of base dimensions raised to rational powers, for
example velocity is ``[L]·[T]^-1``. Dimensions are a weaker notion than
standard units: ``Hz`` and ``Bq`` have different standard units but the same
dimension ``[T]^-1``. They are used only to answer compatibility questions;
conversions still require equal standard units.

Base units are mapped to dimensions by a :class:`DimensionalModel`. The
standard model knows the SI base symbols; any other base unit receives a
private dimension named after its own symbol.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from measurekit.unit.rational import RationalNumber


@dataclass(frozen=True)
class Dimension:
    """Product of base dimensions with rational exponents.

    Attributes:
        exponents (tuple[tuple[str, RationalNumber], ...]): Non-zero exponents
            keyed by base dimension symbol, sorted by symbol.
    """

    exponents: tuple[tuple[str, RationalNumber], ...] = ()

    @classmethod
    def base(cls, symbol: str) -> Dimension:
        return cls(((symbol, RationalNumber(1)),))

    @classmethod
    def _from_mapping(cls, exponents: Mapping[str, RationalNumber]) -> Dimension:
        return cls(tuple(sorted((s, e) for s, e in exponents.items() if e != 0)))

    def times(self, that: Dimension) -> Dimension:
        merged = dict(self.exponents)
        for symbol, exponent in that.exponents:
            merged[symbol] = merged.get(symbol, RationalNumber(0)).add(exponent)
        return Dimension._from_mapping(merged)

    def pow(self, exponent: int | RationalNumber) -> Dimension:
        exponent = RationalNumber.of(exponent)
        return Dimension._from_mapping({s: e.times(exponent) for s, e in self.exponents})

    def divide(self, that: Dimension) -> Dimension:
        return self.times(that.pow(-1))

    __mul__ = times
    __truediv__ = divide
    __pow__ = pow

    def __str__(self) -> str:
        if not self.exponents:
            return "[1]"
        parts = []
        for symbol, exponent in self.exponents:
            parts.append(f"[{symbol}]" if exponent == 1 else f"[{symbol}]^{exponent}")
        return "·".join(parts)


NONE = Dimension()
LENGTH = Dimension.base("L")
MASS = Dimension.base("M")
TIME = Dimension.base("T")
ELECTRIC_CURRENT = Dimension.base("I")
TEMPERATURE = Dimension.base("θ")
AMOUNT_OF_SUBSTANCE = Dimension.base("N")


class DimensionalModel:
    """Mapping between base unit symbols and dimensions.

    Args:
        dimensions: Dimension of each recognised base unit, keyed by symbol.
    """

    def __init__(self, dimensions: Mapping[str, Dimension]):
        self._dimensions = dict(dimensions)

    def dimension_of(self, symbol: str) -> Dimension:
        """Dimension of the base unit with ``symbol``.

        Unrecognised base units get a dimension of their own.
        """
        dimension = self._dimensions.get(symbol)
        if dimension is None:
            return Dimension.base(symbol)
        return dimension


# Luminous intensity is modelled as radiant power per steradian.
STANDARD_MODEL = DimensionalModel({
    "m": LENGTH,
    "kg": MASS,
    "s": TIME,
    "A": ELECTRIC_CURRENT,
    "K": TEMPERATURE,
    "mol": AMOUNT_OF_SUBSTANCE,
    "cd": MASS * LENGTH.pow(2) / TIME.pow(3),
})
