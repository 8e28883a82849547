"""Unit algebra core.

This package contains the term graph of units and everything needed to
combine, normalize and convert them. It has no knowledge of concrete unit
catalogs or of textual notation; those live in ``measurekit.catalog`` and
``measurekit.format``.

Architecture:
    RationalNumber / RationalPower:
        Exact exponents and exact scale factors.

    UnitConverter hierarchy:
        Identity, Add, Multiply, Rational, Log/Exp and Compound converters,
        composed with ``concatenate`` and simplified eagerly.

    Unit hierarchy:
        BaseUnit, AlternateUnit, QuantityUnit, ProductUnit and TransformedUnit,
        all immutable and compared by value.

    Normalizer:
        ``normalize`` flattens, merges and simplifies products so that equal
        products are structurally equal.

Key Features:
    • Exact arithmetic for prefixes and exponents
    • Vectorised conversion of NumPy arrays
    • Rational powers (the cube root of a litre is a length)
    • Offset and logarithmic units

Example:
    >>> from measurekit.unit import BaseUnit, ONE
    >>> metre, second = BaseUnit("m"), BaseUnit("s")
    >>> (metre / second * second) == metre
    True
    >>> (metre / metre) == ONE
    True
"""

from .conversion import convert, get_converter, is_compatible
from .converter import (
    IDENTITY,
    AddConverter,
    CompoundConverter,
    ExpConverter,
    IdentityConverter,
    LogConverter,
    MultiplyConverter,
    RationalConverter,
    UnitConverter,
)
from .dimension import STANDARD_MODEL, Dimension, DimensionalModel
from .rational import RationalNumber, RationalPower
from .unit_base import Unit
from .unit_named import AlternateUnit, BaseUnit, QuantityUnit
from .unit_product import ONE, ProductUnit, deep_simplify, normalize
from .unit_transformed import TransformedUnit

__all__ = [
    # Numbers
    "RationalNumber",
    "RationalPower",
    # Converters
    "UnitConverter",
    "IdentityConverter",
    "IDENTITY",
    "AddConverter",
    "MultiplyConverter",
    "RationalConverter",
    "LogConverter",
    "ExpConverter",
    "CompoundConverter",
    # Dimensions
    "Dimension",
    "DimensionalModel",
    "STANDARD_MODEL",
    # Units
    "Unit",
    "BaseUnit",
    "AlternateUnit",
    "QuantityUnit",
    "ProductUnit",
    "TransformedUnit",
    "ONE",
    # Algorithms
    "normalize",
    "deep_simplify",
    "get_converter",
    "convert",
    "is_compatible",
]
