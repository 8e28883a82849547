"""Unit-of-measure algebra, conversion and notation.

MeasureKit builds, normalizes, converts, parses and prints arbitrary derived
units (``m/s²``, ``kg·m²·s⁻³``) and recovers the physical quantity a derived
unit measures.

Package Architecture:
    Unit Algebra (measurekit.unit):
        • Exact rational numbers for exponents and prefix factors
        • Converter algebra: identity, offset, scale, exact ratio, log/exp
          and compound converters, simplified as they are composed
        • Immutable unit hierarchy: base, alternate, quantity, product and
          transformed units
        • The normalizer that gives every product a single canonical form

    Catalogs (measurekit.catalog):
        • SI base units, named derived units and the twenty metric prefixes
        • Imperial, astronomical, historical and other non-SI units
        • The quantity catalog (length, energy, torque, ...)

    Notation (measurekit.format):
        • Label/alias registries that can be frozen and shared
        • A Lark grammar for unit expressions
        • Standard and ASCII-only formats

    Quantities (measurekit.quantity):
        • Resolution of a unit to the unique quantity it measures, reporting
          unknown and ambiguous cases as errors

Example:
    >>> from measurekit import StandardUnitFormat, QUANTITIES, convert
    >>> fmt = StandardUnitFormat().freeze()
    >>> kmh = fmt.parse("km/h")
    >>> round(convert(36.0, kmh, fmt.parse("m/s")), 9)
    10.0
    >>> QUANTITIES.quantity_of(kmh).name
    'velocity'
"""

from .catalog import NON_SI, PREFIXES, QUANTITIES, SI, SystemOfUnits, non_si, si
from .errors import (
    AmbiguousQuantityError,
    ConversionError,
    LabelValidationError,
    MeasureError,
    QuantityLookupError,
    RegistryFrozenError,
    UnitParseError,
    UnknownQuantityError,
    UnsupportedOperationError,
)
from .format import AsciiUnitFormat, StandardUnitFormat, UnitFormat
from .quantity import Quantity, QuantityCatalog
from .unit import (
    IDENTITY,
    ONE,
    AlternateUnit,
    BaseUnit,
    ProductUnit,
    QuantityUnit,
    RationalNumber,
    TransformedUnit,
    Unit,
    UnitConverter,
    convert,
    get_converter,
    is_compatible,
)

__version__ = "0.1.0"

__all__ = [
    # Units
    "Unit",
    "BaseUnit",
    "AlternateUnit",
    "QuantityUnit",
    "ProductUnit",
    "TransformedUnit",
    "ONE",
    "RationalNumber",
    # Conversion
    "UnitConverter",
    "IDENTITY",
    "get_converter",
    "convert",
    "is_compatible",
    # Catalogs
    "si",
    "non_si",
    "SI",
    "NON_SI",
    "PREFIXES",
    "SystemOfUnits",
    "Quantity",
    "QuantityCatalog",
    "QUANTITIES",
    # Notation
    "UnitFormat",
    "StandardUnitFormat",
    "AsciiUnitFormat",
    # Errors
    "MeasureError",
    "UnitParseError",
    "LabelValidationError",
    "RegistryFrozenError",
    "UnsupportedOperationError",
    "ConversionError",
    "QuantityLookupError",
    "UnknownQuantityError",
    "AmbiguousQuantityError",
]
