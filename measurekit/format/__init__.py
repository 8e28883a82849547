"""Textual notation for units.

Modules:
    grammar: Lark grammar and transformer for unit expressions.
    unit_format: The label/alias registry, the formatter and the parser.
    standard: Ready-made formats with prefixes and non-SI labels.

Example:
    >>> from measurekit.format import StandardUnitFormat
    >>> fmt = StandardUnitFormat().freeze()
    >>> fmt.format(fmt.parse("kg·m²/s²"))
    'kg·m²/s²'
"""

from .grammar import parse_expression
from .standard import AsciiUnitFormat, StandardUnitFormat
from .unit_format import UnitFormat

__all__ = [
    "UnitFormat",
    "StandardUnitFormat",
    "AsciiUnitFormat",
    "parse_expression",
]
