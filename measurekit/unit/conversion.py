"""Conversion between units sharing a standard unit.

Conversions are routed through the standard unit: ``source -> standard ->
target``. Units with different standard units are never converted, even when
they share a dimension, because that would require physical constants the
unit algebra does not carry.
"""

from __future__ import annotations

import logging

from measurekit.config import BASE_TYPE
from measurekit.errors import ConversionError
from measurekit.unit.converter import IDENTITY, UnitConverter
from measurekit.unit.unit_base import Unit

logger = logging.getLogger(__name__)


def get_converter(source: Unit, target: Unit) -> UnitConverter:
    """Return the converter from ``source`` values to ``target`` values.

    Args:
        source: Unit the values are expressed in.
        target: Unit the values should be expressed in.

    Returns:
        ``IDENTITY`` for equal units, otherwise
        ``target.to_standard_unit().inverse()`` applied after
        ``source.to_standard_unit()``.

    Raises:
        ConversionError: If the standard units differ.
        UnsupportedOperationError: If either unit cannot reach its standard
            unit (non-linear factors inside a product).
    """
    if source == target:
        return IDENTITY
    if source.standard_unit != target.standard_unit:
        raise ConversionError(source, target)
    converter = target.to_standard_unit().inverse().concatenate(source.to_standard_unit())
    logger.debug("converter %r -> %r: %r", source, target, converter)
    return converter


def convert(value: BASE_TYPE, source: Unit, target: Unit) -> BASE_TYPE:
    """Convert a scalar or NumPy array from ``source`` to ``target``.

    Example:
        >>> convert(np.array([0.0, 100.0]), CELSIUS, KELVIN)  # doctest: +SKIP
        array([273.15, 373.15])
    """
    return get_converter(source, target).convert(value)


def is_compatible(a: Unit, b: Unit) -> bool:
    return a.is_compatible(b)
