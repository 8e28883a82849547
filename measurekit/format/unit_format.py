"""Bidirectional registry between unit identifiers and units.

A :class:`UnitFormat` owns two tables: labels (name to unit and unit to name)
and aliases (name to unit only). Identifiers it does not know are looked up
in the systems of units it was given, so a bare format still understands
``m`` and ``kg``. Formatting and parsing both go through the registry, and
everything the formatter produces parses back to an equal unit.

Registries are meant to be populated once and then shared. After
:meth:`UnitFormat.freeze` every write raises :class:`RegistryFrozenError`,
which makes concurrent readers safe.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

from measurekit.catalog.system import SystemOfUnits
from measurekit.config import COMPOSITE_MARKERS, PRODUCT_SEPARATOR
from measurekit.errors import LabelValidationError, RegistryFrozenError, UnitParseError
from measurekit.format.grammar import IDENTIFIER_PATTERN, parse_expression
from measurekit.quantity import QuantityCatalog
from measurekit.unit import (
    AddConverter,
    AlternateUnit,
    BaseUnit,
    MultiplyConverter,
    ProductUnit,
    QuantityUnit,
    RationalConverter,
    RationalNumber,
    TransformedUnit,
    Unit,
)

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(IDENTIFIER_PATTERN)

_SUPERSCRIPTS = {2: "²", 3: "³"}


class UnitFormat:
    """Registry-backed formatter and parser of units.

    Args:
        systems: Systems of units consulted for identifiers that have no
            label or alias, in order.
        quantities: Quantity catalog used to re-wrap parsed products that
            denote a quantity wrapper (torque's ``N·m``).

    Example:
        >>> from measurekit.catalog import SI, si
        >>> fmt = UnitFormat([SI])
        >>> fmt.format(si.METRE / si.SECOND.pow(2))
        'm/s²'
        >>> fmt.parse("m/s²") == si.METRE / si.SECOND.pow(2)
        True
    """

    product_separator = PRODUCT_SEPARATOR
    superscript_exponents = True

    def __init__(
        self,
        systems: Iterable[SystemOfUnits] = (),
        quantities: QuantityCatalog | None = None,
    ):
        self._systems = tuple(systems)
        self._quantities = quantities
        self._name_to_unit: dict[str, Unit] = {}
        self._unit_to_name: dict[Unit, str] = {}
        self._frozen = False

    # ----------------------------------------------------------- registry

    @staticmethod
    def is_valid_identifier(name: str) -> bool:
        """Whether ``name`` can be used as a label or alias."""
        return bool(name) and _IDENTIFIER.fullmatch(name) is not None

    def _check_writable(self, name: str) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"cannot register {name!r}: registry is frozen")
        if not self.is_valid_identifier(name):
            raise LabelValidationError(name)

    def label(self, unit: Unit, name: str) -> None:
        """Attach ``name`` to ``unit`` for both formatting and parsing.

        Raises:
            LabelValidationError: If ``name`` is not a valid identifier.
            RegistryFrozenError: If the registry has been frozen.
        """
        self._check_writable(name)
        previous = self._unit_to_name.get(unit)
        if previous is not None and previous != name:
            logger.debug("relabelling %r from %r to %r", unit, previous, name)
        self._name_to_unit[name] = unit
        self._unit_to_name[unit] = name

    def alias(self, unit: Unit, name: str) -> None:
        """Make ``name`` parse as ``unit`` without changing how it formats.

        Raises:
            LabelValidationError: If ``name`` is not a valid identifier.
            RegistryFrozenError: If the registry has been frozen.
        """
        self._check_writable(name)
        self._name_to_unit[name] = unit

    def freeze(self) -> UnitFormat:
        """Reject further writes; returns ``self`` for chaining."""
        self._frozen = True
        logger.debug("froze unit format with %d names", len(self._name_to_unit))
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def labels(self) -> Mapping[str, Unit]:
        """Copy of all registered names (labels and aliases)."""
        return dict(self._name_to_unit)

    def unit_for(self, name: str) -> Unit | None:
        """Unit denoted by identifier ``name``, or ``None``."""
        unit = self._name_to_unit.get(name)
        if unit is not None:
            return unit
        for system in self._systems:
            unit = system.unit_for(name)
            if unit is not None:
                return unit
        return None

    def registered_name(self, unit: Unit) -> str | None:
        """Label of ``unit`` in this format or its systems, never a composite."""
        name = self._unit_to_name.get(unit)
        if name is not None:
            return name
        for system in self._systems:
            name = system.name_for(unit)
            if name is not None:
                return name
        return None

    def name_for(self, unit: Unit) -> str | None:
        """Identifier or composite name of ``unit``, or ``None`` for products."""
        name = self.registered_name(unit)
        if name is not None:
            return name
        if isinstance(unit, BaseUnit):
            return unit.symbol
        if isinstance(unit, AlternateUnit) and unit.symbol is not None:
            return unit.symbol
        if isinstance(unit, TransformedUnit):
            return self._transformed_name(unit)
        return None

    # --------------------------------------------------------- formatting

    def format(self, unit: Unit) -> str:
        """Render ``unit`` in this format's notation."""
        name = self.name_for(unit)
        if name is not None:
            return name
        if isinstance(unit, QuantityUnit):
            return self.format(unit.parent)
        if isinstance(unit, ProductUnit):
            return self._product_name(unit)
        raise TypeError(f"cannot format {unit!r}")

    def _factor_name(self, unit: Unit) -> str:
        name = self.format(unit)
        if any(marker in name for marker in COMPOSITE_MARKERS):
            return f"({name})"
        return name

    def _transformed_name(self, unit: TransformedUnit) -> str:
        parent = self._factor_name(unit.parent)
        converter = unit.to_parent
        if isinstance(converter, AddConverter):
            return f"{parent}+{converter.offset}"
        if isinstance(converter, RationalConverter):
            name = parent
            if converter.dividend != 1:
                name += f"*{converter.dividend}"
            if converter.divisor != 1:
                name += f"/{converter.divisor}"
            return name
        if isinstance(converter, MultiplyConverter):
            return f"{parent}*{converter.factor}"
        return f"[{parent}?]"

    def _product_name(self, unit: ProductUnit) -> str:
        numerator = []
        denominator = []
        for element in unit.elements:
            name = self._factor_name(element.base)
            if element.exponent.numerator > 0:
                numerator.append(name + _format_exponent(element.exponent, self.superscript_exponents))
            else:
                denominator.append(name + _format_exponent(element.exponent.negate(), self.superscript_exponents))
        text = self.product_separator.join(numerator) or "1"
        if len(denominator) == 1:
            text += "/" + denominator[0]
        elif denominator:
            text += "/(" + self.product_separator.join(denominator) + ")"
        return text

    # ------------------------------------------------------------ parsing

    def parse_product_unit(self, text: str) -> Unit:
        """Parse a full unit expression such as ``kg·m²/s²`` or ``K+273.15``.

        Raises:
            UnitParseError: If the text is malformed or names an unknown unit.
        """
        unit = parse_expression(text, self.unit_for)
        if self._quantities is not None and isinstance(unit, ProductUnit):
            for quantity in self._quantities:
                wrapper = quantity.si_unit
                if isinstance(wrapper, QuantityUnit) and wrapper.parent == unit:
                    return wrapper
        return unit

    parse = parse_product_unit

    def parse_single_unit(self, text: str) -> Unit:
        """Parse a lone identifier, without any operators.

        Raises:
            UnitParseError: If ``text`` is not an identifier of a known unit.
        """
        match = _IDENTIFIER.match(text)
        if match is None:
            raise UnitParseError(text, text[:1], 0, "expected a unit identifier")
        if match.end() != len(text):
            raise UnitParseError(text, text[match.end():], match.end(), "unexpected trailing input")
        unit = self.unit_for(text)
        if unit is None:
            raise UnitParseError(text, text, 0, "unknown unit")
        return unit


def _format_exponent(exponent: RationalNumber, superscripts: bool = True) -> str:
    """Exponent suffix: nothing for 1, superscripts for 2 and 3, else ``^p[:r]``."""
    if exponent.denominator == 1:
        if exponent.numerator == 1:
            return ""
        if superscripts and exponent.numerator in _SUPERSCRIPTS:
            return _SUPERSCRIPTS[exponent.numerator]
        return f"^{exponent.numerator}"
    return f"^{exponent.numerator}:{exponent.denominator}"
