"""Ready-made unit formats.

:class:`StandardUnitFormat` labels every prefixed SI unit (``km``, ``µs``,
``MHz``), the gram multiples, Celsius and the non-SI units. The
:class:`AsciiUnitFormat` replaces the few labels that need characters outside
ASCII (``µ``, ``Ω``, ``℃``, ``°``, ``Å``), writes products as ``kg*m^2/s^2`` and
defers to a standard format for everything else.

Both are built fresh on every call; share one instance by passing it around
rather than through module state.
"""

from __future__ import annotations

from measurekit.catalog import NON_SI, PREFIXES, QUANTITIES, SI, non_si, si
from measurekit.format.unit_format import UnitFormat
from measurekit.quantity import QuantityCatalog
from measurekit.unit import TransformedUnit, Unit

# Non-SI units and their labels. Order matters where two labels denote equal
# units: the later one is used for formatting.
NON_SI_LABELS = (
    (non_si.PERCENT, "%"),
    (non_si.DECIBEL, "dB"),
    (non_si.G, "grav"),
    (non_si.ATOM, "atom"),
    (non_si.REVOLUTION, "rev"),
    (non_si.DEGREE_ANGLE, "°"),
    (non_si.MINUTE_ANGLE, "'"),
    (non_si.SECOND_ANGLE, '"'),
    (non_si.CENTIRADIAN, "centiradian"),
    (non_si.GRADE, "grade"),
    (non_si.ARE, "a"),
    (non_si.HECTARE, "ha"),
    (non_si.BYTE, "byte"),
    (non_si.MINUTE, "min"),
    (non_si.HOUR, "h"),
    (non_si.DAY, "day"),
    (non_si.WEEK, "week"),
    (non_si.YEAR, "year"),
    (non_si.MONTH, "month"),
    (non_si.DAY_SIDEREAL, "day_sidereal"),
    (non_si.YEAR_SIDEREAL, "year_sidereal"),
    (non_si.YEAR_CALENDAR, "year_calendar"),
    (non_si.E, "e"),
    (non_si.FARADAY, "Fd"),
    (non_si.FRANKLIN, "Fr"),
    (non_si.GILBERT, "Gi"),
    (non_si.ERG, "erg"),
    (non_si.ELECTRON_VOLT, "eV"),
    (non_si.ELECTRON_VOLT.transform(si.E3), "keV"),
    (non_si.ELECTRON_VOLT.transform(si.E6), "MeV"),
    (non_si.ELECTRON_VOLT.transform(si.E9), "GeV"),
    (non_si.LAMBERT, "La"),
    (non_si.FOOT, "ft"),
    (non_si.FOOT_SURVEY_US, "foot_survey_us"),
    (non_si.YARD, "yd"),
    (non_si.INCH, "in"),
    (non_si.MILE, "mi"),
    (non_si.NAUTICAL_MILE, "nmi"),
    (non_si.MILES_PER_HOUR, "mph"),
    (non_si.KILOMETRES_PER_HOUR, "kph"),
    (non_si.ANGSTROM, "Å"),
    (non_si.ASTRONOMICAL_UNIT, "ua"),
    (non_si.LIGHT_YEAR, "ly"),
    (non_si.PARSEC, "pc"),
    (non_si.POINT, "pt"),
    (non_si.PIXEL, "pixel"),
    (non_si.MAXWELL, "Mx"),
    (non_si.GAUSS, "G"),
    (non_si.ATOMIC_MASS, "u"),
    (non_si.ELECTRON_MASS, "me"),
    (non_si.POUND, "lb"),
    (non_si.OUNCE, "oz"),
    (non_si.TON_US, "ton_us"),
    (non_si.TON_UK, "ton_uk"),
    (non_si.METRIC_TON, "t"),
    (non_si.DYNE, "dyn"),
    (non_si.KILOGRAM_FORCE, "kgf"),
    (non_si.POUND_FORCE, "lbf"),
    (non_si.HORSEPOWER, "hp"),
    (non_si.ATMOSPHERE, "atm"),
    (non_si.BAR, "bar"),
    (non_si.MILLIMETRE_OF_MERCURY, "mmHg"),
    (non_si.INCH_OF_MERCURY, "inHg"),
    (non_si.RAD, "rd"),
    (non_si.REM, "rem"),
    (non_si.CURIE, "Ci"),
    (non_si.RUTHERFORD, "Rd"),
    (non_si.SPHERE, "sphere"),
    (non_si.RANKINE, "°R"),
    (non_si.FAHRENHEIT, "°F"),
    (non_si.KNOT, "kn"),
    (non_si.MACH, "Mach"),
    (non_si.C, "c"),
    (non_si.LITRE, "L"),
    (non_si.LITRE.transform(si.EM6), "µL"),
    (non_si.LITRE.transform(si.EM3), "mL"),
    (non_si.LITRE.transform(si.EM2), "cL"),
    (non_si.LITRE.transform(si.EM1), "dL"),
    (non_si.GALLON_LIQUID_US, "gal"),
    (non_si.OUNCE_LIQUID_US, "oz_fl"),
    (non_si.GALLON_DRY_US, "gallon_dry_us"),
    (non_si.GALLON_UK, "gallon_uk"),
    (non_si.OUNCE_LIQUID_UK, "oz_fl_uk"),
    (non_si.ROENTGEN, "Roentgen"),
    (non_si.POISE, "P"),
    (non_si.STOKE, "St"),
)


class StandardUnitFormat(UnitFormat):
    """Unit format with SI prefixes and the usual non-SI labels.

    Args:
        quantities: Quantity catalog used to re-wrap parsed products;
            defaults to the built-in catalog.

    Example:
        >>> fmt = StandardUnitFormat()
        >>> fmt.format(si.METRE.transform(si.E3))
        'km'
        >>> fmt.parse("°C") == si.CELSIUS
        True
    """

    def __init__(self, quantities: QuantityCatalog | None = QUANTITIES):
        super().__init__((SI, NON_SI), quantities)
        for unit in si.PREFIXABLE_UNITS:
            for prefix, converter in PREFIXES:
                self.label(unit.transform(converter), prefix + unit.symbol)

        self.label(si.GRAM, "g")
        for prefix, converter in PREFIXES:
            if prefix == "k":
                continue
            self.label(si.KILOGRAM.transform(converter.concatenate(si.EM3)), prefix + "g")

        self.alias(si.OHM, "Ohm")
        for prefix, converter in PREFIXES:
            self.alias(si.OHM.transform(converter), prefix + "Ohm")

        self.label(si.CELSIUS, "℃")
        self.alias(si.CELSIUS, "°C")
        for prefix, converter in PREFIXES:
            self.label(si.CELSIUS.transform(converter), prefix + "℃")
            self.alias(si.CELSIUS.transform(converter), prefix + "°C")

        for unit, name in NON_SI_LABELS:
            self.label(unit, name)


class AsciiUnitFormat(UnitFormat):
    """Unit format restricted to ASCII labels.

    Names it does not define itself are resolved by ``fallback``.

    Args:
        fallback: Format consulted for everything not labelled here;
            defaults to a new :class:`StandardUnitFormat`.
    """

    product_separator = "*"
    superscript_exponents = False

    def __init__(self, fallback: UnitFormat | None = None):
        super().__init__()
        self._fallback = fallback if fallback is not None else StandardUnitFormat()
        micro = dict(PREFIXES)["µ"]

        for unit in si.PREFIXABLE_UNITS:
            self.label(unit.transform(micro), "micro" + unit.symbol)
        self.label(si.KILOGRAM.transform(micro.concatenate(si.EM3)), "microg")

        self.label(si.OHM, "Ohm")
        for prefix, converter in PREFIXES:
            self.label(si.OHM.transform(converter), _ascii_prefix(prefix) + "Ohm")

        self.label(si.CELSIUS, "Celsius")
        for prefix, converter in PREFIXES:
            self.label(si.CELSIUS.transform(converter), _ascii_prefix(prefix) + "Celsius")

        self.label(non_si.DEGREE_ANGLE, "degree_angle")
        self.label(non_si.ANGSTROM, "Angstrom")
        self.label(non_si.RANKINE, "degree_rankine")
        self.label(non_si.FAHRENHEIT, "degree_fahrenheit")
        self.label(non_si.LITRE.transform(si.EM6), "microL")

    def unit_for(self, name: str) -> Unit | None:
        unit = super().unit_for(name)
        return unit if unit is not None else self._fallback.unit_for(name)

    def name_for(self, unit: Unit) -> str | None:
        name = self._unit_to_name.get(unit)
        if name is not None:
            return name
        if isinstance(unit, TransformedUnit):
            name = self._fallback.registered_name(unit)
            return name if name is not None else self._transformed_name(unit)
        return self._fallback.name_for(unit)


def _ascii_prefix(prefix: str) -> str:
    return "micro" if prefix == "µ" else prefix
