"""The International System of Units.

Base units, the named derived units (each an alternate unit of a product of
base units), common derived products and the twenty metric prefixes.
Prefixes are exact rational converters: ``MILLI`` is ``1/1000``.

Constants:
    METRE, KILOGRAM, SECOND, AMPERE, KELVIN, MOLE, CANDELA: Base units.
    RADIAN ... KATAL: Named derived units.
    PREFIXES: ``(symbol, converter)`` pairs from yotta down to yocto.
    SI: The system of units keyed by symbol.
"""

from measurekit.catalog.system import SystemOfUnits
from measurekit.unit import ONE, AlternateUnit, BaseUnit, RationalConverter, RationalNumber

# Base units

METRE = BaseUnit("m", "length")
KILOGRAM = BaseUnit("kg", "mass")
SECOND = BaseUnit("s", "duration")
AMPERE = BaseUnit("A", "electric_current")
KELVIN = BaseUnit("K", "temperature")
MOLE = BaseUnit("mol", "amount_of_substance")
CANDELA = BaseUnit("cd", "luminous_intensity")

# Prefix converters

E24 = RationalConverter(RationalNumber(10**24))
E21 = RationalConverter(RationalNumber(10**21))
E18 = RationalConverter(RationalNumber(10**18))
E15 = RationalConverter(RationalNumber(10**15))
E12 = RationalConverter(RationalNumber(10**12))
E9 = RationalConverter(RationalNumber(10**9))
E6 = RationalConverter(RationalNumber(10**6))
E3 = RationalConverter(RationalNumber(1000))
E2 = RationalConverter(RationalNumber(100))
E1 = RationalConverter(RationalNumber(10))
EM1 = RationalConverter(RationalNumber(1, 10))
EM2 = RationalConverter(RationalNumber(1, 100))
EM3 = RationalConverter(RationalNumber(1, 1000))
EM6 = RationalConverter(RationalNumber(1, 10**6))
EM9 = RationalConverter(RationalNumber(1, 10**9))
EM12 = RationalConverter(RationalNumber(1, 10**12))
EM15 = RationalConverter(RationalNumber(1, 10**15))
EM18 = RationalConverter(RationalNumber(1, 10**18))
EM21 = RationalConverter(RationalNumber(1, 10**21))
EM24 = RationalConverter(RationalNumber(1, 10**24))

PREFIXES = (
    ("Y", E24), ("Z", E21), ("E", E18), ("P", E15), ("T", E12),
    ("G", E9), ("M", E6), ("k", E3), ("h", E2), ("da", E1),
    ("d", EM1), ("c", EM2), ("m", EM3), ("µ", EM6), ("n", EM9),
    ("p", EM12), ("f", EM15), ("a", EM18), ("z", EM21), ("y", EM24),
)

# Named derived units

RADIAN = AlternateUnit("rad", ONE, "angle")
STERADIAN = AlternateUnit("sr", ONE, "solid_angle")
BIT = AlternateUnit("bit", ONE, "data_amount")
HERTZ = AlternateUnit("Hz", SECOND.inverse(), "frequency")
NEWTON = AlternateUnit("N", METRE * KILOGRAM / SECOND.pow(2), "force")
PASCAL = AlternateUnit("Pa", NEWTON / METRE.pow(2), "pressure")
JOULE = AlternateUnit("J", NEWTON * METRE, "energy")
WATT = AlternateUnit("W", JOULE / SECOND, "power")
COULOMB = AlternateUnit("C", SECOND * AMPERE, "electric_charge")
VOLT = AlternateUnit("V", WATT / AMPERE, "electric_potential")
FARAD = AlternateUnit("F", COULOMB / VOLT, "electric_capacitance")
OHM = AlternateUnit("Ω", VOLT / AMPERE, "electric_resistance")
SIEMENS = AlternateUnit("S", AMPERE / VOLT, "electric_conductance")
WEBER = AlternateUnit("Wb", VOLT * SECOND, "magnetic_flux")
TESLA = AlternateUnit("T", WEBER / METRE.pow(2), "magnetic_flux_density")
HENRY = AlternateUnit("H", WEBER / AMPERE, "electric_inductance")
LUMEN = AlternateUnit("lm", CANDELA * STERADIAN, "luminous_flux")
LUX = AlternateUnit("lx", LUMEN / METRE.pow(2), "illuminance")
BECQUEREL = AlternateUnit("Bq", SECOND.inverse(), "radioactive_activity")
GRAY = AlternateUnit("Gy", JOULE / KILOGRAM, "radiation_dose_absorbed")
SIEVERT = AlternateUnit("Sv", JOULE / KILOGRAM, "radiation_dose_effective")
KATAL = AlternateUnit("kat", MOLE / SECOND, "catalytic_activity")

CELSIUS = KELVIN.plus(273.15)
GRAM = KILOGRAM.transform(EM3)

# Derived products

METRE_PER_SECOND = METRE / SECOND
METRE_PER_SQUARE_SECOND = METRE / SECOND.pow(2)
SQUARE_METRE = METRE.pow(2)
CUBIC_METRE = METRE.pow(3)
KILOMETRE = METRE.transform(E3)
CENTIMETRE = METRE.transform(EM2)
MILLIMETRE = METRE.transform(EM3)

# Units labelled with every prefix by the standard format; kilogram is
# prefixed through the gram instead.
PREFIXABLE_UNITS = (
    AMPERE, BECQUEREL, CANDELA, COULOMB, FARAD, GRAY, HENRY, HERTZ, JOULE,
    KATAL, KELVIN, LUMEN, LUX, METRE, MOLE, NEWTON, OHM, PASCAL, RADIAN,
    SECOND, SIEMENS, SIEVERT, STERADIAN, TESLA, VOLT, WATT, WEBER,
)

SI = SystemOfUnits("SI", {
    unit.symbol: unit
    for unit in (
        METRE, KILOGRAM, SECOND, AMPERE, KELVIN, MOLE, CANDELA,
        RADIAN, STERADIAN, BIT, HERTZ, NEWTON, PASCAL, JOULE, WATT, COULOMB,
        VOLT, FARAD, OHM, SIEMENS, WEBER, TESLA, HENRY, LUMEN, LUX,
        BECQUEREL, GRAY, SIEVERT, KATAL,
    )
})
