"""Units outside the SI that remain in common use.

Every unit here is defined from an SI unit through an exact rational factor
where one exists (``FOOT`` is exactly ``0.3048 m``) and a floating point
factor otherwise. Symbols are those of the standard unit format.
"""

import math

from measurekit.catalog import si
from measurekit.catalog.system import SystemOfUnits
from measurekit.unit import (
    ONE,
    CompoundConverter,
    ExpConverter,
    MultiplyConverter,
    RationalConverter,
    RationalNumber,
    UnitConverter,
)

STANDARD_GRAVITY = RationalNumber(980665, 100000)  # m/s²
INTERNATIONAL_FOOT = RationalNumber(3048, 10000)  # m
AVOIRDUPOIS_POUND = RationalNumber(45359237, 100000000)  # kg
AVOGADRO_CONSTANT = 6.02214199e23  # 1/mol
ELEMENTARY_CHARGE = 1.602176462e-19  # C

# Dimensionless

PERCENT = ONE.transform(si.EM2)
DECIBEL = ONE.transform(CompoundConverter(RationalConverter(RationalNumber(1, 10)), ExpConverter(10.0)))

# Amount of substance

ATOM = si.MOLE.transform(MultiplyConverter(1 / AVOGADRO_CONSTANT))

# Length

FOOT = si.METRE.transform(RationalConverter(INTERNATIONAL_FOOT))
FOOT_SURVEY_US = si.METRE.transform(UnitConverter.rational(1200, 3937))
YARD = FOOT.scaled(3)
INCH = FOOT.scaled(1, 12)
MILE = si.METRE.scaled(1609344, 1000)
NAUTICAL_MILE = si.METRE.scaled(1852)
ANGSTROM = si.METRE.scaled(1, 10**10)
ASTRONOMICAL_UNIT = si.METRE.scaled(149597870691)
LIGHT_YEAR = si.METRE.scaled(9.460528405e15)
PARSEC = si.METRE.scaled(30856770e9)
POINT = INCH.scaled(13837, 1000000)
PIXEL = INCH.scaled(1, 72)

# Duration

MINUTE = si.SECOND.scaled(60)
HOUR = si.SECOND.scaled(60 * 60)
DAY = si.SECOND.scaled(60 * 60 * 24)
WEEK = si.SECOND.scaled(60 * 60 * 24 * 7)
YEAR = si.SECOND.scaled(31556952)
MONTH = si.SECOND.scaled(31556952, 12)
DAY_SIDEREAL = si.SECOND.scaled(86164.09)
YEAR_SIDEREAL = si.SECOND.scaled(31558149.54)
YEAR_CALENDAR = si.SECOND.scaled(60 * 60 * 24 * 365)

# Mass

ATOMIC_MASS = si.KILOGRAM.scaled(1e-3 / AVOGADRO_CONSTANT)
ELECTRON_MASS = si.KILOGRAM.scaled(9.10938188e-31)
POUND = si.KILOGRAM.transform(RationalConverter(AVOIRDUPOIS_POUND))
OUNCE = POUND.scaled(1, 16)
TON_US = POUND.scaled(2000)
TON_UK = POUND.scaled(2240)
METRIC_TON = si.KILOGRAM.transform(si.E3)

# Electric charge and current

E = si.COULOMB.scaled(ELEMENTARY_CHARGE)
FARADAY = si.COULOMB.scaled(ELEMENTARY_CHARGE * AVOGADRO_CONSTANT)
FRANKLIN = si.COULOMB.scaled(3.3356e-10)
GILBERT = si.AMPERE.scaled(10.0 / (4.0 * math.pi))

# Temperature

RANKINE = si.KELVIN.scaled(5, 9)
FAHRENHEIT = RANKINE.plus(459.67)

# Angle

REVOLUTION = si.RADIAN.scaled(2.0 * math.pi)
DEGREE_ANGLE = si.RADIAN.scaled(math.pi / 180)
MINUTE_ANGLE = si.RADIAN.scaled(math.pi / 180 / 60)
SECOND_ANGLE = si.RADIAN.scaled(math.pi / 180 / 60 / 60)
CENTIRADIAN = si.RADIAN.transform(si.EM2)
GRADE = REVOLUTION.scaled(1, 400)
SPHERE = si.STERADIAN.scaled(4.0 * math.pi)

# Velocity and acceleration

MILES_PER_HOUR = MILE / HOUR
KILOMETRES_PER_HOUR = si.KILOMETRE / HOUR
KNOT = NAUTICAL_MILE / HOUR
MACH = si.METRE_PER_SECOND.scaled(331.6)
C = si.METRE_PER_SECOND.scaled(299792458)
G = si.METRE_PER_SQUARE_SECOND.transform(RationalConverter(STANDARD_GRAVITY))

# Area and volume

ARE = si.SQUARE_METRE.transform(si.E2)
HECTARE = ARE.transform(si.E2)
LITRE = si.CUBIC_METRE.transform(si.EM3)
CUBIC_INCH = INCH.pow(3)
GALLON_LIQUID_US = CUBIC_INCH.scaled(231)
OUNCE_LIQUID_US = GALLON_LIQUID_US.scaled(1, 128)
GALLON_DRY_US = CUBIC_INCH.scaled(2688025, 10000)
GALLON_UK = LITRE.scaled(454609, 100000)
OUNCE_LIQUID_UK = GALLON_UK.scaled(1, 160)

# Data amount

BYTE = si.BIT.scaled(8)

# Energy, force, power and pressure

ERG = si.JOULE.scaled(1, 10**7)
ELECTRON_VOLT = si.JOULE.scaled(ELEMENTARY_CHARGE)
DYNE = si.NEWTON.scaled(1, 100000)
KILOGRAM_FORCE = si.NEWTON.transform(RationalConverter(STANDARD_GRAVITY))
POUND_FORCE = si.NEWTON.transform(RationalConverter(AVOIRDUPOIS_POUND * STANDARD_GRAVITY))
HORSEPOWER = si.WATT.scaled(735.499)
ATMOSPHERE = si.PASCAL.scaled(101325)
BAR = si.PASCAL.scaled(100000)
MILLIMETRE_OF_MERCURY = si.PASCAL.scaled(133.322)
INCH_OF_MERCURY = si.PASCAL.scaled(3386.388)

# Electromagnetism and photometry

LAMBERT = si.LUX.scaled(10000)
MAXWELL = si.WEBER.scaled(1, 10**8)
GAUSS = si.TESLA.scaled(1, 10000)

# Radiation

RAD = si.GRAY.transform(si.EM2)
REM = si.SIEVERT.transform(si.EM2)
CURIE = si.BECQUEREL.scaled(37000000000)
RUTHERFORD = si.BECQUEREL.transform(si.E6)
ROENTGEN = (si.COULOMB / si.KILOGRAM).scaled(2.58e-4)

# Viscosity

POISE = si.GRAM / si.CENTIMETRE / si.SECOND
STOKE = si.CENTIMETRE.pow(2) / si.SECOND

NON_SI = SystemOfUnits("NonSI", {
    "%": PERCENT,
    "dB": DECIBEL,
    "atom": ATOM,
    "ft": FOOT,
    "foot_survey_us": FOOT_SURVEY_US,
    "yd": YARD,
    "in": INCH,
    "mi": MILE,
    "nmi": NAUTICAL_MILE,
    "Å": ANGSTROM,
    "ua": ASTRONOMICAL_UNIT,
    "ly": LIGHT_YEAR,
    "pc": PARSEC,
    "pt": POINT,
    "pixel": PIXEL,
    "min": MINUTE,
    "h": HOUR,
    "day": DAY,
    "week": WEEK,
    "year": YEAR,
    "month": MONTH,
    "day_sidereal": DAY_SIDEREAL,
    "year_sidereal": YEAR_SIDEREAL,
    "year_calendar": YEAR_CALENDAR,
    "u": ATOMIC_MASS,
    "me": ELECTRON_MASS,
    "lb": POUND,
    "oz": OUNCE,
    "ton_us": TON_US,
    "ton_uk": TON_UK,
    "t": METRIC_TON,
    "e": E,
    "Fd": FARADAY,
    "Fr": FRANKLIN,
    "Gi": GILBERT,
    "°R": RANKINE,
    "°F": FAHRENHEIT,
    "rev": REVOLUTION,
    "°": DEGREE_ANGLE,
    "'": MINUTE_ANGLE,
    '"': SECOND_ANGLE,
    "centiradian": CENTIRADIAN,
    "grade": GRADE,
    "sphere": SPHERE,
    "mph": MILES_PER_HOUR,
    "kph": KILOMETRES_PER_HOUR,
    "kn": KNOT,
    "Mach": MACH,
    "c": C,
    "grav": G,
    "a": ARE,
    "ha": HECTARE,
    "L": LITRE,
    "gal": GALLON_LIQUID_US,
    "oz_fl": OUNCE_LIQUID_US,
    "gallon_dry_us": GALLON_DRY_US,
    "gallon_uk": GALLON_UK,
    "oz_fl_uk": OUNCE_LIQUID_UK,
    "byte": BYTE,
    "erg": ERG,
    "eV": ELECTRON_VOLT,
    "dyn": DYNE,
    "kgf": KILOGRAM_FORCE,
    "lbf": POUND_FORCE,
    "hp": HORSEPOWER,
    "atm": ATMOSPHERE,
    "bar": BAR,
    "mmHg": MILLIMETRE_OF_MERCURY,
    "inHg": INCH_OF_MERCURY,
    "La": LAMBERT,
    "Mx": MAXWELL,
    "G": GAUSS,
    "rd": RAD,
    "rem": REM,
    "Ci": CURIE,
    "Rd": RUTHERFORD,
    "Roentgen": ROENTGEN,
    "P": POISE,
    "St": STOKE,
})
