"""Catalog of physical quantities and their SI units."""

from measurekit.catalog import si
from measurekit.quantity import Quantity, QuantityCatalog
from measurekit.unit import ONE, QuantityUnit

TORQUE_UNIT = QuantityUnit(si.NEWTON * si.METRE, "torque")

QUANTITIES = QuantityCatalog([
    Quantity("dimensionless", ONE, "A pure number, without unit."),
    Quantity("acceleration", si.METRE_PER_SQUARE_SECOND, "Rate of change of velocity."),
    Quantity("amount_of_substance", si.MOLE, "Number of elementary entities."),
    Quantity("angle", si.RADIAN, "Figure formed by two lines diverging from a point."),
    Quantity("angular_acceleration", si.RADIAN / si.SECOND.pow(2)),
    Quantity("angular_velocity", si.RADIAN / si.SECOND),
    Quantity("area", si.SQUARE_METRE, "Extent of a planar region."),
    Quantity("catalytic_activity", si.KATAL),
    Quantity("data_amount", si.BIT, "Measure of data."),
    Quantity("data_rate", si.BIT / si.SECOND),
    Quantity("duration", si.SECOND, "Period of existence or persistence."),
    Quantity("dynamic_viscosity", si.PASCAL * si.SECOND),
    Quantity("electric_capacitance", si.FARAD),
    Quantity("electric_charge", si.COULOMB),
    Quantity("electric_conductance", si.SIEMENS),
    Quantity("electric_current", si.AMPERE),
    Quantity("electric_inductance", si.HENRY),
    Quantity("electric_potential", si.VOLT),
    Quantity("electric_resistance", si.OHM),
    Quantity("energy", si.JOULE, "Capacity of a system to do work."),
    Quantity("force", si.NEWTON),
    Quantity("frequency", si.HERTZ, "Number of times an event occurs per unit time."),
    Quantity("illuminance", si.LUX),
    Quantity("kinematic_viscosity", si.METRE.pow(2) / si.SECOND),
    Quantity("length", si.METRE, "Extent of something along its greatest dimension."),
    Quantity("luminous_flux", si.LUMEN),
    Quantity("luminous_intensity", si.CANDELA),
    Quantity("magnetic_flux", si.WEBER),
    Quantity("magnetic_flux_density", si.TESLA),
    Quantity("mass", si.KILOGRAM),
    Quantity("mass_flow_rate", si.KILOGRAM / si.SECOND),
    Quantity("power", si.WATT),
    Quantity("pressure", si.PASCAL),
    Quantity("radiation_dose_absorbed", si.GRAY),
    Quantity("radiation_dose_effective", si.SIEVERT),
    Quantity("radioactive_activity", si.BECQUEREL),
    Quantity("solid_angle", si.STERADIAN),
    Quantity("temperature", si.KELVIN),
    Quantity("torque", TORQUE_UNIT, "Moment of a force; shares its dimension with energy."),
    Quantity("velocity", si.METRE_PER_SECOND),
    Quantity("volume", si.CUBIC_METRE),
    Quantity("volumetric_density", si.KILOGRAM / si.CUBIC_METRE),
    Quantity("volumetric_flow_rate", si.CUBIC_METRE / si.SECOND),
])
