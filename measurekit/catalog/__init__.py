"""Concrete units and quantities.

Modules:
    si: SI base units, named derived units and metric prefixes.
    non_si: Imperial, astronomical, historical and other non-SI units.
    quantities: The catalog of physical quantities.
"""

from . import non_si, si
from .non_si import NON_SI
from .quantities import QUANTITIES, TORQUE_UNIT
from .si import PREFIXES, SI
from .system import SystemOfUnits

__all__ = [
    "si",
    "non_si",
    "SI",
    "NON_SI",
    "PREFIXES",
    "QUANTITIES",
    "TORQUE_UNIT",
    "SystemOfUnits",
]
