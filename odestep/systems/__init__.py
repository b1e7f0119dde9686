"""Academic dynamical systems and a ready-made solver setup for them."""

from odestep.systems.base import System, SystemSolver
from odestep.systems.laser import LaserSystem, laser_configurations
from odestep.systems.lorenz import LorenzSystem
from odestep.systems.spring import SpringSystem
from odestep.systems.volterra import VolterraSystem
from odestep.systems.watertank import (
    WaterTankSystem,
    CascadingWaterTankSystem,
    random_heights,
)

__all__ = [
    "System",
    "SystemSolver",
    "LaserSystem",
    "laser_configurations",
    "LorenzSystem",
    "SpringSystem",
    "VolterraSystem",
    "WaterTankSystem",
    "CascadingWaterTankSystem",
    "random_heights",
]
