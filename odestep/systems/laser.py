"""Laser rate equations, which can exhibit chaos.

Light intensity L and population inversion D under a modulated loss:

    L' = D - 1 - m cos(w t)
    D' = g (a - D (1 + exp(L)))

Setting Z = w t makes the system autonomous:

    L' = D - 1 - m cos(Z)
    D' = g (a - D (1 + exp(L)))
    Z' = w
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import numpy as np
from numpy.typing import NDArray

from odestep.core.errors import ConfigurationError
from odestep.core.problem import InitialValueProblem
from odestep.systems.base import System


@dataclass(frozen=True)
class LaserSystem(System):
    """Modulation depth ``m``, decay ratio ``g``, pulsation ``w``, pump ``a``."""

    m: float
    g: float
    w: float
    a: float

    @property
    def period(self) -> float:
        """Modulation period 2π/w."""
        return 2 * np.pi / self.w

    def f(self, t: float, x: NDArray) -> NDArray:
        L, D, Z = x
        return np.array([
            D - 1 - self.m * np.cos(Z),
            self.g * (self.a - D * (1 + np.exp(L))),
            self.w,
        ])

    def default_problem(self) -> InitialValueProblem:
        T = self.period
        return InitialValueProblem(
            t0=0.0, x0=np.array([1.0, 1.0, 0.0]), step=T / 40, t_max=60 * T
        )

    @classmethod
    def from_configuration(
        cls,
        name: str,
        configurations: Optional[Mapping[str, "LaserSystem"]] = None,
    ) -> "LaserSystem":
        """Look ``name`` up in ``configurations`` (the standard ones by default)."""
        if configurations is None:
            configurations = laser_configurations()
        try:
            return configurations[name]
        except KeyError:
            raise ConfigurationError(
                f"unknown laser configuration {name!r}, "
                f"expected one of {sorted(configurations)}"
            ) from None


def laser_configurations() -> dict[str, LaserSystem]:
    """Named parameter sets of the laser system."""
    return {
        "chaos": LaserSystem(m=2.5e-2, g=1e-3, w=1e-2, a=1.1),
        "1T_LONG_TRANSIENT": LaserSystem(m=2.5e-2, g=1e-3, w=1e-1, a=1.1),
    }
