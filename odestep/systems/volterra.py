"""Lotka-Volterra prey/predator model.

    x' = x (a - b y)
    y' = y (d x - g)

x: preys, y: predators. a: prey reproduction rate, b: prey death rate due
to predators, d: predator reproduction rate per captured prey, g: predator
death rate.

Fixed points are (0, 0) and (g/d, a/b). Near the non-trivial one the
populations oscillate with period 2π/sqrt(a b).
"""

from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from odestep.core.problem import InitialValueProblem
from odestep.systems.base import System


@dataclass(frozen=True)
class VolterraSystem(System):
    a: float = 2.0 / 3.0
    b: float = 4.0 / 3.0
    d: float = 1.0
    g: float = 1.0

    @property
    def equilibrium(self) -> NDArray:
        """Non-trivial fixed point (g/d, a/b)."""
        return np.array([self.g / self.d, self.a / self.b])

    @property
    def period(self) -> float:
        """Pseudo period of small oscillations."""
        return 2 * np.pi / np.sqrt(self.a * self.b)

    def f(self, t: float, x: NDArray) -> NDArray:
        prey, predator = x
        return np.array([
            prey * (self.a - self.b * predator),
            predator * (self.d * prey - self.g),
        ])

    def default_problem(self) -> InitialValueProblem:
        xe, ye = self.equilibrium
        T = self.period
        return InitialValueProblem(
            t0=0.0, x0=np.array([0.8 * xe, 1.2 * ye]), step=T / 40, t_max=4 * T
        )
