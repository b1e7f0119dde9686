"""Lorenz system.

    x' = sigma (y - x)
    y' = x (rho - z) - y
    z' = x y - beta z
"""

from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from odestep.core.problem import InitialValueProblem
from odestep.systems.base import System


@dataclass(frozen=True)
class LorenzSystem(System):
    """Chaotic for the classical parameters (10, 28, 8/3)."""

    sigma: float = 10.0
    rho: float = 28.0
    beta: float = 8.0 / 3.0

    def f(self, t: float, x: NDArray) -> NDArray:
        X, Y, Z = x
        return np.array([
            self.sigma * (Y - X),
            X * (self.rho - Z) - Y,
            X * Y - self.beta * Z,
        ])

    def default_problem(self) -> InitialValueProblem:
        return InitialValueProblem(t0=0.0, x0=np.array([1.0, 1.0, 1.0]), step=0.01, t_max=100.0)
