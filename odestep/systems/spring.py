"""Damped spring (harmonic oscillator with viscous damping).

    m x'' = -k x - a v

written as the first order system

    x' = v
    v' = -x k/m - v a/m

with X = (x, v): position from equilibrium and velocity.
"""

from dataclasses import dataclass
from typing import Callable
import numpy as np
from numpy.typing import NDArray

from odestep.core.problem import InitialValueProblem
from odestep.systems.base import System


@dataclass(frozen=True)
class SpringSystem(System):
    """Mass ``m`` on a spring of stiffness ``k`` with damping rate ``a``."""

    k: float = 2.0
    m: float = 1.0
    a: float = 0.1

    def f(self, t: float, x: NDArray) -> NDArray:
        pos, vel = x
        return np.array([vel, -pos * self.k / self.m - vel * self.a / self.m])

    def default_problem(self) -> InitialValueProblem:
        return InitialValueProblem(t0=0.0, x0=np.array([0.5, 0.0]), step=0.1, t_max=60.0)

    def analytic_position(self, x0: float) -> Callable[[float], float]:
        """
        Exact x(t) for x(0) = x0, v(0) = 0 in the under-damped case.

            x(t) = x0 exp(-γt) (cos ωt + γ/ω sin ωt)

        with γ = a/2m and ω = sqrt(k/m - γ²).
        """
        gamma = self.a / (2 * self.m)
        w = np.sqrt(self.k / self.m - gamma**2)

        def position(t: float) -> float:
            return x0 * np.exp(-gamma * t) * (np.cos(w * t) + gamma * np.sin(w * t) / w)

        return position
