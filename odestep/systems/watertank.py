"""Water tanks filled at a constant rate and leaking through a hole.

Single tank, height h, input flow d, leak proportional to pressure:

    h' = d - a h

Exact solution: h(t) = d/a + (h0 - d/a) exp(-a t), relaxing towards the
equilibrium d/a with time constant T = 1/a.

In a cascade, tank i is fed by the leak of tank i-1:

    h0' = d - a h0
    hi' = a (h(i-1) - hi)
"""

from dataclasses import dataclass
from typing import Optional
import numpy as np
from numpy.typing import NDArray

from odestep.core.errors import ConfigurationError
from odestep.core.problem import InitialValueProblem
from odestep.systems.base import System


@dataclass(frozen=True)
class WaterTankSystem(System):
    """Single tank."""

    d: float = 2.0
    a: float = 1.0

    def f(self, t: float, x: NDArray) -> NDArray:
        return np.array([self.d - self.a * x[0]])

    def default_problem(self) -> InitialValueProblem:
        T = 1 / self.a
        h0 = 1 + self.d / self.a
        return InitialValueProblem(t0=0.0, x0=np.array([h0]), step=T / 40, t_max=8 * T)

    def analytic_height(self, h0: float, t: float) -> float:
        """Exact height at ``t`` starting from ``h0`` at t = 0."""
        he = self.d / self.a
        return he + (h0 - he) * np.exp(-self.a * t)


@dataclass(frozen=True)
class CascadingWaterTankSystem(System):
    """Chain of ``n`` tanks; ``seed`` fixes the random initial heights."""

    d: float = 2.0
    a: float = 1.0
    n: int = 8
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ConfigurationError(f"need at least one tank, got n={self.n}")

    def f(self, t: float, x: NDArray) -> NDArray:
        dxdt = np.empty_like(x)
        dxdt[0] = self.d - self.a * x[0]
        dxdt[1:] = self.a * (x[:-1] - x[1:])
        return dxdt

    def default_problem(self) -> InitialValueProblem:
        T = 1 / self.a
        he = self.d / self.a
        return InitialValueProblem(
            t0=0.0,
            x0=random_heights(self.n, he, 0.2 * he, self.seed),
            step=T / 40,
            t_max=2 * T * self.n,
        )


def random_heights(n: int, h: float, dh: float, seed: Optional[int] = None) -> NDArray:
    """n heights uniformly spread in [h - dh/2, h + dh/2)."""
    rng = np.random.default_rng(seed)
    return h + dh * (rng.random(n) - 0.5)
