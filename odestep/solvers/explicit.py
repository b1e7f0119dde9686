"""Explicit fixed-step algorithms.

The three dedicated strategies follow the textbook formulas literally:

* :class:`EulerStep` - ``X + h f(t, X)``, local error O(h^2). Needs a
  small step to stay accurate.
* :class:`RK2Step` - explicit midpoint rule, local error O(h^3).
* :class:`RK4Step` - classical Runge-Kutta, local error O(h^5).

:class:`ExplicitRungeKutta` integrates any explicit Butcher tableau by
forward substitution.
"""

import numpy as np
from numpy.typing import NDArray

from odestep.core.errors import ConfigurationError
from odestep.core.method import ButcherTableau
from odestep.core.problem import DerivativeFunction
from odestep.solvers.base import StepAlgorithm, evaluate


class EulerStep(StepAlgorithm):
    """Forward Euler: one derivative evaluation per step."""

    order = 1
    stages = 1

    def step(
        self,
        f: DerivativeFunction,
        t_n: float,
        x_n: NDArray,
        h: float,
    ) -> NDArray:
        slope = evaluate(f, t_n, x_n)
        return x_n + h * slope


class RK2Step(StepAlgorithm):
    """Two-stage midpoint method."""

    order = 2
    stages = 2

    def step(
        self,
        f: DerivativeFunction,
        t_n: float,
        x_n: NDArray,
        h: float,
    ) -> NDArray:
        k1 = evaluate(f, t_n, x_n)
        x_m = x_n + h * k1 / 2
        k2 = evaluate(f, t_n + h / 2, x_m)
        return x_n + h * k2


class RK4Step(StepAlgorithm):
    """Classical four-stage Runge-Kutta method."""

    order = 4
    stages = 4

    def step(
        self,
        f: DerivativeFunction,
        t_n: float,
        x_n: NDArray,
        h: float,
    ) -> NDArray:
        k1 = h * evaluate(f, t_n, x_n)
        k2 = h * evaluate(f, t_n + h / 2, x_n + k1 / 2)
        k3 = h * evaluate(f, t_n + h / 2, x_n + k2 / 2)
        k4 = h * evaluate(f, t_n + h, x_n + k3)
        return x_n + (k1 + 2 * k2 + 2 * k3 + k4) / 6


class ExplicitRungeKutta(StepAlgorithm):
    """Forward substitution for strictly lower triangular A."""

    def __init__(self, tableau: ButcherTableau, order: int = 0) -> None:
        if not tableau.is_explicit:
            raise ConfigurationError(
                "ExplicitRungeKutta requires a strictly lower triangular A"
            )
        self.tableau = tableau
        self.order = order
        self.stages = tableau.s

    def step(
        self,
        f: DerivativeFunction,
        t_n: float,
        x_n: NDArray,
        h: float,
    ) -> NDArray:
        A, b, c = self.tableau.A, self.tableau.b, self.tableau.c
        s = self.tableau.s

        K = np.zeros((s,) + x_n.shape)
        for i in range(s):
            # Z_i = x_n + h Σ_{j<i} A[i,j] k_j
            z = x_n + h * (A[i, :i] @ K[:i]) if i > 0 else x_n
            K[i] = evaluate(f, t_n + c[i] * h, z)

        return x_n + h * (b @ K)

    def __repr__(self) -> str:
        return f"ExplicitRungeKutta(stages={self.stages}, order={self.order})"
