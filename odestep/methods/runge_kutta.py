"""Standard explicit Runge-Kutta tableaux."""

import numpy as np
from odestep.core.method import ButcherTableau


def explicit_euler() -> ButcherTableau:
    """Forward Euler method (1st order)."""
    A = np.array([[0.0]])
    b = np.array([1.0])
    c = np.array([0.0])
    return ButcherTableau(A=A, b=b, c=c)


def midpoint() -> ButcherTableau:
    """Explicit midpoint method (2nd order)."""
    A = np.array([
        [0.0, 0.0],
        [0.5, 0.0],
    ])
    b = np.array([0.0, 1.0])
    c = np.array([0.0, 0.5])
    return ButcherTableau(A=A, b=b, c=c)


def heun() -> ButcherTableau:
    """Heun's method (2nd order)."""
    A = np.array([
        [0.0, 0.0],
        [1.0, 0.0],
    ])
    b = np.array([0.5, 0.5])
    c = np.array([0.0, 1.0])
    return ButcherTableau(A=A, b=b, c=c)


def rk4() -> ButcherTableau:
    """Classic 4th-order Runge-Kutta method."""
    A = np.array([
        [0.0, 0.0, 0.0, 0.0],
        [0.5, 0.0, 0.0, 0.0],
        [0.0, 0.5, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
    ])
    b = np.array([1.0/6.0, 1.0/3.0, 1.0/3.0, 1.0/6.0])
    c = np.array([0.0, 0.5, 0.5, 1.0])
    return ButcherTableau(A=A, b=b, c=c)
