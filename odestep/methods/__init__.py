"""Library of explicit Runge-Kutta tableaux."""

from odestep.methods.runge_kutta import explicit_euler, midpoint, heun, rk4

__all__ = [
    "explicit_euler",
    "midpoint",
    "heun",
    "rk4",
]
