"""Step algorithm factory."""

from odestep.core.errors import ConfigurationError
from odestep.methods.runge_kutta import heun
from odestep.solvers.base import StepAlgorithm
from odestep.solvers.explicit import (
    EulerStep,
    RK2Step,
    RK4Step,
    ExplicitRungeKutta,
)

METHOD_NAMES = ("euler", "rk2", "midpoint", "heun", "rk4")


def create_step_algorithm(name: str) -> StepAlgorithm:
    """
    Build the step algorithm registered under ``name``.

    Args:
        name: One of ``euler``, ``rk2`` (alias ``midpoint``), ``heun``, ``rk4``

    Returns:
        A fresh, stateless step algorithm
    """
    key = name.lower()

    if key == "euler":
        return EulerStep()

    if key in ("rk2", "midpoint"):
        return RK2Step()

    if key == "heun":
        return ExplicitRungeKutta(heun(), order=2)

    if key == "rk4":
        return RK4Step()

    raise ConfigurationError(
        f"unknown step algorithm {name!r}, expected one of {METHOD_NAMES}"
    )
