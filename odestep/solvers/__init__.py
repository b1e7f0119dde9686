"""Fixed-step explicit algorithms."""

from odestep.solvers.base import StepAlgorithm
from odestep.solvers.explicit import (
    EulerStep,
    RK2Step,
    RK4Step,
    ExplicitRungeKutta,
)
from odestep.solvers.factory import create_step_algorithm

__all__ = [
    "StepAlgorithm",
    "EulerStep",
    "RK2Step",
    "RK4Step",
    "ExplicitRungeKutta",
    "create_step_algorithm",
]
