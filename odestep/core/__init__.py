"""Core contracts: errors, problem description and method tableaux."""

from odestep.core.errors import (
    ODEError,
    ConfigurationError,
    EvaluationError,
    ControlError,
)
from odestep.core.method import ButcherTableau
from odestep.core.problem import DerivativeFunction, InitialValueProblem

__all__ = [
    "ODEError",
    "ConfigurationError",
    "EvaluationError",
    "ControlError",
    "ButcherTableau",
    "DerivativeFunction",
    "InitialValueProblem",
]
