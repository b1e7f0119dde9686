"""
odestep: explicit fixed-step solvers for ordinary differential equations.

Solves initial value problems dX/dt = f(t, X), X(t0) = X0 with:
- Euler, RK2 (midpoint) and RK4 step algorithms
- Pluggable stop controllers (time limit, divergence guard, ...)
- Pluggable trajectory recorders (discard, log, time series)
- CSV export and matplotlib plotting of the recorded trajectories
"""

__version__ = "0.1.0"

from odestep.core.errors import (
    ODEError,
    ConfigurationError,
    EvaluationError,
    ControlError,
)
from odestep.solvers import EulerStep, RK2Step, RK4Step, create_step_algorithm
from odestep.stepping import (
    StopAtTime,
    MultiController,
    NullRecorder,
    LogRecorder,
    TimeSeriesRecorder,
    Solver,
    solve_to,
    TimeData,
    TimeSeries,
)

__all__ = [
    "ODEError",
    "ConfigurationError",
    "EvaluationError",
    "ControlError",
    "EulerStep",
    "RK2Step",
    "RK4Step",
    "create_step_algorithm",
    "StopAtTime",
    "MultiController",
    "NullRecorder",
    "LogRecorder",
    "TimeSeriesRecorder",
    "Solver",
    "solve_to",
    "TimeData",
    "TimeSeries",
]
