"""Solve loop, stop controllers and trajectory recording."""

from odestep.stepping.controllers import (
    STOP_TIME_TOLERANCE,
    StopAtTime,
    MultiController,
    DivergenceGuard,
    WallClockLimit,
)
from odestep.stepping.recorders import (
    Recorder,
    NullRecorder,
    LogRecorder,
    TimeSeriesRecorder,
    MultiRecorder,
)
from odestep.stepping.solver import Solver, SolverStatus, solve_to
from odestep.stepping.timeseries import TimeData, TimeSeries

__all__ = [
    "STOP_TIME_TOLERANCE",
    "StopAtTime",
    "MultiController",
    "DivergenceGuard",
    "WallClockLimit",
    "Recorder",
    "NullRecorder",
    "LogRecorder",
    "TimeSeriesRecorder",
    "MultiRecorder",
    "Solver",
    "SolverStatus",
    "solve_to",
    "TimeData",
    "TimeSeries",
]
