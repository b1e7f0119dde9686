"""Integration engine: fixed-step solve loop."""

import logging
from enum import Enum, auto
from typing import Optional, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from odestep.core.errors import ConfigurationError, ODEError
from odestep.core.problem import DerivativeFunction
from odestep.solvers.base import StepAlgorithm
from odestep.solvers.factory import create_step_algorithm
from odestep.stepping.controllers import Controller, StopAtTime
from odestep.stepping.recorders import (
    NullRecorder,
    Recorder,
    TimeSeriesRecorder,
)
from odestep.stepping.timeseries import TimeSeries

logger = logging.getLogger(__name__)


class SolverStatus(Enum):
    """Lifecycle of a run."""
    INITIALIZED = auto()  # no run yet
    RUNNING = auto()
    COMPLETED = auto()    # controller requested a normal stop
    FAILED = auto()       # step or controller raised


class Solver:
    """Solves dX/dt = f(t, X) from (t0, X0) with a fixed step.

    The solver is generic over the :class:`StepAlgorithm`. It keeps only the
    last committed (t, X) and the iteration counter; the trajectory is
    available through the recorder given to :meth:`solve`.

    One instance runs one solve at a time.
    """

    def __init__(self, algorithm: Union[StepAlgorithm, str] = "rk4") -> None:
        if isinstance(algorithm, str):
            algorithm = create_step_algorithm(algorithm)
        if not isinstance(algorithm, StepAlgorithm):
            raise ConfigurationError(
                f"expected a StepAlgorithm, got {type(algorithm).__name__}"
            )
        self.algorithm = algorithm
        self._t: Optional[float] = None
        self._x: Optional[NDArray] = None
        self._iterations = 0
        self._status = SolverStatus.INITIALIZED

    @property
    def status(self) -> SolverStatus:
        return self._status

    @property
    def iterations(self) -> int:
        """Number of steps committed by the current or last run."""
        return self._iterations

    def solve(
        self,
        f: DerivativeFunction,
        t0: float,
        x0: ArrayLike,
        h: float,
        controller: Controller,
        recorder: Optional[Recorder] = None,
    ) -> int:
        """
        Run the solve loop until the controller stops it.

        1. Start the controller (if it has ``start()``), record (t0, X0)
        2. X_{n+1} = step(f, t_n, X_n, h), t_{n+1} = t_n + h
        3. Record (t_{n+1}, X_{n+1}) and ask the controller
        4. Stop, or commit (t_{n+1}, X_{n+1}) and repeat from 2

        There is no iteration bound: a controller that never stops runs
        forever.

        Args:
            f: Derivative function
            t0: Initial time
            x0: Initial state (n,), never mutated
            h: Step size, must be positive
            controller: Stop controller
            recorder: Trajectory recorder (defaults to NullRecorder)

        Returns:
            Number of committed steps beyond the initial sample

        Raises:
            ConfigurationError: invalid arguments
            EvaluationError: f failed; the failing step is not recorded
            ControlError: the controller detected an abnormal condition

            Errors raised out of a run carry ``iterations``, the count
            reached before the failure.
        """
        if f is None or not callable(f):
            raise ConfigurationError("the derivative function f is not defined")
        if controller is None or not callable(controller):
            raise ConfigurationError("the stop controller is not defined")
        if not np.isfinite(h) or h <= 0:
            raise ConfigurationError(f"step size must be positive, got {h!r}")
        x = np.array(x0, dtype=float)
        if x.ndim != 1 or x.shape[0] == 0:
            raise ConfigurationError(
                f"initial state must be a non-empty vector, got shape {x.shape}"
            )
        if recorder is None:
            recorder = NullRecorder()

        t = float(t0)
        self._t, self._x = t, x
        self._iterations = 0
        self._status = SolverStatus.RUNNING
        logger.debug(
            "solve: %r, t0=%g, n=%d, h=%g", self.algorithm, t, x.shape[0], h
        )

        start = getattr(controller, "start", None)
        if start is not None:
            start()
        recorder.record(t, x)

        try:
            while True:
                x_next = self.algorithm.step(f, t, x, h)
                t_next = t + h
                recorder.record(t_next, x_next)

                if controller(t_next, x_next):
                    break

                t, x = t_next, x_next
                self._t, self._x = t, x
                self._iterations += 1
        except ODEError as exc:
            self._status = SolverStatus.FAILED
            exc.iterations = self._iterations
            logger.debug(
                "solve failed after %d iterations: %s", self._iterations, exc
            )
            raise
        except Exception:
            self._status = SolverStatus.FAILED
            raise

        self._status = SolverStatus.COMPLETED
        logger.debug(
            "solved in %d iterations, t=%g", self._iterations, self._t
        )
        return self._iterations

    def result(self) -> tuple[float, NDArray]:
        """Last committed (t, X). X is a copy."""
        if self._status == SolverStatus.INITIALIZED:
            raise ConfigurationError("no solve has been run")
        return self._t, self._x.copy()


def solve_to(
    f: DerivativeFunction,
    t0: float,
    x0: ArrayLike,
    h: float,
    t_max: float,
    method: Union[StepAlgorithm, str] = "rk4",
) -> TimeSeries:
    """
    Integrate from t0 to t_max and return the recorded trajectory.

    Args:
        f: Derivative function
        t0: Initial time
        x0: Initial state
        h: Step size
        t_max: Final time (the series ends with the first sample past it)
        method: Step algorithm or its name

    Returns:
        TimeSeries of every sample, initial condition included
    """
    recorder = TimeSeriesRecorder()
    Solver(method).solve(f, t0, x0, h, StopAtTime(t_max), recorder)
    return recorder.series
