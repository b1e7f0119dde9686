"""Dynamical system interface and the default solver setup around it."""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union
from numpy.typing import ArrayLike, NDArray

from odestep.core.problem import InitialValueProblem
from odestep.solvers.base import StepAlgorithm
from odestep.stepping.controllers import StopAtTime
from odestep.stepping.recorders import TimeSeriesRecorder
from odestep.stepping.solver import Solver
from odestep.stepping.timeseries import TimeSeries

logger = logging.getLogger(__name__)


class System(ABC):
    """A dynamical system governed by dX/dt = f(t, X)."""

    @abstractmethod
    def f(self, t: float, x: NDArray) -> ArrayLike:
        """Rate function of the system."""
        ...

    @abstractmethod
    def default_problem(self) -> InitialValueProblem:
        """Initial condition, step and final time giving a meaningful run."""
        ...


class SystemSolver:
    """Solves a :class:`System` with StopAtTime and a time series recorder.

    RK4 unless another method is given.
    """

    def __init__(
        self,
        system: System,
        method: Union[StepAlgorithm, str] = "rk4",
    ) -> None:
        self.system = system
        self.solver = Solver(method)
        self.recorder = TimeSeriesRecorder()

    @property
    def series(self) -> TimeSeries:
        """Trajectory recorded by the last :meth:`solve`."""
        return self.recorder.series

    def solve(self, problem: Optional[InitialValueProblem] = None) -> int:
        """
        Solve from ``problem`` (the system's default problem if omitted).

        The recorded series is reset first.

        Returns:
            Number of iterations
        """
        if problem is None:
            problem = self.system.default_problem()
        self.recorder.series.clear()
        n = self.solver.solve(
            self.system.f,
            problem.t0,
            problem.x0,
            problem.step,
            StopAtTime(problem.t_max),
            self.recorder,
        )
        logger.debug("number of iterations: %d", n)
        return n

    def save_timeseries(self, path, names: Sequence[str]) -> None:
        """Write the recorded series as CSV."""
        self.series.to_csv(path, names)

    def plot_timeseries(self, path, names: Sequence[str], multi: bool = False) -> None:
        """Draw the recorded series into the image file ``path``."""
        from odestep.plotting import plot_timeseries, save_figure

        save_figure(plot_timeseries(self.series, names, multi=multi), path)
