"""Stop controllers.

A controller is called with the latest (t, X) after every step and answers
whether the run should stop. Returning ``True`` is a normal stop; raising
:class:`~odestep.core.errors.ControlError` is an abnormal one and fails the
run. Any callable ``(t, x) -> bool`` can be used as a controller.

Controllers with per-run state also define ``start()``, which the solver
calls before the first step.
"""

import time
from typing import Callable
import numpy as np
from numpy.typing import NDArray

from odestep.core.errors import ConfigurationError, ControlError

STOP_TIME_TOLERANCE = 1e-8

Controller = Callable[[float, NDArray], bool]


class StopAtTime:
    """Stop once t exceeds ``t_max`` by more than ``tolerance``.

    A step landing on ``t_max`` (up to the tolerance) does not stop the run,
    so that t_max is the time of the last committed state.
    """

    def __init__(self, t_max: float, tolerance: float = STOP_TIME_TOLERANCE):
        if tolerance < 0:
            raise ConfigurationError(f"tolerance must be >= 0, got {tolerance}")
        self.t_max = t_max
        self.tolerance = tolerance

    def __call__(self, t: float, x: NDArray) -> bool:
        if abs(t - self.t_max) < self.tolerance or t <= self.t_max:
            return False
        return True

    def __repr__(self) -> str:
        return f"StopAtTime(t_max={self.t_max!r}, tolerance={self.tolerance!r})"


class MultiController:
    """Evaluates sub-controllers in order; the first stop wins.

    A :class:`ControlError` raised by a sub-controller propagates at once and
    the remaining controllers are not evaluated.
    """

    def __init__(self, *controllers: Controller) -> None:
        self.controllers = list(controllers)

    def start(self) -> None:
        """Forward the start of a run to the sub-controllers that track it."""
        for controller in self.controllers:
            start = getattr(controller, "start", None)
            if start is not None:
                start()

    def __call__(self, t: float, x: NDArray) -> bool:
        for controller in self.controllers:
            if controller(t, x):
                return True
        return False


class DivergenceGuard:
    """Fails the run when the state leaves the box |x_i| <= limit."""

    def __init__(self, limit: float) -> None:
        if not limit > 0:
            raise ConfigurationError(f"limit must be positive, got {limit}")
        self.limit = limit

    def __call__(self, t: float, x: NDArray) -> bool:
        if not np.all(np.isfinite(x)):
            raise ControlError(f"non-finite state at t={t:.6g}: {x}")
        if np.max(np.abs(x)) > self.limit:
            raise ControlError(
                f"state diverged at t={t:.6g}: max |x| = "
                f"{np.max(np.abs(x)):.6g} > {self.limit:.6g}"
            )
        return False


class WallClockLimit:
    """Fails the run once ``seconds`` of wall time have elapsed.

    :class:`~odestep.stepping.solver.Solver` calls :meth:`start` at the
    beginning of every run, so one instance can guard several runs. When
    used on its own, the clock starts at the first evaluation.
    """

    def __init__(self, seconds: float, clock: Callable[[], float] = time.monotonic):
        if not seconds > 0:
            raise ConfigurationError(f"seconds must be positive, got {seconds}")
        self.seconds = seconds
        self._clock = clock
        self._start = None

    def start(self) -> None:
        """Restart the clock."""
        self._start = self._clock()

    def __call__(self, t: float, x: NDArray) -> bool:
        now = self._clock()
        if self._start is None:
            self._start = now
        elapsed = now - self._start
        if elapsed > self.seconds:
            raise ControlError(
                f"wall clock limit of {self.seconds}s exceeded at t={t:.6g}"
            )
        return False
