"""Exception hierarchy for the integration engine."""

from typing import Optional


class ODEError(Exception):
    """Base class of every error raised by odestep.

    ``iterations`` is filled in by :class:`~odestep.stepping.solver.Solver`
    when the error ends a run: it holds the number of committed steps
    reached before the failure.
    """

    def __init__(self, message: str, iterations: Optional[int] = None):
        super().__init__(message)
        self.iterations = iterations


class ConfigurationError(ODEError, ValueError):
    """Invalid or missing arguments (derivative function, step size, names)."""


class EvaluationError(ODEError):
    """The derivative function failed for a given (t, X)."""

    def __init__(
        self,
        message: str,
        t: Optional[float] = None,
        iterations: Optional[int] = None,
    ):
        super().__init__(message, iterations=iterations)
        self.t = t


class ControlError(ODEError):
    """A stop controller detected an abnormal condition (e.g. divergence)."""
