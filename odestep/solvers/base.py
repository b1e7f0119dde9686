"""Base step algorithm interface."""

from abc import ABC, abstractmethod
import numpy as np
from numpy.typing import NDArray

from odestep.core.errors import EvaluationError
from odestep.core.problem import DerivativeFunction


class StepAlgorithm(ABC):
    """Advances the state of an ODE by one fixed step.

    Implementations are stateless: the same instance can be shared between
    solvers. They never mutate ``x_n`` and always return a new array.
    """

    order: int = 0
    stages: int = 0

    @abstractmethod
    def step(
        self,
        f: DerivativeFunction,
        t_n: float,
        x_n: NDArray,
        h: float,
    ) -> NDArray:
        """
        Compute X(t_n + h) from X(t_n).

        Args:
            f: Derivative function dX/dt = f(t, X)
            t_n: Time at start of step
            x_n: State at start of step (n,)
            h: Step size

        Returns:
            State at t_n + h (n,)

        Raises:
            EvaluationError: f failed at one of the stages
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def evaluate(f: DerivativeFunction, t: float, x: NDArray) -> NDArray:
    """Evaluate f(t, x) and check that it returns a vector shaped like x.

    Domain errors (including numpy floating point errors) are reported as
    :class:`EvaluationError` chained to the original exception.
    """
    try:
        with np.errstate(divide="raise", invalid="raise", over="raise"):
            slope = np.asarray(f(t, x), dtype=float)
    except EvaluationError:
        raise
    except (ArithmeticError, ValueError) as exc:
        raise EvaluationError(
            f"derivative evaluation failed at t={t!r}: {exc}", t=t
        ) from exc

    if slope.shape != x.shape:
        raise EvaluationError(
            f"derivative returned shape {slope.shape} at t={t!r}, "
            f"expected {x.shape}",
            t=t,
        )
    return slope
