"""Problem specification protocols."""

from dataclasses import dataclass, field
from typing import Protocol
import numpy as np
from numpy.typing import ArrayLike, NDArray


class DerivativeFunction(Protocol):
    """Right-hand side of dX/dt = f(t, X).

    Must return an array of the same length as ``x``. Mathematically
    invalid operations (division by zero, log of a non-positive number...)
    are reported by raising; the solver treats them as fatal.
    """

    def __call__(self, t: float, x: NDArray) -> ArrayLike:
        ...


@dataclass(frozen=True)
class InitialValueProblem:
    """Initial condition plus the solving conditions of a run."""

    t0: float
    x0: NDArray = field(repr=False)
    step: float
    t_max: float

    def __post_init__(self) -> None:
        x0 = np.array(self.x0, dtype=float)
        x0.flags.writeable = False
        object.__setattr__(self, "x0", x0)

    @property
    def n(self) -> int:
        """State dimension."""
        return self.x0.shape[0]

