"""Butcher tableau of an explicit Runge-Kutta method."""

from dataclasses import dataclass
from functools import cached_property
import numpy as np
from numpy.typing import NDArray

from odestep.core.errors import ConfigurationError


@dataclass(frozen=True)
class ButcherTableau:
    """Runge-Kutta tableau."""

    A: NDArray  # (s, s) - stage coefficients
    b: NDArray  # (s,)   - weights
    c: NDArray  # (s,)   - abscissae

    def __post_init__(self) -> None:
        A = np.atleast_2d(np.asarray(self.A, dtype=float))
        b = np.atleast_1d(np.asarray(self.b, dtype=float))
        c = np.atleast_1d(np.asarray(self.c, dtype=float))
        s = A.shape[0]
        if A.shape != (s, s) or b.shape != (s,) or c.shape != (s,):
            raise ConfigurationError(
                f"inconsistent tableau shapes A{A.shape}, b{b.shape}, c{c.shape}"
            )
        object.__setattr__(self, "A", A)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "c", c)

    @cached_property
    def s(self) -> int:
        """Number of stages."""
        return self.A.shape[0]

    @cached_property
    def is_explicit(self) -> bool:
        """True when A is strictly lower triangular."""
        return bool(np.allclose(self.A, np.tril(self.A, -1)))

    @cached_property
    def is_consistent(self) -> bool:
        """Weights sum to one and c matches the row sums of A."""
        return bool(
            np.isclose(np.sum(self.b), 1.0)
            and np.allclose(self.c, np.sum(self.A, axis=1))
        )
