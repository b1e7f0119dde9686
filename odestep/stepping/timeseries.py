"""Trajectory samples and their ordered collection."""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class TimeData:
    """One sample (t, X) of a trajectory.

    ``x`` is a private, read-only copy of the state given at construction.
    """

    t: float
    x: NDArray = field(compare=False)

    def __post_init__(self) -> None:
        x = np.array(self.x, dtype=float)
        x.flags.writeable = False
        object.__setattr__(self, "t", float(self.t))
        object.__setattr__(self, "x", x)

    def clone(self) -> "TimeData":
        """Deep copy."""
        return TimeData(self.t, self.x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeData):
            return NotImplemented
        return self.t == other.t and np.array_equal(self.x, other.x)

    def __str__(self) -> str:
        return f"t: {self.t:.4f}, x: {self.x}"


class TimeSeries:
    """Append-only sequence of :class:`TimeData`, in time order."""

    def __init__(self, data: Optional[Sequence[TimeData]] = None) -> None:
        self._data: list[TimeData] = list(data) if data is not None else []

    def append(self, data: TimeData) -> None:
        """Add a sample at the end of the series."""
        self._data.append(data)

    def add(self, t: float, x: ArrayLike) -> None:
        """Shortcut for ``append(TimeData(t, x))``."""
        self._data.append(TimeData(t, x))

    def clear(self) -> None:
        """Reset the series to zero samples."""
        self._data = []

    def clone(self) -> "TimeSeries":
        """Deep copy of the series."""
        return TimeSeries([data.clone() for data in self._data])

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[TimeData]:
        return iter(self._data)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return TimeSeries(self._data[index])
        return self._data[index]

    def __bool__(self) -> bool:
        return bool(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSeries):
            return NotImplemented
        return self._data == other._data

    @property
    def dim(self) -> int:
        """State dimension (0 for an empty series)."""
        if not self._data:
            return 0
        return self._data[0].x.shape[0]

    @property
    def times(self) -> NDArray:
        """Sample times, shape (N,)."""
        return np.array([data.t for data in self._data], dtype=float)

    @property
    def states(self) -> NDArray:
        """Sample states, shape (N, n)."""
        if not self._data:
            return np.zeros((0, 0))
        return np.vstack([data.x for data in self._data])

    def to_csv(self, path, names: Optional[Sequence[str]] = None) -> None:
        """Write the series with :func:`odestep.export.write_csv`."""
        from odestep.export import write_csv

        write_csv(self, path, names)

    def __str__(self) -> str:
        return "".join(f"{data}\n" for data in self._data)

    def __repr__(self) -> str:
        return f"TimeSeries(len={len(self)}, dim={self.dim})"
