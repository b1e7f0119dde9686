"""Trajectory recorders: side channel receiving every accepted (t, X)."""

import logging
from abc import ABC, abstractmethod
from typing import Optional
from numpy.typing import NDArray

from odestep.stepping.timeseries import TimeData, TimeSeries

logger = logging.getLogger(__name__)


class Recorder(ABC):
    """Receives the initial sample and one sample per computed step."""

    @abstractmethod
    def record(self, t: float, x: NDArray) -> None:
        ...


class NullRecorder(Recorder):
    """Discards every sample."""

    def record(self, t: float, x: NDArray) -> None:
        pass


class LogRecorder(Recorder):
    """Emits one log line per sample."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def record(self, t: float, x: NDArray) -> None:
        if not logger.isEnabledFor(self.level):
            return
        components = ", ".join(
            f"X{i}: {value:.4f}" for i, value in enumerate(x)
        )
        logger.log(self.level, "t: %.2f, %s", t, components)


class TimeSeriesRecorder(Recorder):
    """Accumulates samples into ``self.series``.

    Each sample holds its own copy of the state vector.
    """

    def __init__(self, series: Optional[TimeSeries] = None) -> None:
        self.series = series if series is not None else TimeSeries()

    def record(self, t: float, x: NDArray) -> None:
        self.series.append(TimeData(t, x))


class MultiRecorder(Recorder):
    """Forwards each sample to several recorders, in order."""

    def __init__(self, *recorders: Recorder) -> None:
        self.recorders = list(recorders)

    def record(self, t: float, x: NDArray) -> None:
        for recorder in self.recorders:
            recorder.record(t, x)
