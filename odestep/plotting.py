"""Matplotlib figures of time series and phase diagrams."""

import logging
from typing import Optional, Sequence
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from numpy.typing import NDArray

from odestep.core.errors import ConfigurationError
from odestep.stepping.timeseries import TimeSeries

logger = logging.getLogger(__name__)


def _column(series: TimeSeries, names: Sequence[str], name: str) -> NDArray:
    """State component of ``series`` called ``name``."""
    names = list(names)
    if len(names) != series.dim:
        raise ConfigurationError(
            f"the names {names} do not match the state dimension {series.dim}"
        )
    if name not in names:
        raise ConfigurationError(f"unknown column {name!r}, expected one of {names}")
    return series.states[:, names.index(name)]


def plot_timeseries(
    series: TimeSeries,
    names: Sequence[str],
    columns: Optional[Sequence[str]] = None,
    multi: bool = False,
) -> Figure:
    """
    Plot state components against time.

    Args:
        series: Time series to draw
        names: Name of every state component
        columns: Components to draw (all by default)
        multi: One subplot per component instead of a shared axis
    """
    columns = list(names) if columns is None else list(columns)
    t = series.times

    if multi:
        fig, axes = plt.subplots(len(columns), 1, sharex=True, squeeze=False)
        for ax, name in zip(axes[:, 0], columns):
            ax.plot(t, _column(series, names, name))
            ax.set_ylabel(name)
            ax.grid(True)
        axes[-1, 0].set_xlabel("t")
    else:
        fig, ax = plt.subplots()
        for name in columns:
            ax.plot(t, _column(series, names, name), label=name)
        ax.set_xlabel("t")
        ax.legend()
        ax.grid(True)
    return fig


def plot_phase_2d(
    series: TimeSeries, names: Sequence[str], xname: str, yname: str
) -> Figure:
    """Orbit in the (xname, yname) plane."""
    fig, ax = plt.subplots()
    ax.plot(_column(series, names, xname), _column(series, names, yname))
    ax.set_xlabel(xname)
    ax.set_ylabel(yname)
    ax.grid(True)
    return fig


def plot_phase_3d(
    series: TimeSeries,
    names: Sequence[str],
    xname: str,
    yname: str,
    zname: str,
) -> Figure:
    """Orbit in 3D phase space (e.g. the Lorenz attractor)."""
    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")
    ax.plot(
        _column(series, names, xname),
        _column(series, names, yname),
        _column(series, names, zname),
        linewidth=0.5,
    )
    ax.set_xlabel(xname)
    ax.set_ylabel(yname)
    ax.set_zlabel(zname)
    return fig


def plot_first_return_map(
    series: TimeSeries, names: Sequence[str], xname: str, yname: str
) -> Figure:
    """Scatter with one (xname, yname) point per stroboscopic sample."""
    fig, ax = plt.subplots()
    ax.scatter(
        _column(series, names, xname),
        _column(series, names, yname),
        s=1,
    )
    ax.set_xlabel(xname)
    ax.set_ylabel(yname)
    return fig


def save_figure(fig: Figure, path) -> None:
    """Write ``fig`` to ``path`` and release it."""
    logger.info("Saving figure %s", path)
    try:
        fig.savefig(path)
    finally:
        plt.close(fig)
