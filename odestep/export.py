"""CSV export of time series.

Format: ``;``-separated, header ``t;<name0>;<name1>;...``, one row per
sample, time with 4 decimals and state components with 12 decimals.
"""

import logging
from os import PathLike
from typing import Optional, Sequence, Union
import numpy as np

from odestep.core.errors import ConfigurationError
from odestep.stepping.timeseries import TimeSeries

logger = logging.getLogger(__name__)

DELIMITER = ";"
TIME_FORMAT = "%.4f"
STATE_FORMAT = "%.12f"

PathType = Union[str, PathLike]


def default_names(dim: int) -> list[str]:
    """Column names ``x0, x1, ...``."""
    return [f"x{j}" for j in range(dim)]


def write_csv(
    series: TimeSeries,
    path: PathType,
    names: Optional[Sequence[str]] = None,
) -> None:
    """
    Save ``series`` to ``path``.

    Args:
        series: Non-empty time series
        path: Destination file, overwritten
        names: One name per state component (defaults to x0, x1, ...)

    Raises:
        ConfigurationError: empty series or wrong number of names
        OSError: the file cannot be written
    """
    if len(series) == 0:
        raise ConfigurationError("the time series has no data")
    dim = series.dim
    if names is None:
        names = default_names(dim)
    names = list(names)
    if len(names) != dim:
        raise ConfigurationError(
            f"the names {names} do not match the state dimension {dim}"
        )

    logger.info("Creating the data file %s containing the time series %s", path, names)
    table = np.column_stack([series.times, series.states])
    np.savetxt(
        path,
        table,
        fmt=[TIME_FORMAT] + [STATE_FORMAT] * dim,
        delimiter=DELIMITER,
        header=DELIMITER.join(["t"] + names),
        comments="",
    )


def read_csv(path: PathType) -> tuple[list[str], TimeSeries]:
    """
    Load a file written by :func:`write_csv`.

    Returns:
        names: State component names (time column excluded)
        series: The samples
    """
    with open(path) as stream:
        header = stream.readline().strip()
        columns = header.split(DELIMITER)
        if not columns or columns[0] != "t":
            raise ConfigurationError(f"{path}: not a time series file")
        table = np.loadtxt(stream, delimiter=DELIMITER, ndmin=2)
    if table.size and table.shape[1] != len(columns):
        raise ConfigurationError(
            f"{path}: the header has {len(columns)} columns, "
            f"the rows have {table.shape[1]}"
        )

    names = columns[1:]
    series = TimeSeries()
    for row in table:
        series.add(row[0], row[1:])
    return names, series
