"""End-to-end integration scenarios."""

import numpy as np
import pytest

from odestep.core.errors import ConfigurationError
from odestep.export import write_csv
from odestep.stepping.controllers import StopAtTime
from odestep.stepping.recorders import TimeSeriesRecorder
from odestep.stepping.solver import Solver
from odestep.stepping.timeseries import TimeSeries
from odestep.systems import SpringSystem, VolterraSystem, SystemSolver


def test_euler_damped_spring():
    """Euler on the damped spring, h=0.01 up to t=60."""
    k, m, a = 2.0, 1.0, 0.1

    def f(t, X):
        x, v = X
        return np.array([v, -x * k / m - v * a / m])

    solver = Solver("euler")
    n = solver.solve(f, 0.0, np.array([0.5, 0.0]), 0.01, StopAtTime(60.0))
    t, X = solver.result()

    assert n == 6000
    assert np.isclose(t, 60.0)
    assert np.all(np.isfinite(X))
    assert abs(X[0]) < 0.5


def test_volterra_populations_stay_positive():
    """Four pseudo periods around the equilibrium: no extinction."""
    system = VolterraSystem(a=2.0 / 3.0, b=4.0 / 3.0, d=1.0, g=1.0)
    syssolver = SystemSolver(system)

    n = syssolver.solve()
    states = syssolver.series.states

    assert n == 160
    assert np.all(states > 0.0)
    assert syssolver.series.times[-2] == pytest.approx(4 * system.period)


def test_export_empty_series_fails(tmp_path):
    """Exporting an empty TimeSeries raises."""
    with pytest.raises(ConfigurationError):
        write_csv(TimeSeries(), tmp_path / "empty.csv")


def _max_error(method, h, system, x0, tmax):
    recorder = TimeSeriesRecorder()
    Solver(method).solve(system.f, 0.0, [x0, 0.0], h, StopAtTime(tmax), recorder)
    exact = system.analytic_position(x0)
    # the last sample lies past tmax
    samples = recorder.series[:-1]
    return max(abs(data.x[0] - exact(data.t)) for data in samples)


@pytest.mark.parametrize(
    "method, expected_ratio",
    [("euler", 2.0), ("rk2", 4.0), ("rk4", 16.0)],
)
def test_order_of_accuracy(method, expected_ratio):
    """Halving h divides the error by 2^order."""
    system = SpringSystem(k=1.4, m=1.0, a=0.1)

    coarse = _max_error(method, 0.04, system, 0.5, 2.0)
    fine = _max_error(method, 0.02, system, 0.5, 2.0)

    ratio = coarse / fine
    assert ratio == pytest.approx(expected_ratio, rel=0.15)


def test_higher_order_is_more_accurate():
    """At the same step, RK4 < RK2 < Euler in error."""
    system = SpringSystem(k=1.4, m=1.0, a=0.1)

    errors = [_max_error(method, 0.01, system, 0.5, 10.0) for method in ("euler", "rk2", "rk4")]

    assert errors[2] < errors[1] < errors[0]
