"""Tests for the example dynamical systems."""

import numpy as np
import pytest

from odestep.core.errors import ConfigurationError
from odestep.core.problem import InitialValueProblem
from odestep.systems import (
    CascadingWaterTankSystem,
    LaserSystem,
    LorenzSystem,
    SpringSystem,
    SystemSolver,
    VolterraSystem,
    WaterTankSystem,
    laser_configurations,
    random_heights,
)


def test_spring_rate():
    system = SpringSystem(k=2.0, m=1.0, a=0.1)

    assert np.allclose(system.f(0.0, np.array([0.5, 1.0])), [1.0, -1.1])


def test_spring_analytic_initial_condition():
    """x(0) = x0 and v(0) = 0."""
    system = SpringSystem(k=1.4, m=1.0, a=0.1)
    x = system.analytic_position(0.5)
    eps = 1e-6

    assert x(0.0) == pytest.approx(0.5)
    assert (x(eps) - x(-eps)) / (2 * eps) == pytest.approx(0.0, abs=1e-6)


def test_lorenz_fixed_point():
    """(±sqrt(β(ρ-1)), ±sqrt(β(ρ-1)), ρ-1) is an equilibrium."""
    system = LorenzSystem()
    c = np.sqrt(system.beta * (system.rho - 1))

    assert np.allclose(system.f(0.0, np.array([c, c, system.rho - 1])), 0.0)


def test_laser_configurations_are_fresh():
    """Each call returns an independent mapping."""
    first = laser_configurations()
    first.pop("chaos")

    assert "chaos" in laser_configurations()


def test_laser_from_configuration():
    system = LaserSystem.from_configuration("chaos")

    assert system == LaserSystem(m=2.5e-2, g=1e-3, w=1e-2, a=1.1)
    assert system.period == pytest.approx(2 * np.pi / 1e-2)


def test_laser_custom_configuration():
    custom = {"mine": LaserSystem(m=0.0, g=1.0, w=1.0, a=1.0)}

    assert LaserSystem.from_configuration("mine", custom).m == 0.0
    with pytest.raises(ConfigurationError, match="chaos"):
        LaserSystem.from_configuration("nope")


def test_laser_default_problem():
    system = LaserSystem.from_configuration("1T_LONG_TRANSIENT")
    problem = system.default_problem()

    assert problem.n == 3
    assert problem.step == pytest.approx(system.period / 40)
    assert problem.t_max == pytest.approx(60 * system.period)
    assert np.allclose(system.f(0.0, problem.x0)[2], system.w)


def test_water_tank_equilibrium():
    system = WaterTankSystem(d=2.0, a=1.0)

    assert np.allclose(system.f(0.0, np.array([2.0])), 0.0)
    assert system.analytic_height(3.0, 0.0) == pytest.approx(3.0)


def test_water_tank_converges():
    system = WaterTankSystem(d=2.0, a=1.0)
    syssolver = SystemSolver(system)
    syssolver.solve()
    t, h = syssolver.solver.result()

    assert t == pytest.approx(8.0)
    assert h[0] == pytest.approx(system.analytic_height(3.0, t), abs=1e-7)


def test_cascading_tanks_flow():
    system = CascadingWaterTankSystem(d=2.0, a=1.0, n=3)
    dxdt = system.f(0.0, np.array([1.0, 2.0, 2.0]))

    assert np.allclose(dxdt, [1.0, -1.0, 0.0])


def test_cascading_tanks_seeded_problem():
    """The random initial heights are reproducible with a seed."""
    first = CascadingWaterTankSystem(n=4, seed=7).default_problem()
    second = CascadingWaterTankSystem(n=4, seed=7).default_problem()

    assert np.array_equal(first.x0, second.x0)
    assert first.n == 4
    assert first.t_max == pytest.approx(8.0)
    assert np.all(np.abs(first.x0 - 2.0) <= 0.2)


def test_cascading_tanks_requires_one_tank():
    with pytest.raises(ConfigurationError):
        CascadingWaterTankSystem(n=0)


def test_random_heights_range():
    heights = random_heights(100, 2.0, 0.4, seed=1)

    assert heights.shape == (100,)
    assert np.all(heights >= 1.8)
    assert np.all(heights < 2.2)


def test_volterra_equilibrium():
    system = VolterraSystem()

    assert np.allclose(system.f(0.0, system.equilibrium), 0.0)
    assert np.allclose(system.default_problem().x0, [0.8, 0.6])


def test_initial_value_problem_is_read_only():
    x0 = np.array([1.0, 2.0])
    problem = InitialValueProblem(t0=0.0, x0=x0, step=0.1, t_max=1.0)
    x0[0] = 5.0

    assert problem.x0[0] == 1.0
    with pytest.raises(ValueError):
        problem.x0[0] = 3.0


def test_system_solver_resets_series():
    syssolver = SystemSolver(VolterraSystem(), method="rk2")
    syssolver.solve()
    first = len(syssolver.series)
    syssolver.solve()

    assert len(syssolver.series) == first


def test_system_solver_custom_problem(tmp_path):
    syssolver = SystemSolver(WaterTankSystem())
    problem = InitialValueProblem(t0=0.0, x0=[0.0], step=0.5, t_max=1.0)

    n = syssolver.solve(problem)
    syssolver.save_timeseries(tmp_path / "tank.csv", ["h"])

    assert n == 2
    assert (tmp_path / "tank.csv").read_text().startswith("t;h\n0.0000;")
