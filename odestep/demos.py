"""Demo scenarios illustrating the solver on the example systems.

Every demo writes its trajectory as CSV into an output directory and, when
``postpro`` is set, the corresponding figures as PNG files.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable
import numpy as np

from odestep.core.errors import ConfigurationError
from odestep.plotting import (
    plot_first_return_map,
    plot_phase_2d,
    plot_phase_3d,
    plot_timeseries,
    save_figure,
)
from odestep.stepping.controllers import StopAtTime
from odestep.stepping.recorders import TimeSeriesRecorder
from odestep.stepping.solver import Solver
from odestep.stepping.timeseries import TimeSeries
from odestep.systems import (
    CascadingWaterTankSystem,
    LaserSystem,
    LorenzSystem,
    SpringSystem,
    SystemSolver,
    VolterraSystem,
    WaterTankSystem,
)

logger = logging.getLogger(__name__)

DemoFunction = Callable[[Path, bool], None]


@dataclass(frozen=True)
class Demo:
    label: str
    function: DemoFunction
    comment: str


def spring01(outdir: Path, postpro: bool) -> None:
    """Damped spring written as a plain function, Euler method."""
    k, m, a = 2.0, 1.0, 0.1

    def f(t, X):
        x, v = X
        return np.array([v, -x * k / m - v * a / m])

    # Euler needs a finer step than the RK methods
    t0, X0, h, tmax = 0.0, np.array([0.5, 0.0]), 0.01, 60.0

    solver = Solver("euler")
    recorder = TimeSeriesRecorder()
    n = solver.solve(f, t0, X0, h, StopAtTime(tmax), recorder)
    logger.info("Problem solved in %d iterations", n)
    t, X = solver.result()
    logger.info("t: %.2f, x: %.4f, v: %.4f", t, X[0], X[1])

    _save_spring(recorder.series, outdir, "spring01", postpro)


def spring02(outdir: Path, postpro: bool) -> None:
    """Same spring through SpringSystem, RK2 with a coarser step."""
    system = SpringSystem(k=2.0, m=1.0, a=0.1)
    problem = system.default_problem()

    solver = Solver("rk2")
    recorder = TimeSeriesRecorder()
    n = solver.solve(
        system.f, problem.t0, problem.x0, problem.step,
        StopAtTime(problem.t_max), recorder,
    )
    logger.info("Problem solved in %d iterations", n)
    t, X = solver.result()
    logger.info("t: %.2f, x: %.4f, v: %.4f", t, X[0], X[1])

    _save_spring(recorder.series, outdir, "spring02", postpro)


def _save_spring(series: TimeSeries, outdir: Path, tag: str, postpro: bool) -> None:
    names = ["x", "v"]
    series.to_csv(outdir / f"out.{tag}_data.csv", names)
    if postpro:
        save_figure(plot_timeseries(series, names), outdir / f"out.{tag}_timeseries.png")
        save_figure(plot_phase_2d(series, names, "x", "v"), outdir / f"out.{tag}_phase.png")


def spring03(outdir: Path, postpro: bool) -> None:
    """Euler, RK2 and RK4 against the analytic solution of the spring."""
    system = SpringSystem(k=1.4, m=1.0, a=0.1)
    x0 = 0.5
    t0, X0, h, tmax = 0.0, np.array([x0, 0.0]), 0.01, 60.0

    simulations = {}
    recorder = TimeSeriesRecorder()
    for method in ("euler", "rk2", "rk4"):
        recorder.series.clear()
        Solver(method).solve(system.f, t0, X0, h, StopAtTime(tmax), recorder)
        simulations[method] = recorder.series.clone()
        simulations[method].to_csv(outdir / f"out.spring03_simulation_{method}.csv")

    xanalytic = system.analytic_position(x0)
    reference = TimeSeries()
    for t in simulations["euler"].times:
        reference.add(t, [xanalytic(t)])
    reference.to_csv(outdir / "out.spring03_analytic.csv")

    xa = reference.states[:, 0]
    columns = [xa]
    for method in ("euler", "rk2", "rk4"):
        if not np.array_equal(simulations[method].times, reference.times):
            raise ConfigurationError(
                f"the {method} time grid differs from the analytic one"
            )
        columns.append(simulations[method].states[:, 0])
    for xm in columns[1:4]:
        columns.append((xm - xa) ** 2)

    names = ["xref", "xeuler", "xrk2", "xrk4", "deuler", "drk2", "drk4"]
    comparison = TimeSeries()
    for t, row in zip(reference.times, np.column_stack(columns)):
        comparison.add(t, row)
    comparison.to_csv(outdir / "out.spring03_data.csv", names)

    if postpro:
        figures = {
            "positions": ["xref", "xeuler", "xrk2", "xrk4"],
            "errors": ["deuler", "drk2", "drk4"],
            "errors_rk": ["drk2", "drk4"],
        }
        for tag, selected in figures.items():
            fig = plot_timeseries(comparison, names, columns=selected)
            save_figure(fig, outdir / f"out.spring03_{tag}.png")


def lorenz(outdir: Path, postpro: bool) -> None:
    """Lorenz chaotic attractor with RK4."""
    system = LorenzSystem(sigma=10.0, rho=28.0, beta=8.0 / 3.0)
    problem = system.default_problem()

    solver = Solver("rk4")
    recorder = TimeSeriesRecorder()
    n = solver.solve(
        system.f, problem.t0, problem.x0, problem.step,
        StopAtTime(problem.t_max), recorder,
    )
    logger.info("Problem solved in %d iterations", n)
    t, X = solver.result()
    logger.info("t: %.2f, x: %.4f, y: %.4f, z: %.4f", t, X[0], X[1], X[2])

    names = ["x", "y", "z"]
    recorder.series.to_csv(outdir / "out.lorenz_data.csv", names)
    if postpro:
        fig = plot_phase_3d(recorder.series, names, "x", "y", "z")
        save_figure(fig, outdir / "out.lorenz_attractor.png")


def laser01(outdir: Path, postpro: bool) -> None:
    """Chaotic laser light intensity."""
    system = LaserSystem.from_configuration("chaos")
    problem = system.default_problem()

    recorder = TimeSeriesRecorder()
    Solver("rk4").solve(
        system.f, problem.t0, problem.x0, problem.step,
        StopAtTime(problem.t_max), recorder,
    )

    names = ["L", "D", "Z"]
    recorder.series.to_csv(outdir / "out.laser01_data.csv", names)
    if postpro:
        fig = plot_timeseries(recorder.series, names, columns=["L", "D"], multi=True)
        save_figure(fig, outdir / "out.laser01_timeseries.png")


def laser02(outdir: Path, postpro: bool, returns: int = 10000) -> None:
    """First return map of the chaotic laser, sampled once per period."""
    system = LaserSystem.from_configuration("chaos")
    problem = system.default_problem()
    T = system.period
    h = problem.step

    # Let the transient settle on the attractor first
    solver = Solver("rk4")
    solver.solve(system.f, problem.t0, problem.x0, h, StopAtTime(100 * T))
    _, X = solver.result()

    strobe = TimeSeries()
    strobe.add(0, X)
    for i in range(returns):
        solver.solve(system.f, 0.0, X, h, StopAtTime(T))
        _, X = solver.result()
        strobe.add(i + 1, X)

    names = ["L", "D", "Z"]
    strobe.to_csv(outdir / "out.laser02_data.csv", names)
    if postpro:
        fig = plot_first_return_map(strobe, names, "L", "D")
        save_figure(fig, outdir / "out.laser02_return_map.png")


def _solve_system(system, outdir: Path, tag: str, names, postpro: bool, multi: bool) -> None:
    syssolver = SystemSolver(system)
    syssolver.solve()
    syssolver.save_timeseries(outdir / f"out.{tag}_data.csv", names)
    if postpro:
        syssolver.plot_timeseries(outdir / f"out.{tag}_timeseries.png", names, multi)


def watertank(outdir: Path, postpro: bool) -> None:
    """Single water tank filling in and leaking out."""
    _solve_system(WaterTankSystem(d=2, a=1), outdir, "watertank", ["h"], postpro, False)


def cwatertank(outdir: Path, postpro: bool) -> None:
    """Cascade of eight water tanks."""
    system = CascadingWaterTankSystem(d=2, a=1, n=8)
    names = [f"h{i}" for i in range(system.n)]
    _solve_system(system, outdir, "cwatertank", names, postpro, False)


def volterra(outdir: Path, postpro: bool) -> None:
    """Prey/predator populations."""
    system = VolterraSystem(a=2.0 / 3.0, b=4.0 / 3.0, d=1.0, g=1.0)
    _solve_system(system, outdir, "volterra", ["x", "y"], postpro, True)


DEMOS = (
    Demo("spring01", spring01, "damped spring simulation with basic implementation"),
    Demo("spring02", spring02, "damped spring simulation with structured implementation"),
    Demo("spring03", spring03, "damped spring simulation compared to the analytic solution"),
    Demo("lorenz", lorenz, "demonstration of the Lorenz chaotic attractor"),
    Demo("laser01", laser01, "demonstration of a chaotic laser dynamics"),
    Demo("laser02", laser02, "Poincaré map of a chaotic laser dynamics"),
    Demo("watertank", watertank, "water tank fill in/out"),
    Demo("cwatertank", cwatertank, "cascading water tank fill in/out"),
    Demo("volterra", volterra, "model of preys/predators populations"),
)


def get_demo(label: str) -> Demo:
    """Demo registered under ``label``."""
    for demo in DEMOS:
        if demo.label == label:
            return demo
    raise ConfigurationError(f"the demo {label} does not exist")
