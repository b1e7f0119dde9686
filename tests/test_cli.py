"""Tests for the demo catalogue and the command line."""

import numpy as np
import pytest

from odestep.cli import main
from odestep.core.errors import ConfigurationError
from odestep.demos import DEMOS, get_demo, laser02
from odestep.export import read_csv


def test_demo_labels_unique():
    labels = [demo.label for demo in DEMOS]

    assert len(labels) == len(set(labels))
    assert "spring01" in labels and "volterra" in labels


def test_get_demo_unknown():
    with pytest.raises(ConfigurationError, match="does not exist"):
        get_demo("pendulum")


def test_list_demos(capsys):
    assert main(["-l"]) == 0

    out = capsys.readouterr().out
    for demo in DEMOS:
        assert demo.label in out


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_unknown_demo_exit_status(tmp_path):
    assert main(["-d", "pendulum", "-o", str(tmp_path)]) == 1


def test_run_watertank_demo(tmp_path):
    assert main(["-d", "watertank", "-o", str(tmp_path)]) == 0

    names, series = read_csv(tmp_path / "out.watertank_data.csv")
    assert names == ["h"]
    assert series.times[-2] == pytest.approx(8.0, abs=1e-4)


def test_run_volterra_demo_with_plots(tmp_path):
    assert main(["-d", "volterra", "-p", "-o", str(tmp_path / "out")]) == 0

    assert (tmp_path / "out" / "out.volterra_data.csv").exists()
    assert (tmp_path / "out" / "out.volterra_timeseries.png").exists()


def test_spring01_demo(tmp_path):
    get_demo("spring01").function(tmp_path, False)

    names, series = read_csv(tmp_path / "out.spring01_data.csv")
    assert names == ["x", "v"]
    assert len(series) == 6002


def test_spring03_demo(tmp_path):
    """Squared errors shrink with the order of the method."""
    get_demo("spring03").function(tmp_path, False)

    names, series = read_csv(tmp_path / "out.spring03_data.csv")
    errors = series.states[:, names.index("deuler"):]

    assert names[0] == "xref"
    assert np.all(errors.max(axis=0)[1:] < errors.max(axis=0)[0])
    assert errors[:, 2].max() < errors[:, 1].max()


def test_laser02_short_run(tmp_path):
    laser02(tmp_path, False, returns=3)

    names, series = read_csv(tmp_path / "out.laser02_data.csv")
    assert names == ["L", "D", "Z"]
    assert len(series) == 4
