"""Tests for Butcher tableaux."""

import numpy as np
import pytest

from odestep.core.errors import ConfigurationError
from odestep.core.method import ButcherTableau
from odestep.methods.runge_kutta import explicit_euler, midpoint, heun, rk4


def test_explicit_euler_structure():
    """Test explicit Euler tableau."""
    method = explicit_euler()

    assert method.s == 1
    assert method.is_explicit
    assert method.is_consistent
    assert np.allclose(method.A, 0.0)
    assert np.allclose(method.c, 0.0)


def test_midpoint_structure():
    """Test explicit midpoint tableau."""
    method = midpoint()

    assert method.s == 2
    assert method.is_explicit
    assert method.is_consistent
    assert np.allclose(method.b, [0.0, 1.0])
    assert np.allclose(method.c, [0.0, 0.5])


def test_rk4_butcher_tableau():
    """Test RK4 tableau values."""
    method = rk4()

    assert method.s == 4
    assert method.is_explicit
    assert method.is_consistent
    assert np.isclose(method.A[1, 0], 0.5)
    assert np.isclose(method.A[2, 1], 0.5)
    assert np.isclose(method.A[3, 2], 1.0)
    assert np.allclose(method.b, [1.0/6.0, 1.0/3.0, 1.0/3.0, 1.0/6.0])
    assert np.allclose(method.c, [0.0, 0.5, 0.5, 1.0])


@pytest.mark.parametrize("factory", [explicit_euler, midpoint, heun, rk4])
def test_weights_sum_to_one(factory):
    """Every library method is consistent."""
    assert np.isclose(np.sum(factory().b), 1.0)


def test_implicit_tableau_detected():
    """A non strictly lower triangular A is not explicit."""
    method = ButcherTableau(A=[[0.5]], b=[1.0], c=[0.5])

    assert not method.is_explicit


def test_inconsistent_shapes_rejected():
    """Mismatched A, b, c shapes raise ConfigurationError."""
    with pytest.raises(ConfigurationError):
        ButcherTableau(A=np.zeros((2, 2)), b=[1.0], c=[0.0, 0.0])


def test_tableau_is_frozen():
    """Tableaux are immutable."""
    method = rk4()

    with pytest.raises(AttributeError):
        method.A = np.eye(4)
