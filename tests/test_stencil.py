import numpy as np
import pytest
from jacobipoisson.grid import create_grid
from jacobipoisson.kernel import copy_interior
from jacobipoisson.solver import make_rhs
from jacobipoisson.stencil import apply_stencil
from jacobipoisson.team import Team


def reference_sweep(x, b):
    """Point by point sweep straight from the 5-point formula."""
    t = np.zeros_like(x.data)
    for i in range(1, x.n + 1):
        for j in range(1, x.m + 1):
            t[i, j] = (b[i, j] + x[i + 1, j] + x[i - 1, j] +
                       x[i, j + 1] + x[i, j - 1]) / 4.0
    return t


def random_grid(n, m, seed):
    rng = np.random.default_rng(seed)
    g = create_grid(n, m)
    g.data[1:-1, 1:-1] = rng.random((n, m))
    return g


def test_single_point():
    x = create_grid(1, 1)
    b = create_grid(1, 1)
    b[1, 1] = 3.0
    t = apply_stencil(x, b)
    assert t[1, 1] == 0.75
    assert t.boundary_is_zero()


def test_matches_point_formula():
    x = random_grid(5, 7, 0)
    b = random_grid(5, 7, 1)
    t = apply_stencil(x, b)
    np.testing.assert_array_equal(t.data, reference_sweep(x, b))


def test_inputs_are_not_modified():
    x = random_grid(4, 3, 2)
    b = random_grid(4, 3, 3)
    x0, b0 = x.data.copy(), b.data.copy()
    apply_stencil(x, b)
    np.testing.assert_array_equal(x.data, x0)
    np.testing.assert_array_equal(b.data, b0)


@pytest.mark.parametrize('workers', [2, 3, 8])
def test_parallel_sweep_is_exact(workers):
    x = random_grid(9, 6, 4)
    b = random_grid(9, 6, 5)
    expected = apply_stencil(x, b)
    t = create_grid(9, 6)
    team = Team(workers)
    out = apply_stencil(x, b, t, team=team)
    assert out is t
    np.testing.assert_array_equal(t.data, expected.data)


def test_boundary_stays_zero_over_iterations():
    b = make_rhs(6, 4, h=0.5, f=1.0)
    x = create_grid(6, 4)
    t = create_grid(6, 4)
    team = Team(3)
    for _ in range(25):
        apply_stencil(x, b, t, team=team)
        assert t.boundary_is_zero()
        copy_interior(x, t, team=team)
        assert x.boundary_is_zero()
    assert x.interior.min() > 0


def test_shape_mismatch():
    with pytest.raises(ValueError):
        apply_stencil(create_grid(2, 2), create_grid(2, 3))
    x = create_grid(2, 2)
    with pytest.raises(ValueError):
        apply_stencil(x, create_grid(2, 2), x)
