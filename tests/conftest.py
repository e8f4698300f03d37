import pytest
from jacobipoisson.config import SolverConfig
from jacobipoisson.solver import make_rhs


@pytest.fixture
def tolerance():
    """Default convergence tolerance of the solver."""
    return 1e-6


@pytest.fixture
def rhs_2x2():
    """2x2 interior with h = 0.01, f = 1.5, so every interior b is 1.5e-4."""
    return make_rhs(2, 2, h=0.01, f=1.5)


@pytest.fixture
def rhs_small():
    """A non-square grid that needs a few hundred sweeps."""
    return make_rhs(12, 9, h=0.1, f=2.0)


@pytest.fixture
def serial_config():
    return SolverConfig(workers=1)


@pytest.fixture(params=[2, 3, 4])
def parallel_config(request):
    return SolverConfig(workers=request.param)
