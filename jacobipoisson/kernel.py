import functools
from numba import njit, prange
from jacobipoisson.grid import Grid
from jacobipoisson.team import SerialTeam

# Kernels loop over interior rows and columns of the raw buffers, so halo
# rows and columns are never written. Rows are split across threads by
# prange.


def kernel(f):
    """Decorator compiling ``f`` into a parallel numba kernel.

    The wrapped function is called as ``f(*args, team=None, workers=None)``
    where grid arguments are passed as :class:`Grid` objects. It runs on
    ``workers`` threads of ``team`` and returns the kernel's result once
    every thread is done.
    """
    compiled = njit(parallel=True, cache=True)(f)

    @functools.wraps(f)
    def wrapper(*args, team=None, workers=None):
        if team is None:
            team = SerialTeam()
        arrays = [a.data if isinstance(a, Grid) else a for a in args]
        return team.run(compiled, *arrays, workers=workers)

    return wrapper


@kernel
def jacobi_step(x, b, t):
    """t = (b + north + south + east + west) / 4 on the interior."""
    for i in prange(1, x.shape[0] - 1):
        for j in range(1, x.shape[1] - 1):
            t[i, j] = (b[i, j] + x[i + 1, j] + x[i - 1, j] +
                       x[i, j + 1] + x[i, j - 1]) / 4.0


@kernel
def squared_difference(x, t):
    s = 0.0
    for i in prange(1, x.shape[0] - 1):
        for j in range(1, x.shape[1] - 1):
            d = x[i, j] - t[i, j]
            s += d * d
    return s


@kernel
def copy_interior(dst, src):
    for i in prange(1, dst.shape[0] - 1):
        for j in range(1, dst.shape[1] - 1):
            dst[i, j] = src[i, j]


@kernel
def fill_interior(grid, value):
    for i in prange(1, grid.shape[0] - 1):
        for j in range(1, grid.shape[1] - 1):
            grid[i, j] = value
