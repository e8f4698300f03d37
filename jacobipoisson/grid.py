import numpy as np
from jacobipoisson.errors import GridAllocationError

HALO = 1


class Grid(object):
    """
    A (n + 2) x (m + 2) field of float64 values with a one point halo.

    Interior points are indexed by ``i`` in ``[1, n]`` and ``j`` in
    ``[1, m]``. The halo holds the homogeneous Dirichlet boundary and is
    zero for the lifetime of the grid: item assignment refuses halo points
    and kernels only ever write interior slices.
    """

    def __init__(self, n, m, data):
        """
        Initializes the grid around an existing buffer.

        Args:
            n (int): Number of interior rows.
            m (int): Number of interior columns.
            data (numpy.ndarray): Zeroed C-contiguous buffer of shape
                (n + 2, m + 2).
        """
        if data.shape != (n + 2 * HALO, m + 2 * HALO):
            raise ValueError('Buffer shape %s does not match a %dx%d grid' %
                             (data.shape, n, m))
        self.n = n
        self.m = m
        self.data = data

    @property
    def shape(self):
        return self.data.shape

    @property
    def stride(self):
        """Row length of the storage, halo included."""
        return self.m + 2 * HALO

    @property
    def flat(self):
        """Row-major view of the storage, indexed by :meth:`offset`."""
        return self.data.reshape(-1)

    @property
    def interior(self):
        """Read-only view of the interior points."""
        view = self.data[HALO:-HALO, HALO:-HALO]
        view.flags.writeable = False
        return view

    def offset(self, i, j):
        """Flat offset of point (i, j): ``i * stride + j``."""
        self._check_bounds(i, j)
        return i * self.stride + j

    def is_boundary(self, i, j):
        return i == 0 or j == 0 or i == self.n + 1 or j == self.m + 1

    def _check_bounds(self, i, j):
        if not (0 <= i <= self.n + 1 and 0 <= j <= self.m + 1):
            raise IndexError('Point (%d, %d) outside of a %dx%d grid' %
                             (i, j, self.n, self.m))

    def __getitem__(self, key):
        i, j = key
        self._check_bounds(i, j)
        return self.data[i, j]

    def __setitem__(self, key, value):
        i, j = key
        self._check_bounds(i, j)
        if self.is_boundary(i, j):
            raise IndexError('Boundary point (%d, %d) is fixed at zero' %
                             (i, j))
        self.data[i, j] = value

    def boundary_is_zero(self):
        d = self.data
        return not (d[0, :].any() or d[-1, :].any() or
                    d[:, 0].any() or d[:, -1].any())

    def same_shape(self, other):
        return self.n == other.n and self.m == other.m

    def __repr__(self):
        return 'Grid(n=%d, m=%d)' % (self.n, self.m)


def create_grid(n, m):
    """
    Allocate a zero initialized grid with n x m interior points.

    Args:
        n (int): Number of interior rows, at least 1.
        m (int): Number of interior columns, at least 1.

    Returns:
        Grid: A new grid whose every point, halo included, is zero.

    Raises:
        GridAllocationError: If the buffer cannot be allocated.
    """
    if n < 1 or m < 1:
        raise ValueError('Grid dimensions must be positive, got %dx%d' %
                         (n, m))
    try:
        data = np.zeros((n + 2 * HALO, m + 2 * HALO), dtype=np.float64)
    except MemoryError as e:
        raise GridAllocationError('Cannot allocate a %dx%d grid' %
                                  (n, m)) from e
    return Grid(n, m, data)


def create_grid_like(grid):
    """Allocate a zeroed grid with the same dimensions as ``grid``."""
    return create_grid(grid.n, grid.m)
