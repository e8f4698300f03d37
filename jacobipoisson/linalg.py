import math
from jacobipoisson.config import DEFAULT_TOL
from jacobipoisson.kernel import squared_difference


def norm_difference(x, t, team=None, workers=None):
    """Euclidean norm of ``x - t`` over the interior points.

    The sum of squares is a prange reduction: every thread accumulates its
    own partial sum and numba combines the partials once at the join.
    """
    if not x.same_shape(t):
        raise ValueError('Cannot compare %r with %r' % (x, t))
    return math.sqrt(squared_difference(x, t, team=team, workers=workers))


def evaluate(x, t, tol=DEFAULT_TOL, team=None, workers=None):
    """Returns ``(residual, residual < tol)`` for successive iterates."""
    residual = norm_difference(x, t, team=team, workers=workers)
    return residual, residual < tol
