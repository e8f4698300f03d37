from jacobipoisson.grid import create_grid_like
from jacobipoisson.kernel import jacobi_step


def apply_stencil(x, b, t=None, team=None, workers=None):
    """
    One Jacobi sweep of the 5-point Laplacian.

    For every interior point
    ``t[i, j] = (b[i, j] + x[i+1, j] + x[i-1, j] + x[i, j+1] + x[i, j-1]) / 4``.
    Output points do not depend on each other so interior rows are split
    across the team.

    Args:
        x (Grid): Current iterate, read only.
        b (Grid): Right hand side, read only.
        t (Grid): Output grid. A new zeroed grid is allocated when None.
        team (Team): Workers to run the sweep on, serial when None.
        workers (int): Number of team workers to use for this sweep.

    Returns:
        Grid: ``t``, holding the next iterate.
    """
    if t is None:
        t = create_grid_like(x)
    if not (x.same_shape(b) and x.same_shape(t)):
        raise ValueError('x, b and t must have the same shape, got %r, %r '
                         'and %r' % (x, b, t))
    if t is x or t is b:
        raise ValueError('t must not alias x or b')
    jacobi_step(x, b, t, team=team, workers=workers)
    return t
