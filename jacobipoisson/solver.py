import logging
import numpy as np
from jacobipoisson.config import SolverConfig
from jacobipoisson.grid import create_grid, create_grid_like
from jacobipoisson.kernel import copy_interior, fill_interior
from jacobipoisson.linalg import evaluate
from jacobipoisson.stencil import apply_stencil
from jacobipoisson.team import create_team

logger = logging.getLogger(__name__)


class SolveState(object):
    Running = 0
    Converged = 1
    Exhausted = 2

    names = {Running: 'running', Converged: 'converged',
             Exhausted: 'exhausted'}


def log_residual(k, residual):
    """Default residual sink."""
    logger.debug('Error at iteration %d: %g', k, residual)


class SolveResult(object):
    """
    Outcome of a solve.

    Attributes:
        x (Grid): The last iterate.
        state (int): SolveState.Converged or SolveState.Exhausted.
        iterations (int): Number of completed sweeps.
        residual (float): Residual of the last sweep, None if no sweep ran.
        workers (int): Size of the worker team that ran the solve.
    """

    __slots__ = ('x', 'state', 'iterations', 'residual', 'workers')

    def __init__(self, x, state, iterations, residual, workers):
        self.x = x
        self.state = state
        self.iterations = iterations
        self.residual = residual
        self.workers = workers

    @property
    def converged(self):
        return self.state == SolveState.Converged

    def __repr__(self):
        return ('SolveResult(state=%s, iterations=%d, residual=%r, '
                'workers=%d)' % (SolveState.names[self.state],
                                 self.iterations, self.residual,
                                 self.workers))


class IterationController(object):
    def __init__(self, config=None, sink=None):
        """
        Drives the sweep / evaluate / copy cycle.

        Args:
            config (SolverConfig): Tolerance, iteration cap and parallelism.
            sink (callable): Called with (iteration index, residual) once
                per sweep. Defaults to :func:`log_residual`.
        """
        self.config = config if config is not None else SolverConfig()
        self.sink = sink if sink is not None else log_residual

    def solve(self, x, b, team):
        """
        Iterate on ``x`` in place until convergence or the iteration cap.

        The iteration count and convergence flag are local to this call.
        They are only updated on the calling thread, after the reduction has
        been joined and before the copy phase is forked.
        """
        config = self.config
        t = create_grid_like(x)
        k = 0
        residual = None
        state = SolveState.Running
        while state == SolveState.Running:
            if k >= config.maxit:
                state = SolveState.Exhausted
                break
            apply_stencil(x, b, t, team=team,
                          workers=config.phase_workers('stencil'))
            residual, converged = evaluate(
                x, t, config.tol, team=team,
                workers=config.phase_workers('reduction'))
            self.sink(k, residual)
            k += 1
            if converged:
                state = SolveState.Converged
            else:
                copy_interior(x, t, team=team,
                              workers=config.phase_workers('copy'))
        logger.info('Solve %s after %d iterations (residual %s)',
                    SolveState.names[state], k,
                    'n/a' if residual is None else '%g' % residual)
        return SolveResult(x, state, k, residual, team.num_workers)


def solve(n, m, x, b, config=None, sink=None):
    """
    Solve the Poisson system with zero Dirichlet boundary by Jacobi
    iteration.

    Args:
        n (int): Number of interior rows.
        m (int): Number of interior columns.
        x (Grid): Initial guess, updated in place. Zero when None.
        b (Grid): Right hand side, h^2 f on the interior.
        config (SolverConfig): Solver settings.
        sink (callable): Residual sink, see :class:`IterationController`.

    Returns:
        SolveResult: The final iterate and how the solve ended. Running out
        of iterations is reported through ``state``, not raised.
    """
    if config is None:
        config = SolverConfig()
    if x is None:
        x = create_grid(n, m)
    for name, grid in (('x', x), ('b', b)):
        if (grid.n, grid.m) != (n, m):
            raise ValueError('%s is %dx%d, expected %dx%d' %
                             (name, grid.n, grid.m, n, m))
    if x is b or np.may_share_memory(x.data, b.data):
        raise ValueError('x must not alias b')
    team = create_team(config.workers)
    return IterationController(config, sink).solve(x, b, team)


def make_rhs(n, m, h=0.01, f=1.5, team=None):
    """Right hand side for a constant source: h^2 f on every interior point."""
    b = create_grid(n, m)
    fill_interior(b, h * h * f, team=team)
    return b
