from jacobipoisson import __version__
from jacobipoisson.errors import OutputFileError
from jacobipoisson.solver import SolveState


def _open(path):
    try:
        return open(path, 'w')
    except OSError as e:
        raise OutputFileError('Cannot open %s for writing: %s' %
                              (path, e.strerror or e)) from e


def write_report(path, elapsed, result):
    """
    Write the run summary.

    Args:
        path (str): Output file.
        elapsed (float): Wall clock seconds spent in the solve.
        result (SolveResult): Outcome of the solve.

    Raises:
        OutputFileError: If ``path`` cannot be opened.
    """
    x = result.x
    with _open(path) as out:
        out.write("jacobipoisson %s, shared-memory threads\n" % __version__)
        out.write("Solve time of 'jacobi_poisson': %f seconds\n" % elapsed)
        out.write("Size: (N,M) = (%d, %d)\n" % (x.n, x.m))
        out.write("Threads used: %d\n" % result.workers)
        out.write("State: %s\n" % SolveState.names[result.state])
        out.write("Iterations: %d\n" % result.iterations)
        if result.residual is not None:
            out.write("Residual: %g\n" % result.residual)


def write_matrix(path, grid):
    """Dump the interior of ``grid``, one line per row, each value followed
    by a space."""
    with _open(path) as out:
        for row in grid.interior:
            out.write(''.join('%g ' % v for v in row))
            out.write('\n')
