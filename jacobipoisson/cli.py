import argparse
import logging
import os
import sys
import time
from jacobipoisson import __version__
from jacobipoisson.config import SolverConfig, DEFAULT_TOL, DEFAULT_MAXIT
from jacobipoisson.errors import OutputFileError
from jacobipoisson.report import write_matrix, write_report
from jacobipoisson.solver import make_rhs, solve
from jacobipoisson.team import create_team

logger = logging.getLogger(__name__)

DEFAULT_N = 50
DEFAULT_M = 50
# Invalid N falls back to 50 but invalid M falls back to 1. The asymmetry is
# kept as is and reported each time it applies.
INVALID_N = 50
INVALID_M = 1


def parse_dimension(name, value, default, fallback):
    if value is None:
        return default
    try:
        dim = int(value)
    except ValueError:
        dim = 0
    if dim < 1:
        logger.warning('Invalid %s=%r, using %d', name, value, fallback)
        return fallback
    return dim


def build_parser():
    parser = argparse.ArgumentParser(
        prog='jacobi-poisson',
        description='Solve the 2D Poisson equation with zero boundary '
                    'values using Jacobi iteration.')
    parser.add_argument('n', nargs='?', help='interior rows (default 50)')
    parser.add_argument('m', nargs='?', help='interior columns (default 50)')
    parser.add_argument('--threads', type=int, default=os.cpu_count() or 1,
                        help='worker threads (default: number of CPUs)')
    parser.add_argument('--h', type=float, default=0.01, help='mesh spacing')
    parser.add_argument('--f', type=float, default=1.5,
                        help='constant source term')
    parser.add_argument('--tol', type=float, default=DEFAULT_TOL)
    parser.add_argument('--maxit', type=int, default=DEFAULT_MAXIT)
    parser.add_argument('--report', default='output.txt',
                        help='run summary file')
    parser.add_argument('--matrix', default='matrix_poisson.txt',
                        help='solution dump file')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = [logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)]
    logging.basicConfig(level=level,
                        format='%(levelname)s %(name)s: %(message)s')

    n = parse_dimension('N', args.n, DEFAULT_N, INVALID_N)
    m = parse_dimension('M', args.m, DEFAULT_M, INVALID_M)
    try:
        config = SolverConfig(tol=args.tol, maxit=args.maxit,
                              workers=args.threads)
    except ValueError as e:
        logger.error('%s', e)
        return 2

    b = make_rhs(n, m, args.h, args.f, team=create_team(config.workers))

    start = time.time()
    result = solve(n, m, None, b, config=config)
    elapsed = time.time() - start
    logger.info('Solved %dx%d in %f seconds: %r', n, m, elapsed, result)

    try:
        write_report(args.report, elapsed, result)
        write_matrix(args.matrix, result.x)
    except OutputFileError as e:
        logger.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
